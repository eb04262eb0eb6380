from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMING_SOON = "coming_soon"


class ButtonAction(str, Enum):
    VIEW_DETAILS = "view_details"
    JOIN_TESTNET = "join_testnet"
    GET_NOTIFIED = "get_notified"


class EventDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    subtitle: str = ""
    status: EventStatus = EventStatus.UPCOMING
    # Free text such as "2 days left"; only shown for upcoming events
    time_left: str | None = None
    button_text: str = "View Details"
    button_action: ButtonAction = ButtonAction.VIEW_DETAILS


class EventRecord(EventDraft):
    id: str

    @property
    def shows_time_left(self) -> bool:
        return self.status is EventStatus.UPCOMING and bool(self.time_left)
