from __future__ import annotations

from typing import Any

from airdrop_hub.domain.services.notifications import Notification
from airdrop_hub.domain.services.records import GatedRecordStore
from airdrop_hub.infrastructure.repositories import StateKey, UnitOfWork
from airdrop_hub.schemas import EventDraft, EventRecord


class EventStore(GatedRecordStore[EventRecord]):
    """Dashboard events, kept in stored order."""

    kind = "event"
    id_prefix = "event"
    state_key = StateKey.EVENTS
    draft_type = EventDraft
    record_type = EventRecord

    def _added(self, record: EventRecord) -> Notification:
        return Notification("Event Added", "The new event has been successfully added.")

    def _updated(self, record: EventRecord) -> Notification:
        return Notification("Event Updated", "The event has been successfully updated.")

    def _deleted(self, record: EventRecord) -> Notification:
        return Notification("Event Deleted", "The event has been successfully deleted.")

    def _save(self, uow: UnitOfWork, records: list[Any]) -> None:
        uow.state.save_events(records)
