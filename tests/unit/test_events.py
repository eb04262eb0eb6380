from __future__ import annotations

from airdrop_hub.domain.services import EventStore, MutationOutcome, NotificationVariant, QueueNotifier
from airdrop_hub.schemas import ButtonAction, EventStatus, SessionUser
from tests.utils import event_payload


def test_admin_crud_keeps_insertion_order(events: EventStore, admin_session: SessionUser, notifier) -> None:
    first = events.add(admin_session, event_payload(title="Testnet opens")).record
    second = events.add(admin_session, event_payload(title="Snapshot", status="live", time_left=None)).record

    assert [e.id for e in events.records()] == [first.id, second.id]

    updated = events.update(admin_session, first.model_copy(update={"status": EventStatus.COMING_SOON}))
    assert updated.ok
    assert events.get(first.id).status is EventStatus.COMING_SOON
    assert [e.id for e in events.records()] == [first.id, second.id]

    assert events.delete(admin_session, first.id).ok
    assert [e.id for e in events.records()] == [second.id]

    titles = [n.title for n in notifier.drain()]
    assert titles == ["Event Added", "Event Added", "Event Updated", "Event Deleted"]


def test_defaults_follow_dashboard_form(events: EventStore, admin_session: SessionUser) -> None:
    record = events.add(admin_session, {"title": "Airdrop claim"}).record

    assert record.id.startswith("event-")
    assert record.status is EventStatus.UPCOMING
    assert record.button_text == "View Details"
    assert record.button_action is ButtonAction.VIEW_DETAILS
    assert record.time_left is None


def test_empty_title_is_accepted(events: EventStore, admin_session: SessionUser) -> None:
    result = events.add(admin_session, {"title": ""})

    assert result.ok
    assert result.record.title == ""


def test_time_left_is_opaque(events: EventStore, admin_session: SessionUser) -> None:
    upcoming = events.add(admin_session, event_payload(time_left="soon-ish")).record
    live = events.add(admin_session, event_payload(status="live", time_left="3 hours")).record

    assert upcoming.time_left == "soon-ish"
    assert upcoming.shows_time_left is True
    assert live.time_left == "3 hours"
    assert live.shows_time_left is False


def test_member_is_denied(
    events: EventStore, admin_session: SessionUser, member_session: SessionUser, notifier: QueueNotifier
) -> None:
    record = events.add(admin_session, event_payload()).record
    notifier.drain()

    add = events.add(member_session, event_payload(title="Spam"))
    update = events.update(member_session, record.model_copy(update={"title": "Hijacked"}))
    delete = events.delete(member_session, record.id)

    assert {add.outcome, update.outcome, delete.outcome} == {MutationOutcome.FORBIDDEN}
    assert events.records() == [record]
    assert all(n.variant is NotificationVariant.FORBIDDEN for n in notifier.drain())


def test_invalid_enum_is_rejected(events: EventStore, admin_session: SessionUser, notifier) -> None:
    result = events.add(admin_session, event_payload(button_action="launch_rocket"))

    assert result.outcome is MutationOutcome.INVALID
    assert notifier.drain()[-1].description == "There was a problem saving the event."


def test_delete_missing_is_not_found(events: EventStore, admin_session: SessionUser) -> None:
    assert events.delete(admin_session, "event-missing").outcome is MutationOutcome.NOT_FOUND


def test_events_survive_restart(events: EventStore, admin_session: SessionUser, settings, session_factory) -> None:
    events.add(admin_session, event_payload())

    restored = EventStore(QueueNotifier(), session_factory=session_factory, settings=settings)

    assert restored.records() == events.records()
