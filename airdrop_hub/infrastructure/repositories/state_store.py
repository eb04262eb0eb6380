"""Typed access to the persisted JSON blobs in the key-value table."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from airdrop_hub.domain.errors import PersistenceCorruptError
from airdrop_hub.infrastructure.db.models import KeyValueEntry
from airdrop_hub.schemas import EventRecord, Identity, RankingRecord, SessionUser

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_IDENTITIES = TypeAdapter(list[Identity])
_SESSION = TypeAdapter(SessionUser)
_RANKINGS = TypeAdapter(list[RankingRecord])
_EVENTS = TypeAdapter(list[EventRecord])

_ENTRIES = TypeAdapter(list[Any])


class StateKey(str, Enum):
    IDENTITIES = "identities"
    SESSION = "session"
    RANKINGS = "rankings"
    EVENTS = "events"


_ENTRY_ADAPTERS: dict[StateKey, TypeAdapter[Any]] = {
    StateKey.IDENTITIES: TypeAdapter(Identity),
    StateKey.RANKINGS: TypeAdapter(RankingRecord),
    StateKey.EVENTS: TypeAdapter(EventRecord),
}


class StateRepository:
    """Reads and writes the logical records held in ``kv_entries``.

    Loads raise ``PersistenceCorruptError`` on unparseable blobs;
    ``load_or_default`` recovers by backing the blob up and keeping what
    still validates.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # --- raw blobs ---

    def get_raw(self, key: StateKey | str) -> str | None:
        stmt = select(KeyValueEntry.value).where(KeyValueEntry.key == _name(key))
        return self.session.scalar(stmt)

    def put_raw(self, key: StateKey | str, value: str) -> None:
        entry = self.session.get(KeyValueEntry, _name(key))
        if entry is None:
            self.session.add(KeyValueEntry(key=_name(key), value=value))
        else:
            entry.value = value
        self.session.flush()

    def remove(self, key: StateKey | str) -> None:
        self.session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == _name(key)))

    # --- typed records ---

    def load_identities(self) -> list[Identity]:
        return self._load(StateKey.IDENTITIES, _IDENTITIES) or []

    def save_identities(self, identities: list[Identity]) -> None:
        self.put_raw(StateKey.IDENTITIES, _IDENTITIES.dump_json(identities).decode())

    def load_session(self) -> SessionUser | None:
        return self._load(StateKey.SESSION, _SESSION)

    def save_session(self, user: SessionUser) -> None:
        self.put_raw(StateKey.SESSION, _SESSION.dump_json(user).decode())

    def clear_session(self) -> None:
        self.remove(StateKey.SESSION)

    def load_rankings(self) -> list[RankingRecord]:
        return self._load(StateKey.RANKINGS, _RANKINGS) or []

    def save_rankings(self, rankings: list[RankingRecord]) -> None:
        self.put_raw(StateKey.RANKINGS, _RANKINGS.dump_json(rankings).decode())

    def load_events(self) -> list[EventRecord]:
        return self._load(StateKey.EVENTS, _EVENTS) or []

    def save_events(self, events: list[EventRecord]) -> None:
        self.put_raw(StateKey.EVENTS, _EVENTS.dump_json(events).decode())

    def load_or_default(self, key: StateKey) -> list | SessionUser | None:
        """Load a record, recovering from corrupt state.

        The unparseable blob is copied to ``<key>.corrupt`` before anything
        can overwrite it. Lists keep every entry that still validates.
        """
        loaders = {
            StateKey.IDENTITIES: self.load_identities,
            StateKey.SESSION: self.load_session,
            StateKey.RANKINGS: self.load_rankings,
            StateKey.EVENTS: self.load_events,
        }
        try:
            return loaders[key]()
        except PersistenceCorruptError as exc:
            raw = self.get_raw(key) or ""
            self.put_raw(backup_key(key), raw)
            if key is StateKey.SESSION:
                logger.warning("state_corrupt", key=key.value, error=str(exc), kept=0)
                return None
            kept = self._salvage(key, raw)
            logger.warning("state_corrupt", key=key.value, error=str(exc), kept=len(kept))
            return kept

    def _load(self, key: StateKey, adapter: TypeAdapter[T]) -> T | None:
        raw = self.get_raw(key)
        if raw is None:
            return None
        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            raise PersistenceCorruptError(key.value, f"{exc.error_count()} validation error(s)") from exc

    def _salvage(self, key: StateKey, raw: str) -> list:
        try:
            items = _ENTRIES.validate_json(raw)
        except ValidationError:
            return []
        adapter = _ENTRY_ADAPTERS[key]
        kept = []
        for item in items:
            try:
                kept.append(adapter.validate_python(item))
            except ValidationError as exc:
                logger.warning("state_entry_dropped", key=key.value, errors=exc.error_count())
        return kept


def backup_key(key: StateKey) -> str:
    """Key under which an unparseable blob for ``key`` is preserved."""
    return f"{key.value}.corrupt"


def _name(key: StateKey | str) -> str:
    return key.value if isinstance(key, StateKey) else key
