"""Admin-gated CRUD over a persisted, ordered list of records."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar
from uuid import uuid4

import structlog
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session, sessionmaker

from airdrop_hub.core.auth import PrivilegedIdentity, require_admin
from airdrop_hub.core.config import Settings, get_settings
from airdrop_hub.domain.errors import (
    AuthorizationDeniedError,
    NotFoundError,
    ValidationConflictError,
)
from airdrop_hub.domain.services.notifications import Notification, Notifier, error, forbidden
from airdrop_hub.infrastructure.repositories import StateKey, UnitOfWork
from airdrop_hub.schemas import SessionUser

logger = structlog.get_logger(__name__)

R = TypeVar("R", bound=BaseModel)

Operation = Callable[[list[Any]], tuple[list[Any], Any]]


class MutationOutcome(str, Enum):
    OK = "ok"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class MutationResult(Generic[R]):
    """Outcome of a gated mutation; failures are values, never raised."""

    outcome: MutationOutcome
    record: R | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is MutationOutcome.OK


class GatedRecordStore(Generic[R]):
    """Base for stores whose writes require the admin gate.

    Records are kept in insertion order, persisted after every successful
    write and replaced only through ``add``/``update``/``delete``.
    """

    kind: ClassVar[str]
    id_prefix: ClassVar[str]
    state_key: ClassVar[StateKey]
    draft_type: ClassVar[type[BaseModel]]
    record_type: ClassVar[type[BaseModel]]

    def __init__(
        self,
        notifier: Notifier,
        *,
        session_factory: sessionmaker[Session] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._notifier = notifier
        self._session_factory = session_factory
        self._privileged = PrivilegedIdentity.from_settings(self.settings)
        self._lock = threading.RLock()
        with UnitOfWork(session_factory) as uow:
            self._records: list[R] = list(uow.state.load_or_default(self.state_key) or [])

    # --- reads, never gated ---

    def records(self) -> list[R]:
        """Records as stored."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> R | None:
        with self._lock:
            return next((r for r in self._records if r.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)

    # --- gated writes ---

    def add(self, session: SessionUser | None, draft: BaseModel | Mapping[str, Any]) -> MutationResult[R]:
        def operation(records: list[R]) -> tuple[list[R], R]:
            validated = self.draft_type.model_validate(_as_payload(draft, exclude_id=True))
            self._check_add(records, validated)
            record = self.record_type(id=f"{self.id_prefix}-{uuid4()}", **validated.model_dump())
            return [*records, record], record

        return self._run(session, "add", operation, self._added)

    def update(self, session: SessionUser | None, record: BaseModel | Mapping[str, Any]) -> MutationResult[R]:
        def operation(records: list[R]) -> tuple[list[R], R]:
            replacement = self.record_type.model_validate(_as_payload(record))
            index = self._index_of(records, replacement.id)
            records[index] = replacement
            return records, replacement

        return self._run(session, "update", operation, self._updated)

    def delete(self, session: SessionUser | None, record_id: str) -> MutationResult[R]:
        def operation(records: list[R]) -> tuple[list[R], R]:
            index = self._index_of(records, record_id)
            removed = records.pop(index)
            return records, removed

        return self._run(session, "delete", operation, self._deleted)

    # --- hooks ---

    def _check_add(self, records: list[R], draft: BaseModel) -> None:
        """Raise ``ValidationConflictError`` to refuse an add."""

    def _added(self, record: R) -> Notification:
        raise NotImplementedError

    def _updated(self, record: R) -> Notification:
        raise NotImplementedError

    def _deleted(self, record: R) -> Notification:
        raise NotImplementedError

    def _invalid_message(self, exc: ValidationError) -> str:
        return f"There was a problem saving the {self.kind}."

    # --- machinery ---

    def _run(
        self,
        session: SessionUser | None,
        action: str,
        operation: Operation,
        success: Callable[[R], Notification],
    ) -> MutationResult[R]:
        with self._lock:
            try:
                require_admin(session, self._privileged)
            except AuthorizationDeniedError as exc:
                logger.warning(
                    "mutation_forbidden",
                    kind=self.kind,
                    action=action,
                    username=session.username if session else None,
                )
                self._notifier.notify(forbidden(f"{action.replace('_', ' ')} {self.kind}s"))
                return MutationResult(MutationOutcome.FORBIDDEN, detail=str(exc))

            try:
                records, record = operation(list(self._records))
            except NotFoundError as exc:
                logger.info("mutation_not_found", kind=self.kind, action=action, record_id=exc.record_id)
                self._notifier.notify(error(str(exc)))
                return MutationResult(MutationOutcome.NOT_FOUND, detail=str(exc))
            except ValidationConflictError as exc:
                logger.info("mutation_conflict", kind=self.kind, action=action, fields=exc.fields)
                self._notifier.notify(error(str(exc)))
                return MutationResult(MutationOutcome.CONFLICT, detail=str(exc))
            except ValidationError as exc:
                logger.info("mutation_invalid", kind=self.kind, action=action, errors=exc.error_count())
                self._notifier.notify(error(self._invalid_message(exc)))
                return MutationResult(MutationOutcome.INVALID, detail=str(exc))

            self._persist(records)
            self._records = records
            logger.info(f"{self.kind}_{action}", record_id=record.id, admin_user=session.username)
            self._notifier.notify(success(record))
            return MutationResult(MutationOutcome.OK, record=record)

    def _persist(self, records: list[R]) -> None:
        with UnitOfWork(self._session_factory) as uow:
            self._save(uow, records)

    def _save(self, uow: UnitOfWork, records: list[R]) -> None:
        raise NotImplementedError

    def _index_of(self, records: list[R], record_id: str) -> int:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        raise NotFoundError(self.kind.capitalize(), record_id)


def _as_payload(value: BaseModel | Mapping[str, Any], *, exclude_id: bool = False) -> dict[str, Any]:
    if isinstance(value, BaseModel):
        payload = value.model_dump()
    else:
        payload = dict(value)
    if exclude_id:
        payload.pop("id", None)
    return payload
