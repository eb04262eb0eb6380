from __future__ import annotations

import structlog
from sqlalchemy.orm import Session, sessionmaker

from airdrop_hub.infrastructure.db.session import get_session_factory
from airdrop_hub.infrastructure.repositories.state_store import StateRepository

logger = structlog.get_logger(__name__)


class UnitOfWork:
    """Transaction scope around the state repository.

    Commits on a clean exit and rolls back when the block raises.
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory or get_session_factory()
        self._session: Session | None = None
        self.state: StateRepository

    def __enter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        self.state = StateRepository(self._session)
        logger.debug("uow_enter")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc:
                self.rollback()
            else:
                self.commit()
        finally:
            assert self._session is not None
            self._session.close()
            self._session = None
        logger.debug("uow_exit", exc_type=str(exc_type) if exc_type else None)

    def commit(self) -> None:
        assert self._session is not None
        self._session.commit()
        logger.debug("uow_commit")

    def rollback(self) -> None:
        assert self._session is not None
        self._session.rollback()
        logger.debug("uow_rollback")
