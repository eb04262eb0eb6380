from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from airdrop_hub.core.config import get_settings

from . import models  # noqa: F401
from .base import Base

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def build_engine(database_url: str) -> Engine:
    """Create an engine for the local state database and ensure its tables exist."""
    kwargs: dict = {"echo": False, "future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite lives on a single connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, **kwargs)
    Base.metadata.create_all(engine)
    return engine


def _get_engine() -> Engine:
    global _engine

    if _engine is None:
        _engine = build_engine(get_settings().database_url)
    return _engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


def get_session_factory() -> sessionmaker[Session]:
    """Return the process-wide session factory for the configured database."""
    global _session_factory

    if _session_factory is None:
        _session_factory = build_session_factory(_get_engine())
    return _session_factory
