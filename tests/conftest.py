from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy.orm import Session, sessionmaker

from airdrop_hub.core.config import Settings
from airdrop_hub.domain.services import (
    CredentialStore,
    EventStore,
    QueueNotifier,
    RankingStore,
    SessionAuthority,
)
from airdrop_hub.infrastructure.db import build_engine, build_session_factory
from airdrop_hub.schemas import SessionUser
from tests.utils import ADMIN_EMAIL, ADMIN_SECRET, ADMIN_USERNAME, make_settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture()
def session_factory(settings: Settings) -> Iterator[sessionmaker[Session]]:
    engine = build_engine(settings.database_url)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def notifier() -> QueueNotifier:
    return QueueNotifier()


@pytest.fixture()
def credentials(settings: Settings, session_factory: sessionmaker[Session]) -> CredentialStore:
    return CredentialStore(session_factory=session_factory, settings=settings)


@pytest.fixture()
def authority(
    credentials: CredentialStore,
    settings: Settings,
    session_factory: sessionmaker[Session],
) -> SessionAuthority:
    return SessionAuthority(credentials, session_factory=session_factory, settings=settings)


@pytest.fixture()
def rankings(
    notifier: QueueNotifier, settings: Settings, session_factory: sessionmaker[Session]
) -> RankingStore:
    return RankingStore(notifier, session_factory=session_factory, settings=settings)


@pytest.fixture()
def events(
    notifier: QueueNotifier, settings: Settings, session_factory: sessionmaker[Session]
) -> EventStore:
    return EventStore(notifier, session_factory=session_factory, settings=settings)


@pytest.fixture()
def admin_session() -> SessionUser:
    """Session for the privileged pair, as produced by a privileged login."""
    return SessionUser(
        id="admin-1",
        email=ADMIN_EMAIL,
        username=ADMIN_USERNAME,
        is_video_creator=True,
        is_admin=True,
    )


@pytest.fixture()
def member_session() -> SessionUser:
    return SessionUser(id="user-1", email="alice@example.com", username="alice")


@pytest.fixture()
def admin_credentials() -> tuple[str, str, str]:
    return ADMIN_EMAIL, ADMIN_USERNAME, ADMIN_SECRET
