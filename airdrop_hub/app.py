from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog
from sqlalchemy.orm import Session, sessionmaker

from airdrop_hub.core.config import Settings, get_settings
from airdrop_hub.core.logging import setup_logging
from airdrop_hub.domain.services import (
    CaptchaGenerator,
    Catalog,
    CredentialStore,
    EventStore,
    InMemoryCatalog,
    Notifier,
    QueueNotifier,
    RankingStore,
    SessionAuthority,
)
from airdrop_hub.infrastructure.db import build_engine, build_session_factory
from airdrop_hub.libs import TelegramMembershipClient
from airdrop_hub.schemas import CatalogEntry

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class Hub:
    """Process-wide client state, wired once at startup."""

    settings: Settings
    credentials: CredentialStore
    auth: SessionAuthority
    rankings: RankingStore
    events: EventStore
    catalog: Catalog
    notifier: Notifier
    captcha: CaptchaGenerator
    membership: TelegramMembershipClient


def create_hub(
    settings: Settings | None = None,
    *,
    catalog_entries: Iterable[CatalogEntry] = (),
    catalog: Catalog | None = None,
    notifier: Notifier | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> Hub:
    """Application factory: build stores over the configured database and restore the session."""
    settings = settings or get_settings()
    setup_logging(settings)

    if session_factory is None:
        session_factory = build_session_factory(build_engine(settings.database_url))
    notifier = notifier or QueueNotifier()

    credentials = CredentialStore(session_factory=session_factory, settings=settings)
    auth = SessionAuthority(credentials, session_factory=session_factory, settings=settings)
    hub = Hub(
        settings=settings,
        credentials=credentials,
        auth=auth,
        rankings=RankingStore(notifier, session_factory=session_factory, settings=settings),
        events=EventStore(notifier, session_factory=session_factory, settings=settings),
        catalog=catalog if catalog is not None else InMemoryCatalog(catalog_entries),
        notifier=notifier,
        captcha=CaptchaGenerator(settings),
        membership=TelegramMembershipClient(settings),
    )

    logger.info(
        "hub_startup",
        service=settings.app_name,
        environment=settings.environment,
        version=settings.version,
        session_state=auth.state.value,
    )
    return hub
