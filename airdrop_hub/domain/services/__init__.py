"""Domain services."""

from airdrop_hub.domain.services.captcha import CaptchaGenerator
from airdrop_hub.domain.services.catalog import Catalog, InMemoryCatalog
from airdrop_hub.domain.services.credentials import CredentialStore
from airdrop_hub.domain.services.events import EventStore
from airdrop_hub.domain.services.notifications import (
    Notification,
    NotificationVariant,
    Notifier,
    QueueNotifier,
)
from airdrop_hub.domain.services.rankings import RankingStore, effective_rank, order_rankings
from airdrop_hub.domain.services.records import MutationOutcome, MutationResult
from airdrop_hub.domain.services.session_authority import SessionAuthority, SessionState

__all__ = [
    "CaptchaGenerator",
    "Catalog",
    "CredentialStore",
    "EventStore",
    "InMemoryCatalog",
    "MutationOutcome",
    "MutationResult",
    "Notification",
    "NotificationVariant",
    "Notifier",
    "QueueNotifier",
    "RankingStore",
    "SessionAuthority",
    "SessionState",
    "effective_rank",
    "order_rankings",
]
