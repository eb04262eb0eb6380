"""Pydantic schemas for persisted and displayed state."""

from airdrop_hub.schemas.captcha import CaptchaChallenge
from airdrop_hub.schemas.catalog import CatalogEntry
from airdrop_hub.schemas.events import ButtonAction, EventDraft, EventRecord, EventStatus
from airdrop_hub.schemas.identity import Identity, SessionUser
from airdrop_hub.schemas.rankings import PotentialValue, RankingDraft, RankingRecord, RankingView

__all__ = [
    "ButtonAction",
    "CaptchaChallenge",
    "CatalogEntry",
    "EventDraft",
    "EventRecord",
    "EventStatus",
    "Identity",
    "PotentialValue",
    "RankingDraft",
    "RankingRecord",
    "RankingView",
    "SessionUser",
]
