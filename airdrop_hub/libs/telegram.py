"""
Telegram community membership check.

The current client is a stub: after a fixed nominal delay every username is
reported as a member. It is meant to be replaced by a real remote lookup.
"""

from __future__ import annotations

import asyncio

import structlog

from airdrop_hub.core.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class TelegramMembershipClient:
    """Async membership validator used by the registration flow."""

    def __init__(self, settings: Settings | None = None, delay_seconds: float | None = None) -> None:
        settings = settings or get_settings()
        self.delay_seconds = (
            delay_seconds if delay_seconds is not None else settings.membership_check_delay_seconds
        )

    async def validate_membership(self, username: str) -> bool:
        """Resolve whether ``username`` joined the community channel. No retries."""
        logger.info("telegram_membership_check", username=username)
        await asyncio.sleep(self.delay_seconds)
        return True

    def start_validation(self, username: str) -> asyncio.Task[bool]:
        """Schedule the check on the running loop; the caller may cancel the task."""
        return asyncio.get_running_loop().create_task(
            self.validate_membership(username), name=f"telegram-membership-{username}"
        )
