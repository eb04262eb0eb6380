"""External collaborator clients."""

from airdrop_hub.libs.telegram import TelegramMembershipClient

__all__ = ["TelegramMembershipClient"]
