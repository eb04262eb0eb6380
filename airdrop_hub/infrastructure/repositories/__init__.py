from airdrop_hub.infrastructure.repositories.state_store import StateKey, StateRepository, backup_key
from airdrop_hub.infrastructure.repositories.unit_of_work import UnitOfWork

__all__ = ["StateKey", "StateRepository", "UnitOfWork", "backup_key"]
