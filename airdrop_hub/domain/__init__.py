from airdrop_hub.domain.errors import (
    AuthenticationFailureError,
    AuthorizationDeniedError,
    HubError,
    NotFoundError,
    PersistenceCorruptError,
    ValidationConflictError,
)

__all__ = [
    "AuthenticationFailureError",
    "AuthorizationDeniedError",
    "HubError",
    "NotFoundError",
    "PersistenceCorruptError",
    "ValidationConflictError",
]
