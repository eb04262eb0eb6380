"""Error taxonomy shared by the credential, session and record stores."""

from __future__ import annotations

from collections.abc import Sequence


class HubError(Exception):
    """Base exception for hub state errors."""

    pass


class ValidationConflictError(HubError):
    """Raised when registering with an email or username already in use."""

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Already in use: {', '.join(self.fields)}")


class AuthenticationFailureError(HubError):
    """Raised when no credential matches and the privileged pair does not either."""

    pass


class AuthorizationDeniedError(HubError):
    """Raised when a non-admin session attempts a gated mutation."""

    pass


class NotFoundError(HubError):
    """Raised when an update or delete targets an id that is not stored."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")


class PersistenceCorruptError(HubError):
    """Raised when a persisted blob cannot be parsed."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"Stored state '{key}' is corrupt: {reason}")
