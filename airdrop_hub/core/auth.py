from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from airdrop_hub.core.config import Settings, get_settings
from airdrop_hub.domain.errors import AuthorizationDeniedError

if TYPE_CHECKING:
    from airdrop_hub.schemas.identity import SessionUser

SYNTHETIC_ADMIN_ID = "admin-1"


class Role(str, Enum):
    MEMBER = "member"
    ADMIN = "admin"


@dataclass(frozen=True, slots=True)
class PrivilegedIdentity:
    """The single (email, username, secret) triple that always yields the admin role."""

    email: str
    username: str
    secret: str

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> PrivilegedIdentity:
        settings = settings or get_settings()
        return cls(
            email=settings.admin_email,
            username=settings.admin_username,
            secret=settings.admin_secret,
        )

    def matches(self, email: str, username: str, secret: str) -> bool:
        """True iff all three fields match exactly."""
        return email == self.email and username == self.username and secret == self.secret

    def matches_login(self, email: str, secret: str) -> bool:
        return email == self.email and secret == self.secret

    def matches_pair(self, email: str, username: str) -> bool:
        return email == self.email and username == self.username


def is_admin(session: SessionUser | None, privileged: PrivilegedIdentity | None = None) -> bool:
    """Authorization gate: a present session whose (email, username) is the privileged pair.

    Pure with respect to ``session``; the stored ``is_admin`` flag is not trusted.
    """
    if session is None:
        return False
    privileged = privileged or PrivilegedIdentity.from_settings()
    return privileged.matches_pair(session.email, session.username)


def role_for(session: SessionUser | None, privileged: PrivilegedIdentity | None = None) -> Role:
    return Role.ADMIN if is_admin(session, privileged) else Role.MEMBER


def require_admin(
    session: SessionUser | None, privileged: PrivilegedIdentity | None = None
) -> SessionUser:
    """Return the session when it passes the gate, otherwise raise."""
    if session is None:
        raise AuthorizationDeniedError("No active session")
    if not is_admin(session, privileged):
        raise AuthorizationDeniedError(f"User {session.username} is not an admin")
    return session
