"""Credential store: registered identities and their stored secrets."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from uuid import uuid4

import structlog
from passlib.context import CryptContext
from sqlalchemy.orm import Session, sessionmaker

from airdrop_hub.core.auth import PrivilegedIdentity
from airdrop_hub.core.config import Settings, get_settings
from airdrop_hub.domain.errors import ValidationConflictError
from airdrop_hub.infrastructure.repositories import StateKey, UnitOfWork
from airdrop_hub.schemas import Identity

logger = structlog.get_logger(__name__)


def build_secret_context(schemes: Sequence[str]) -> CryptContext:
    """Secret context for stored credentials.

    With only ``plaintext`` configured, hashing is the identity function and
    verification is an exact string match.
    """
    return CryptContext(schemes=list(schemes), deprecated="auto")


class CredentialStore:
    """Registered identities, unique by email and by username.

    All reads and writes happen under one re-entrant lock so the uniqueness
    check and the insert are a single atomic step.
    """

    def __init__(
        self,
        *,
        session_factory: sessionmaker[Session] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._session_factory = session_factory
        self._privileged = PrivilegedIdentity.from_settings(self.settings)
        self._secrets = build_secret_context(self.settings.secret_schemes)
        self._lock = threading.RLock()
        self._identities: list[Identity] = []
        self.reload()

    def reload(self) -> None:
        with self._lock, UnitOfWork(self._session_factory) as uow:
            self._identities = list(uow.state.load_or_default(StateKey.IDENTITIES) or [])

    @property
    def identities(self) -> list[Identity]:
        with self._lock:
            return list(self._identities)

    def exists_email(self, email: str) -> bool:
        with self._lock:
            return any(identity.email == email for identity in self._identities)

    def exists_username(self, username: str) -> bool:
        with self._lock:
            return any(identity.username == username for identity in self._identities)

    def register(self, *, email: str, username: str, secret: str) -> Identity:
        """Create an identity, raising ``ValidationConflictError`` on a taken email or username."""
        logger.info("register_attempt", email=email, username=username)

        with self._lock:
            conflicts = []
            if self.exists_email(email):
                conflicts.append("email")
            if self.exists_username(username):
                conflicts.append("username")
            if conflicts:
                logger.warning("register_conflict", email=email, username=username, fields=conflicts)
                raise ValidationConflictError(conflicts)

            identity = Identity(
                id=f"user-{uuid4()}",
                email=email,
                username=username,
                stored_secret=self._secrets.hash(secret),
                is_video_creator=self._privileged.matches(email, username, secret),
            )
            identities = [*self._identities, identity]
            self._persist(identities)
            self._identities = identities

        logger.info("register_success", user_id=identity.id, email=email)
        return identity

    def authenticate(self, email: str, secret: str) -> Identity | None:
        """Return the first identity whose email and secret both match."""
        with self._lock:
            for index, identity in enumerate(self._identities):
                if identity.email != email:
                    continue
                verified, new_hash = self._verify(secret, identity.stored_secret)
                if not verified:
                    continue
                if new_hash:
                    identity = self._rehash(index, identity, new_hash)
                return identity
        return None

    def _verify(self, secret: str, stored_secret: str) -> tuple[bool, str | None]:
        try:
            return self._secrets.verify_and_update(secret, stored_secret)
        except ValueError:
            # Stored value matches none of the configured schemes
            logger.warning("credential_scheme_unknown")
            return False, None

    def _rehash(self, index: int, identity: Identity, new_hash: str) -> Identity:
        upgraded = identity.model_copy(update={"stored_secret": new_hash})
        identities = list(self._identities)
        identities[index] = upgraded
        self._persist(identities)
        self._identities = identities
        logger.info("credential_rehashed", user_id=identity.id)
        return upgraded

    def _persist(self, identities: list[Identity]) -> None:
        with UnitOfWork(self._session_factory) as uow:
            uow.state.save_identities(identities)
