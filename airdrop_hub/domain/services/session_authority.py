"""Session authority: login, registration, logout and restore of the active session."""

from __future__ import annotations

import threading
from enum import Enum

import structlog
from sqlalchemy.orm import Session, sessionmaker

from airdrop_hub.core.auth import SYNTHETIC_ADMIN_ID, PrivilegedIdentity
from airdrop_hub.core.auth import is_admin as passes_admin_gate
from airdrop_hub.core.config import Settings, get_settings
from airdrop_hub.domain.errors import AuthenticationFailureError, ValidationConflictError
from airdrop_hub.domain.services.credentials import CredentialStore
from airdrop_hub.infrastructure.repositories import StateKey, UnitOfWork
from airdrop_hub.schemas import Identity, SessionUser

logger = structlog.get_logger(__name__)


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class SessionAuthority:
    """Owns the single active session of this process.

    The session is persisted on every transition and restored on
    construction; a missing or corrupt persisted session leaves the
    authority anonymous.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        *,
        session_factory: sessionmaker[Session] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.credentials = credentials
        self._session_factory = session_factory
        self._privileged = PrivilegedIdentity.from_settings(self.settings)
        self._lock = threading.RLock()
        self._current: SessionUser | None = None
        self.restore()

    @property
    def current(self) -> SessionUser | None:
        """The active session, to be passed to gated operations."""
        with self._lock:
            return self._current

    @property
    def state(self) -> SessionState:
        with self._lock:
            return SessionState.AUTHENTICATED if self._current else SessionState.ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return self._current is not None

    @property
    def is_admin(self) -> bool:
        with self._lock:
            return passes_admin_gate(self._current, self._privileged)

    def restore(self) -> SessionUser | None:
        with self._lock:
            with UnitOfWork(self._session_factory) as uow:
                stored = uow.state.load_or_default(StateKey.SESSION)
            self._current = self._project(stored) if isinstance(stored, SessionUser) else None
            current = self._current
        if current is not None:
            logger.info("session_restored", user_id=current.id)
        return current

    def authenticate(self, email: str, secret: str) -> SessionUser:
        """Resolve credentials to a session projection without changing state."""
        identity = self.credentials.authenticate(email, secret)
        if identity is not None:
            return self._project(identity)

        if self._privileged.matches_login(email, secret):
            synthetic = Identity(
                id=SYNTHETIC_ADMIN_ID,
                email=self._privileged.email,
                username=self._privileged.username,
                stored_secret="",
                is_video_creator=True,
            )
            return synthetic.to_session(is_admin=True)

        raise AuthenticationFailureError("Invalid email or password")

    def login(self, email: str, secret: str) -> bool:
        logger.info("login_attempt", email=email)
        with self._lock:
            try:
                user = self.authenticate(email, secret)
            except AuthenticationFailureError:
                logger.warning("login_failed", email=email)
                return False
            self._establish(user)
        logger.info("login_success", user_id=user.id, is_admin=user.is_admin)
        return True

    def register(self, email: str, username: str, secret: str) -> bool:
        """Register and immediately authenticate the new identity."""
        with self._lock:
            try:
                identity = self.credentials.register(email=email, username=username, secret=secret)
            except ValidationConflictError:
                return False
            self._establish(self._project(identity))
        return True

    def logout(self) -> None:
        with self._lock:
            user_id = self._current.id if self._current else None
            self._current = None
            with UnitOfWork(self._session_factory) as uow:
                uow.state.clear_session()
        logger.info("logout", user_id=user_id)

    def _project(self, user: Identity | SessionUser) -> SessionUser:
        admin = self._privileged.matches_pair(user.email, user.username)
        if isinstance(user, Identity):
            return user.to_session(is_admin=admin)
        return user.model_copy(update={"is_admin": admin})

    def _establish(self, user: SessionUser) -> None:
        with UnitOfWork(self._session_factory) as uow:
            uow.state.save_session(user)
        self._current = user
