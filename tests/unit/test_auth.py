from __future__ import annotations

import pytest

from airdrop_hub.core.auth import PrivilegedIdentity, Role, is_admin, require_admin, role_for
from airdrop_hub.domain.errors import AuthorizationDeniedError
from airdrop_hub.schemas import SessionUser
from tests.utils import ADMIN_EMAIL, ADMIN_SECRET, ADMIN_USERNAME

PRIVILEGED = PrivilegedIdentity(email=ADMIN_EMAIL, username=ADMIN_USERNAME, secret=ADMIN_SECRET)


class TestPrivilegedIdentity:
    def test_matches_requires_all_three_fields(self) -> None:
        assert PRIVILEGED.matches(ADMIN_EMAIL, ADMIN_USERNAME, ADMIN_SECRET) is True
        assert PRIVILEGED.matches(ADMIN_EMAIL, ADMIN_USERNAME, "wrong") is False
        assert PRIVILEGED.matches(ADMIN_EMAIL, "someone", ADMIN_SECRET) is False
        assert PRIVILEGED.matches("other@hub.test", ADMIN_USERNAME, ADMIN_SECRET) is False

    def test_matching_is_exact(self) -> None:
        """No case folding or trimming is applied."""
        assert PRIVILEGED.matches(ADMIN_EMAIL.upper(), ADMIN_USERNAME, ADMIN_SECRET) is False
        assert PRIVILEGED.matches_login(f" {ADMIN_EMAIL}", ADMIN_SECRET) is False

    def test_from_settings(self, settings) -> None:
        assert PrivilegedIdentity.from_settings(settings) == PRIVILEGED


class TestAdminGate:
    def test_no_session_is_not_admin(self) -> None:
        assert is_admin(None, PRIVILEGED) is False

    def test_privileged_pair_is_admin(self, admin_session: SessionUser) -> None:
        assert is_admin(admin_session, PRIVILEGED) is True
        assert role_for(admin_session, PRIVILEGED) is Role.ADMIN

    def test_stored_flag_cannot_forge_admin(self) -> None:
        forged = SessionUser(id="user-9", email="mallory@example.com", username="mallory", is_admin=True)

        assert is_admin(forged, PRIVILEGED) is False
        assert role_for(forged, PRIVILEGED) is Role.MEMBER

    def test_email_alone_is_not_enough(self) -> None:
        half = SessionUser(id="user-9", email=ADMIN_EMAIL, username="impostor")

        assert is_admin(half, PRIVILEGED) is False

    def test_gate_is_pure(self, admin_session: SessionUser, member_session: SessionUser) -> None:
        before = (admin_session.model_dump(), member_session.model_dump())

        admin_results = {is_admin(admin_session, PRIVILEGED) for _ in range(50)}
        member_results = {is_admin(member_session, PRIVILEGED) for _ in range(50)}

        assert admin_results == {True}
        assert member_results == {False}
        assert (admin_session.model_dump(), member_session.model_dump()) == before


class TestRequireAdmin:
    def test_returns_session_for_admin(self, admin_session: SessionUser) -> None:
        assert require_admin(admin_session, PRIVILEGED) is admin_session

    def test_raises_for_member(self, member_session: SessionUser) -> None:
        with pytest.raises(AuthorizationDeniedError):
            require_admin(member_session, PRIVILEGED)

    def test_raises_without_session(self) -> None:
        with pytest.raises(AuthorizationDeniedError, match="No active session"):
            require_admin(None, PRIVILEGED)
