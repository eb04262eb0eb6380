"""End-to-end flows through the composition root, including process restarts."""

from __future__ import annotations

from airdrop_hub.app import create_hub
from airdrop_hub.domain.services import MutationOutcome, NotificationVariant, SessionState
from tests.utils import ADMIN_EMAIL, ADMIN_SECRET, make_settings, ranking_payload, sample_catalog


def test_admin_curates_board_and_member_reads_it(tmp_path) -> None:
    settings = make_settings(tmp_path)

    hub = create_hub(settings, catalog_entries=sample_catalog())
    assert hub.auth.state is SessionState.ANONYMOUS

    assert hub.auth.login(ADMIN_EMAIL, ADMIN_SECRET) is True
    admin = hub.auth.current
    hub.rankings.add(admin, ranking_payload(subject_ref="airdrop-1", rank=2))
    monad = hub.rankings.add(admin, ranking_payload(subject_ref="airdrop-3", rank=0)).record
    hub.rankings.add(admin, ranking_payload(subject_ref="airdrop-2", rank=1))
    hub.rankings.toggle_pin(admin, monad.id)
    hub.auth.logout()

    # Restart as a member
    hub = create_hub(settings, catalog_entries=sample_catalog())
    assert hub.auth.current is None
    assert hub.auth.register("alice@example.com", "alice", "s3cret") is True

    names = [view.subject_name for view in hub.rankings.display(hub.catalog)]
    assert names == ["Monad", "Scroll", "LayerZero"]

    denied = hub.rankings.delete(hub.auth.current, monad.id)
    assert denied.outcome is MutationOutcome.FORBIDDEN
    assert hub.notifier.drain()[-1].variant is NotificationVariant.FORBIDDEN
    assert len(hub.rankings) == 3


def test_member_session_restored_after_restart(tmp_path) -> None:
    settings = make_settings(tmp_path)
    hub = create_hub(settings)
    hub.auth.register("bob@example.com", "bob", "hunter2")

    restarted = create_hub(settings)

    assert restarted.auth.state is SessionState.AUTHENTICATED
    assert restarted.auth.current.username == "bob"
    assert restarted.credentials.authenticate("bob@example.com", "hunter2") is not None


def test_captcha_and_membership_are_wired(tmp_path) -> None:
    hub = create_hub(make_settings(tmp_path))

    challenge = hub.captcha.generate()

    assert challenge.verify(challenge.answer)
    assert hub.membership.delay_seconds == 0.0
