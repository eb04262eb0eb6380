from __future__ import annotations

from pathlib import Path
from typing import Any

from airdrop_hub.core.config import Settings
from airdrop_hub.schemas import CatalogEntry

ADMIN_EMAIL = "root@hub.test"
ADMIN_USERNAME = "HubRoot"
ADMIN_SECRET = "Root@123#hub"


def make_settings(tmp_path: Path, **overrides: Any) -> Settings:
    """Settings isolated from the environment, backed by a SQLite file under ``tmp_path``."""
    values: dict[str, Any] = {
        "database_url": f"sqlite:///{tmp_path / 'hub.db'}",
        "admin_email": ADMIN_EMAIL,
        "admin_username": ADMIN_USERNAME,
        "admin_secret": ADMIN_SECRET,
        "membership_check_delay_seconds": 0.0,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def ranking_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "subject_ref": "airdrop-1",
        "funding_rating": 4,
        "popularity_rating": 3,
        "potential_value": "High",
        "notes": "Strong backers",
        "external_link": "https://t.me/example",
        "rank": 0,
        "is_pinned": False,
    }
    payload.update(overrides)
    return payload


def event_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "title": "Mainnet launch",
        "subtitle": "Snapshot incoming",
        "status": "upcoming",
        "time_left": "2 days left",
        "button_text": "View Details",
        "button_action": "view_details",
    }
    payload.update(overrides)
    return payload


def sample_catalog() -> list[CatalogEntry]:
    return [
        CatalogEntry(id="airdrop-1", name="LayerZero", logo="lz.png", category="Infrastructure"),
        CatalogEntry(id="airdrop-2", name="Scroll", logo="scroll.png", category="L2"),
        CatalogEntry(id="airdrop-3", name="Monad", logo="", category="L1"),
    ]
