#!/usr/bin/env python3
"""Print the ranking board in display order.

Usage: python scripts/show_rankings.py [catalog.json]

The optional catalog file is a JSON list of {"id", "name", "logo", "category"}
objects used to resolve airdrop names.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import TypeAdapter

from airdrop_hub.app import create_hub
from airdrop_hub.schemas import CatalogEntry


def load_catalog(path: Path) -> list[CatalogEntry]:
    return TypeAdapter(list[CatalogEntry]).validate_json(path.read_text())


def main() -> None:
    entries = load_catalog(Path(sys.argv[1])) if len(sys.argv) > 1 else []
    hub = create_hub(catalog_entries=entries)

    user = hub.auth.current
    print(f"Session: {user.username if user else 'anonymous'} (admin={hub.auth.is_admin})")
    print("=" * 80)
    for position, view in enumerate(hub.rankings.display(hub.catalog), start=1):
        record = view.record
        pin = "*" if record.is_pinned else " "
        rank = record.rank or "-"
        print(
            f"{position:>3} {pin} rank={rank:<4} {view.subject_name:<24} "
            f"{view.subject_category:<16} funding={record.funding_rating} "
            f"popularity={record.popularity_rating} value={record.potential_value.value}"
        )

    unranked = hub.rankings.unranked_subjects(hub.catalog)
    if unranked:
        print("\nNot ranked yet: " + ", ".join(entry.name for entry in unranked))


if __name__ == "__main__":
    main()
