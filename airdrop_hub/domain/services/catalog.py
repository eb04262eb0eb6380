from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from airdrop_hub.schemas import CatalogEntry


class Catalog(Protocol):
    """Read-only lookup of airdrop metadata."""

    def get_by_ref(self, subject_ref: str) -> CatalogEntry | None: ...

    def __iter__(self) -> Iterator[CatalogEntry]: ...


class InMemoryCatalog:
    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._entries = {entry.id: entry for entry in entries}

    def get_by_ref(self, subject_ref: str) -> CatalogEntry | None:
        return self._entries.get(subject_ref)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
