"""Airdrop ranking board: gated CRUD, pinning and the display ordering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ValidationError

from airdrop_hub.domain.errors import ValidationConflictError
from airdrop_hub.domain.services.catalog import Catalog
from airdrop_hub.domain.services.notifications import Notification
from airdrop_hub.domain.services.records import GatedRecordStore, MutationResult
from airdrop_hub.infrastructure.repositories import StateKey, UnitOfWork
from airdrop_hub.schemas import CatalogEntry, RankingDraft, RankingRecord, RankingView, SessionUser

UNRANKED_SORT_RANK = 999
UNKNOWN_SUBJECT = "Unknown"


def effective_rank(record: RankingRecord, unranked: int = UNRANKED_SORT_RANK) -> int:
    """Rank used for sorting; a stored 0 sorts as ``unranked``."""
    return record.rank or unranked


def order_rankings(
    records: Iterable[RankingRecord], unranked: int = UNRANKED_SORT_RANK
) -> list[RankingRecord]:
    """Pinned records first, then ascending effective rank.

    ``sorted`` is stable, so ties keep their stored order.
    """
    return sorted(records, key=lambda r: (not r.is_pinned, effective_rank(r, unranked)))


def enrich(record: RankingRecord, catalog: Catalog) -> RankingView:
    entry = catalog.get_by_ref(record.subject_ref)
    return RankingView(
        record=record,
        subject_name=entry.name if entry and entry.name else UNKNOWN_SUBJECT,
        subject_logo=entry.logo if entry else "",
        subject_category=entry.category if entry and entry.category else UNKNOWN_SUBJECT,
    )


class RankingStore(GatedRecordStore[RankingRecord]):
    kind = "ranking"
    id_prefix = "ranking"
    state_key = StateKey.RANKINGS
    draft_type = RankingDraft
    record_type = RankingRecord

    def toggle_pin(self, session: SessionUser | None, record_id: str) -> MutationResult[RankingRecord]:
        def operation(records: list[RankingRecord]) -> tuple[list[RankingRecord], RankingRecord]:
            index = self._index_of(records, record_id)
            flipped = records[index].model_copy(update={"is_pinned": not records[index].is_pinned})
            records[index] = flipped
            return records, flipped

        return self._run(session, "toggle_pin", operation, _pin_toggled)

    def ordered(self) -> list[RankingRecord]:
        return order_rankings(self.records(), self.settings.unranked_sort_rank)

    def display(self, catalog: Catalog) -> list[RankingView]:
        """Ordered rankings joined with catalog metadata; missing entries get placeholders."""
        return [enrich(record, catalog) for record in self.ordered()]

    def unranked_subjects(self, catalog: Catalog) -> list[CatalogEntry]:
        """Catalog entries that no ranking references yet."""
        ranked = {record.subject_ref for record in self.records()}
        return [entry for entry in catalog if entry.id not in ranked]

    def _check_add(self, records: list[RankingRecord], draft: BaseModel) -> None:
        if not self.settings.enforce_unique_ranking_subject:
            return
        subject_ref = draft.subject_ref  # type: ignore[attr-defined]
        if any(record.subject_ref == subject_ref for record in records):
            raise ValidationConflictError(["subject_ref"])

    def _invalid_message(self, exc: ValidationError) -> str:
        fields = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        if "subject_ref" in fields:
            return "Please select an airdrop"
        if "potential_value" in fields:
            return "Please enter a potential value"
        return "Please check the ranking details"

    def _added(self, record: RankingRecord) -> Notification:
        return Notification("Ranking added", "New airdrop ranking has been added successfully")

    def _updated(self, record: RankingRecord) -> Notification:
        return Notification("Ranking updated", "The airdrop ranking has been updated successfully")

    def _deleted(self, record: RankingRecord) -> Notification:
        return Notification("Ranking deleted", "The airdrop ranking has been removed")

    def _save(self, uow: UnitOfWork, records: list[Any]) -> None:
        uow.state.save_rankings(records)


def _pin_toggled(record: RankingRecord) -> Notification:
    state = "pinned" if record.is_pinned else "unpinned"
    return Notification(state.capitalize(), f"Airdrop has been {state} successfully")
