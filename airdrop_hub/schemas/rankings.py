from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PotentialValue(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class RankingDraft(BaseModel):
    """Fields an admin submits when adding a ranking."""

    model_config = ConfigDict(frozen=True)

    subject_ref: str = Field(..., min_length=1, description="Catalog entry id")
    funding_rating: int = Field(default=3, ge=1, le=5)
    popularity_rating: int = Field(default=3, ge=1, le=5)
    potential_value: PotentialValue
    notes: str = ""
    external_link: str | None = None
    rank: int = Field(default=0, ge=0, description="0 means unranked")
    is_pinned: bool = False


class RankingRecord(RankingDraft):
    id: str


class RankingView(BaseModel):
    """A ranking joined with its catalog entry for display."""

    model_config = ConfigDict(frozen=True)

    record: RankingRecord
    subject_name: str
    subject_logo: str
    subject_category: str
