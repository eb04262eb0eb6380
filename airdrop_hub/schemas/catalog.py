from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CatalogEntry(BaseModel):
    """Read-only airdrop metadata owned by the catalog collaborator."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    logo: str = ""
    category: str = ""
