from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, Field


class AppBaseModel(PydanticBaseModel):
    """Base model for all domain models."""

    model_config = ConfigDict(
        from_attributes=True,
        extra="forbid",
        populate_by_name=True,
    )


class StoredModel(AppBaseModel):
    """Base model for entities whose identity and creation time come from the store.

    Both fields stay None until the entity has been persisted; afterwards they
    are never modified.
    """

    id: UUID | None = Field(default=None, description="Store-assigned identifier")
    created_date: datetime | None = Field(default=None, description="Creation instant, set by the store")
