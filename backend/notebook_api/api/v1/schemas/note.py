from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

from pydantic import Field, field_validator

from notebook_api.core.models.base import AppBaseModel
from notebook_api.core.models.note import Tag, unique_tags
from notebook_api.core.schemas.note_changes import NoteChanges
from notebook_api.utils.validation import require_not_blank


class NoteCreate(AppBaseModel):
    title: str = Field(description="Note title")
    text: str = Field(description="Note body")
    tags: list[Tag] = Field(default_factory=list, description="Tags for categorization")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return require_not_blank(v, "Title is mandatory")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return require_not_blank(v, "Text content is mandatory")

    @field_validator("tags", mode="before")
    @classmethod
    def default_null_tags(cls, v):
        # Tags are optional on create; null means "no tags"
        return [] if v is None else v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[Tag]) -> list[Tag]:
        return unique_tags(v)


class NoteUpdate(NoteChanges):
    """Request body for PUT/PATCH; omitted keys leave the stored value untouched."""


class NoteRead(AppBaseModel):
    id: UUID
    title: str
    text: str
    tags: list[Tag]
    created_date: datetime


class NoteSummary(AppBaseModel):
    """Compact representation used by list endpoints."""

    id: UUID
    title: str
    created_date: datetime
