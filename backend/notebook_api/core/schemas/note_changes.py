from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from notebook_api.core.models.base import AppBaseModel
from notebook_api.core.models.note import Tag, unique_tags
from notebook_api.utils.validation import require_not_blank

ChangeableField = Literal["title", "text", "tags"]


class NoteChanges(AppBaseModel):
    """Partial update for a note.

    Presence of each field is tracked separately from its value: a field the
    caller did not send is absent from ``model_fields_set`` and is left alone
    by the merge, while a field sent with an empty value (``"tags": []``) is
    present and replaces the stored one. Explicit ``null`` is rejected for
    every field, so "present" always comes with a usable value.

    Validators only run on values the caller actually supplied; defaults are
    never validated.
    """

    title: str | None = Field(default=None, description="New title; must not be blank if provided")
    text: str | None = Field(default=None, description="New body; must not be blank if provided")
    tags: list[Tag] | None = Field(default=None, description="Replacement tag list; [] clears all tags")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        return require_not_blank(v, "Title cannot be empty if provided")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        return require_not_blank(v, "Text content cannot be empty if provided")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[Tag] | None) -> list[Tag]:
        if v is None:
            raise ValueError("Tags cannot be null if provided; send [] to clear all tags")
        return unique_tags(v)

    def is_provided(self, field: ChangeableField) -> bool:
        """Return True if the caller explicitly supplied ``field``."""
        return field in self.model_fields_set

    @property
    def provided_fields(self) -> frozenset[str]:
        return frozenset(self.model_fields_set)
