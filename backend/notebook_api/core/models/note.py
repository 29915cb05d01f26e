from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator, model_validator

from .base import StoredModel


class Tag(str, Enum):
    """Closed vocabulary used to classify notes."""

    BUSINESS = "BUSINESS"
    PERSONAL = "PERSONAL"
    IMPORTANT = "IMPORTANT"


def unique_tags(tags: list[Tag]) -> list[Tag]:
    """Drop repeated tags while keeping first-insertion order."""
    return list(dict.fromkeys(tags))


class Note(StoredModel):
    """Note domain model."""

    title: str = Field(description="Note title")
    text: str = Field(description="Note body")
    tags: list[Tag] = Field(default_factory=list, description="Tags for categorization")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[Tag]) -> list[Tag]:
        return unique_tags(v)

    @model_validator(mode="after")
    def validate_title_and_text(self) -> Note:
        """Reject notes whose title or text is blank."""
        if not self.title.strip():
            raise ValueError("Title is mandatory")
        if not self.text.strip():
            raise ValueError("Text content is mandatory")
        return self

    # Prefer Pydantic v2 model_config for OpenAPI examples
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "3f1c2a9e-6b1d-4c39-9c55-0f0f6a4d2b11",
                    "title": "Quarterly review",
                    "text": "Prepare slides for the quarterly review. Review the numbers twice.",
                    "created_date": "2025-01-15T09:30:00Z",
                    "tags": ["BUSINESS", "IMPORTANT"],
                }
            ]
        }
    }
