from __future__ import annotations

from typing import TYPE_CHECKING, Any

from notebook_api.core.exceptions import NoteValidationError
from notebook_api.core.models.note import unique_tags
from notebook_api.utils.validation import is_blank

if TYPE_CHECKING:
    from notebook_api.core.models.note import Note
    from notebook_api.core.schemas.note_changes import NoteChanges


def merge_note(existing: Note, changes: NoteChanges) -> Note:
    """Apply a partial update onto ``existing`` and return the merged note.

    Only fields marked as provided on ``changes`` are replaced. ``id`` and
    ``created_date`` are carried over untouched and ``existing`` is not
    mutated. Inputs are expected to be validated already; a blank title/text
    or null tags that slipped through (e.g. via ``model_construct``) raise
    NoteValidationError rather than being stored.
    """
    updates: dict[str, Any] = {}

    for field in ("title", "text"):
        if not changes.is_provided(field):
            continue
        value = getattr(changes, field)
        if is_blank(value):
            raise NoteValidationError(f"{field} cannot be empty if provided", field=field)
        updates[field] = value

    if changes.is_provided("tags"):
        if changes.tags is None:
            raise NoteValidationError("tags cannot be null if provided", field="tags")
        updates["tags"] = unique_tags(changes.tags)

    return existing.model_copy(update=updates, deep=True)
