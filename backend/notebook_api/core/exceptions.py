"""Exception hierarchy for the notes core.

Services raise these; the HTTP layer maps each one to a status code in
``notebook_api.api.errors``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID


class NotebookError(Exception):
    """Base class for all errors raised by the notes core."""


class NoteValidationError(NotebookError, ValueError):
    """A required field is missing or blank, or a provided field is invalid."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NoteNotFoundError(NotebookError):
    """The operation targets a note id that is absent from the store."""

    def __init__(self, note_id: str | UUID) -> None:
        super().__init__(f"Note with id {note_id} not found")
        self.note_id = str(note_id)


class NoteStoreError(NotebookError):
    """The underlying store failed (connectivity, timeout, rejected query)."""
