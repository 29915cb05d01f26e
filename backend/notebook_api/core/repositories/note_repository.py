from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from notebook_api.core.models.note import Note, Tag
    from notebook_api.core.services.tag_filter import TagMatchMode


class NoteRepository(ABC):
    """Abstract repository interface for notes.

    Contract used by services and dependency injection. Implementations should
    perform I/O (database, network) and therefore expose async methods. Store
    failures are reported as NoteStoreError.
    """

    @abstractmethod
    async def create(self, note: Note) -> Note:  # pragma: no cover - interface only
        """Persist a new note and return the stored entity with id and created_date assigned."""

    @abstractmethod
    async def get(self, note_id: UUID) -> Note | None:  # pragma: no cover
        """Fetch a note by id or return None if not found."""

    @abstractmethod
    async def list_page(self, *, page: int, size: int) -> Sequence[Note]:  # pragma: no cover
        """Return one page of notes, ordered by creation time descending.

        Args:
            page: Zero-based page index
            size: Number of notes per page
        """

    @abstractmethod
    async def list_page_by_tags(
        self,
        *,
        tags: Sequence[Tag],
        mode: TagMatchMode,
        page: int,
        size: int,
    ) -> Sequence[Note]:  # pragma: no cover
        """Return one page of notes matching ``tags`` under ``mode``, newest first.

        ``TagMatchMode.ALL_NOTES`` applies no tag predicate at all.
        """

    @abstractmethod
    async def replace(self, note: Note) -> Note | None:  # pragma: no cover
        """Overwrite title, text and tags of a stored note. Return None if the row is gone."""

    @abstractmethod
    async def delete(self, note_id: UUID) -> bool:  # pragma: no cover
        """Delete a note by id. Return True if a row was removed, False otherwise."""
