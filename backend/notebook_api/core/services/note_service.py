from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from notebook_api.core.exceptions import NoteNotFoundError
from notebook_api.core.models.note import Note
from notebook_api.core.services.note_merge import merge_note
from notebook_api.core.services.tag_filter import TagMatchMode, select_mode
from notebook_api.core.services.text_stats import compute_word_stats
from notebook_api.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from notebook_api.api.v1.schemas.note import NoteCreate
    from notebook_api.core.models.note import Tag
    from notebook_api.core.repositories.note_repository import NoteRepository
    from notebook_api.core.schemas.note_changes import NoteChanges

logger = get_logger(__name__)


class NoteService:
    """Service for managing notes.

    Every operation that takes an id confirms the note exists first and
    raises NoteNotFoundError otherwise. Check-then-act sequences (update,
    delete) are not atomic against concurrent writers.
    """

    def __init__(self, repo: NoteRepository) -> None:
        self._repo = repo

    async def create_note(self, create_dto: NoteCreate) -> Note:
        """Persist a new note; the store assigns id and created_date."""
        note = Note(
            title=create_dto.title,
            text=create_dto.text,
            tags=list(create_dto.tags),
        )
        created = await self._repo.create(note)
        logger.info("Created note %s", created.id)
        return created

    async def get_note(self, note_id: str | UUID) -> Note:
        """Return the note or raise NoteNotFoundError."""
        return await self._require(note_id)

    async def get_note_stats(self, note_id: str | UUID) -> dict[str, int]:
        """Word frequencies of the note's text, in first-occurrence order."""
        note = await self._require(note_id)
        return compute_word_stats(note.text)

    async def list_notes(self, *, page: int = 0, size: int = 10) -> Sequence[Note]:
        """List one page of notes, newest first."""
        return await self._repo.list_page(page=page, size=size)

    async def list_notes_by_tags(
        self,
        tags: Sequence[Tag],
        *,
        page: int = 0,
        size: int = 10,
    ) -> Sequence[Note]:
        """List notes carrying every tag in ``tags``, newest first.

        An empty tag list behaves like :meth:`list_notes`.
        """
        mode = select_mode(tags)
        if mode is TagMatchMode.ALL_NOTES:
            return await self.list_notes(page=page, size=size)
        return await self._repo.list_page_by_tags(tags=tags, mode=mode, page=page, size=size)

    async def update_note(self, note_id: str | UUID, changes: NoteChanges) -> Note:
        """Merge ``changes`` into the stored note and persist the result."""
        existing = await self._require(note_id)
        merged = merge_note(existing, changes)
        saved = await self._repo.replace(merged)
        if saved is None:
            # Deleted between the existence check and the write
            raise NoteNotFoundError(note_id)
        logger.info("Updated note %s (fields: %s)", saved.id, sorted(changes.provided_fields))
        return saved

    async def delete_note(self, note_id: str | UUID) -> None:
        """Delete a note after confirming it exists."""
        existing = await self._require(note_id)
        if not await self._repo.delete(existing.id):
            raise NoteNotFoundError(note_id)
        logger.info("Deleted note %s", existing.id)

    async def _require(self, note_id: str | UUID) -> Note:
        try:
            note_uuid = UUID(str(note_id))
        except ValueError:
            logger.debug("Rejected malformed note id %r", note_id)
            raise NoteNotFoundError(note_id) from None
        note = await self._repo.get(note_uuid)
        if note is None:
            logger.debug("Note %s not found", note_uuid)
            raise NoteNotFoundError(note_uuid)
        return note
