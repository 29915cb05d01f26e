"""In-memory note store for tests.

Behaves like the Supabase-backed repository: assigns ids and creation
timestamps on insert, orders pages newest first and applies the same tag
predicates. Creation timestamps strictly increase so ordering is
deterministic even when notes are created within the same microsecond.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from notebook_api.core.models.note import Note, Tag
from notebook_api.core.repositories.note_repository import NoteRepository
from notebook_api.core.services.tag_filter import TagMatchMode, matches


class InMemoryNoteRepository(NoteRepository):
    def __init__(self) -> None:
        self._rows: dict[UUID, Note] = {}
        self._clock = datetime(2025, 1, 1, tzinfo=UTC)
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    async def create(self, note: Note) -> Note:
        self._record("create")
        self._clock += timedelta(seconds=1)
        stored = note.model_copy(update={"id": uuid4(), "created_date": self._clock}, deep=True)
        self._rows[stored.id] = stored
        return stored.model_copy(deep=True)

    async def get(self, note_id: UUID) -> Note | None:
        self._record("get")
        note = self._rows.get(note_id)
        return note.model_copy(deep=True) if note else None

    async def list_page(self, *, page: int, size: int) -> list[Note]:
        self._record("list_page")
        return self._page(self._rows.values(), page, size)

    async def list_page_by_tags(
        self,
        *,
        tags: list[Tag],
        mode: TagMatchMode,
        page: int,
        size: int,
    ) -> list[Note]:
        self._record("list_page_by_tags")
        selected = [n for n in self._rows.values() if matches(n.tags, tags, mode)]
        return self._page(selected, page, size)

    async def replace(self, note: Note) -> Note | None:
        self._record("replace")
        current = self._rows.get(note.id)
        if current is None:
            return None
        stored = current.model_copy(
            update={"title": note.title, "text": note.text, "tags": list(note.tags)},
            deep=True,
        )
        self._rows[note.id] = stored
        return stored.model_copy(deep=True)

    async def delete(self, note_id: UUID) -> bool:
        self._record("delete")
        return self._rows.pop(note_id, None) is not None

    def remove_silently(self, note_id: UUID) -> None:
        """Drop a row without recording a call, simulating a concurrent writer."""
        self._rows.pop(note_id, None)

    @staticmethod
    def _page(notes, page: int, size: int) -> list[Note]:
        ordered = sorted(notes, key=lambda n: n.created_date, reverse=True)
        start = page * size
        return [n.model_copy(deep=True) for n in ordered[start:start + size]]
