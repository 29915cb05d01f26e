from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx
from postgrest.exceptions import APIError

from notebook_api.config import settings
from notebook_api.core.exceptions import NoteStoreError
from notebook_api.core.models.note import Note
from notebook_api.core.repositories.note_repository import NoteRepository
from notebook_api.core.services.tag_filter import TagMatchMode
from notebook_api.utils.logging import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from supabase import Client

    from notebook_api.core.models.note import Tag


class SupabaseNoteRepository(NoteRepository):
    """Supabase implementation of the NoteRepository.

    Uses Supabase's PostgREST client. Assumes a notes table with columns
    ``id uuid default gen_random_uuid()``, ``title text``, ``text text``,
    ``created_date timestamptz default now()`` and ``tags text[]``; the
    database assigns ``id`` and ``created_date`` on insert.

    Tag queries translate to array operators: intersection uses ``contains``
    (``@>``), union uses ``overlaps`` (``&&``).
    """

    def __init__(self, client: Client, table_name: str | None = None) -> None:
        self._client: Client = client
        self._table = table_name or settings.notes_table

    async def create(self, note: Note) -> Note:
        row = self._note_to_row(note)
        resp = await self._run(
            lambda: self._client.table(self._table)
            .insert(row)
            .execute()
        )
        data = self._first(resp.data)
        if not data:
            raise NoteStoreError("Insert returned no row")
        return self._row_to_note(data)

    async def get(self, note_id: UUID) -> Note | None:
        resp = await self._run(
            lambda: self._client.table(self._table)
            .select("*")
            .eq("id", str(note_id))
            .limit(1)
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_note(items[0])

    async def list_page(self, *, page: int, size: int) -> Sequence[Note]:
        return await self.list_page_by_tags(tags=[], mode=TagMatchMode.ALL_NOTES, page=page, size=size)

    async def list_page_by_tags(
        self,
        *,
        tags: Sequence[Tag],
        mode: TagMatchMode,
        page: int,
        size: int,
    ) -> Sequence[Note]:
        values = [t.value for t in dict.fromkeys(tags)]
        start = page * size

        def _query():
            q = self._client.table(self._table).select("*")
            if values and mode is TagMatchMode.INTERSECTION:
                q = q.contains("tags", values)
            elif values and mode is TagMatchMode.UNION:
                q = q.overlaps("tags", values)
            return (
                q
                .order("created_date", desc=True)
                .range(start, start + size - 1)
                .execute()
            )

        resp = await self._run(_query)
        items = resp.data or []
        return [self._row_to_note(i) for i in items]

    async def replace(self, note: Note) -> Note | None:
        # id and created_date are never rewritten
        row = self._note_to_row(note)
        resp = await self._run(
            lambda: self._client.table(self._table)
            .update(row)
            .eq("id", str(note.id))
            .execute()
        )
        items = resp.data or []
        if not items:
            return None
        return self._row_to_note(items[0])

    async def delete(self, note_id: UUID) -> bool:
        # Delete and check if anything was deleted
        resp = await self._run(
            lambda: self._client.table(self._table)
            .delete()
            .eq("id", str(note_id))
            .execute()
        )
        items = resp.data or []
        return len(items) > 0

    @staticmethod
    async def _run(func: Callable[[], Any]) -> Any:
        try:
            return await asyncio.to_thread(func)
        except APIError as err:
            logger.error("PostgREST rejected notes query: %s", err.message)
            raise NoteStoreError(f"Store rejected the request: {err.message}") from err
        except httpx.HTTPError as err:
            logger.error("Notes store unreachable: %s", err)
            raise NoteStoreError(f"Store unavailable: {err}") from err

    @staticmethod
    def _first(data: Any) -> dict[str, Any]:
        if isinstance(data, list) and data:
            return data[0]
        if isinstance(data, dict):
            return data
        return {}

    @staticmethod
    def _row_to_note(row: dict[str, Any]) -> Note:
        # Ignore columns the Note model does not know about
        normalized = {k: v for k, v in row.items() if k in Note.model_fields}
        if normalized.get("tags") is None:
            normalized["tags"] = []
        return Note.model_validate(normalized)

    @staticmethod
    def _note_to_row(note: Note) -> dict[str, Any]:
        # JSON mode turns Tag members into their string values for PostgREST
        return note.model_dump(mode="json", include={"title", "text", "tags"})
