from __future__ import annotations

from typing import Annotated
from uuid import UUID  # noqa: TCH003

from fastapi import APIRouter, Depends, Query, Request, Response, status

from notebook_api.api.v1.schemas.note import NoteCreate, NoteRead, NoteSummary, NoteUpdate
from notebook_api.config import settings
from notebook_api.core.models.note import Tag
from notebook_api.core.services.note_service import NoteService
from notebook_api.dependencies import get_note_service

router = APIRouter()

PageParam = Annotated[int, Query(ge=0, description="Zero-based page index")]
SizeParam = Annotated[
    int,
    # le=None leaves size unbounded unless a cap is configured
    Query(ge=1, le=settings.max_page_size, description="Number of notes per page"),
]


@router.post("", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(
    payload: NoteCreate,
    request: Request,
    response: Response,
    service: NoteService = Depends(get_note_service),
):
    note = await service.create_note(payload)
    response.headers["Location"] = str(request.url_for("get_note", note_id=str(note.id)))
    return NoteRead.model_validate(note)


@router.get("", response_model=list[NoteSummary])
async def list_notes(
    page: PageParam = 0,
    size: SizeParam = settings.default_page_size,
    service: NoteService = Depends(get_note_service),
):
    notes = await service.list_notes(page=page, size=size)
    return [NoteSummary.model_validate(n) for n in notes]


@router.get("/tag", response_model=list[NoteSummary])
async def list_notes_by_tags(
    tags: list[Tag] = Query(default=[], description="Notes must carry every listed tag"),
    page: PageParam = 0,
    size: SizeParam = settings.default_page_size,
    service: NoteService = Depends(get_note_service),
):
    """List notes carrying all of the given tags, newest first.

    Without any ``tags`` parameter every note is returned.
    """
    notes = await service.list_notes_by_tags(tags, page=page, size=size)
    return [NoteSummary.model_validate(n) for n in notes]


@router.get("/{note_id}", response_model=NoteRead)
async def get_note(
    note_id: UUID,
    service: NoteService = Depends(get_note_service),
):
    note = await service.get_note(note_id)
    return NoteRead.model_validate(note)


@router.get("/{note_id}/stats", response_model=dict[str, int])
async def get_note_stats(
    note_id: UUID,
    service: NoteService = Depends(get_note_service),
):
    """Word frequencies of the note body, keyed by lowercase word in first-occurrence order."""
    return await service.get_note_stats(note_id)


@router.api_route("/{note_id}", methods=["PUT", "PATCH"], response_model=NoteRead)
async def update_note(
    note_id: UUID,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
):
    note = await service.update_note(note_id, payload)
    return NoteRead.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    service: NoteService = Depends(get_note_service),
):
    await service.delete_note(note_id)
    return None
