from __future__ import annotations

from fastapi import Depends
from supabase import Client

from notebook_api.core.repositories.implementations.supabase.note_repository import (
    SupabaseNoteRepository,
)
from notebook_api.core.repositories.note_repository import NoteRepository
from notebook_api.core.services.note_service import NoteService
from notebook_api.db.base import get_supabase_client


def get_note_repository(client: Client = Depends(get_supabase_client)) -> NoteRepository:
    """Get a request-scoped note repository instance."""
    return SupabaseNoteRepository(client)


def get_note_service(repo: NoteRepository = Depends(get_note_repository)) -> NoteService:
    """Get a request-scoped note service instance."""
    return NoteService(repo)
