"""Common test fixtures for the notebook API."""
import os

# Settings require Supabase credentials at import time; the fake store below
# replaces the real client in every test.
os.environ.setdefault("APP_SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("APP_SUPABASE_KEY", "test-anon-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from notebook_api.core.models.note import Note, Tag  # noqa: E402
from notebook_api.core.services.note_service import NoteService  # noqa: E402
from notebook_api.dependencies import get_note_repository  # noqa: E402
from notebook_api.main import create_app  # noqa: E402
from tests.fakes import InMemoryNoteRepository  # noqa: E402


@pytest.fixture(params=["asyncio"])
def anyio_backend(request):
    """Restrict anyio tests to asyncio only (trio is not installed)."""
    return request.param


@pytest.fixture
def note_repository():
    """Create an empty in-memory note store."""
    return InMemoryNoteRepository()


@pytest.fixture
def note_service(note_repository):
    return NoteService(note_repository)


@pytest.fixture
def sample_note():
    """A persisted-looking note with id and creation date filled in."""
    return Note.model_validate(
        {
            "id": "507f1f77-bcf8-4cd7-9943-9011aa55cc00",
            "title": "Test Title",
            "text": "Test content for the note",
            "created_date": "2025-01-15T09:30:00+00:00",
            "tags": [Tag.PERSONAL],
        }
    )


@pytest.fixture
def client(note_repository):
    """HTTP client against a fresh app wired to the in-memory store."""
    app = create_app()
    app.dependency_overrides[get_note_repository] = lambda: note_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
