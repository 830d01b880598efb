"""Shared test fixtures for the diary test suite."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file BEFORE any other imports that might use env vars
load_dotenv(Path(__file__).parent.parent / ".env", override=False)

from core.services.note_service import NoteService
from core.stores import FileNoteStore


# =============================================================================
# FILE STORE FIXTURES
# =============================================================================


@pytest.fixture
def note_file(tmp_path) -> Path:
    """Path of a fresh JSON note document (not yet created)."""
    return tmp_path / "notes.json"


@pytest.fixture
def file_store(note_file) -> FileNoteStore:
    """Initialized FileNoteStore in a temp directory."""
    store = FileNoteStore(note_file)
    store.initialize()
    return store


@pytest.fixture
def note_service(file_store) -> NoteService:
    """NoteService over the file store."""
    return NoteService(file_store)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def db():
    """
    Session-scoped PostgresClient.

    PostgreSQL tests only run when TEST_DATABASE_URL points at a disposable
    database.
    """
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not set")

    from clients.postgres_client import PostgresClient

    client = PostgresClient(url)
    yield client
    client.close()


@pytest.fixture
def clean_db(db):
    """Database with the diary schema and no rows."""
    db.execute("DROP TABLE IF EXISTS notes")
    db.execute("DROP TABLE IF EXISTS schema_migrations")
    yield db
