"""
Note stores.

A store owns the persisted collection of notes. Two implementations share
the NoteStore contract: PostgresNoteStore (canonical, server side) and
FileNoteStore (a local JSON document).
"""

from typing import Protocol

from core.migrations import MigrationReport
from core.models import Note, NoteCreate


class NoteStore(Protocol):
    """Persistence contract for notes."""

    def initialize(self) -> MigrationReport:
        """Create or upgrade the backing schema. Safe to call repeatedly."""
        ...

    def insert(self, data: NoteCreate) -> Note:
        """Persist a note; id and created_at are assigned here."""
        ...

    def list_all(self) -> list[Note]:
        """All notes, newest first; ties broken by later insert first."""
        ...

    def delete_by_id(self, note_id: int | str) -> int:
        """Remove a note. Returns 1 if removed, 0 if not found."""
        ...


from core.stores.postgres_store import PostgresNoteStore  # noqa: E402
from core.stores.file_store import FileNoteStore  # noqa: E402

__all__ = ["NoteStore", "PostgresNoteStore", "FileNoteStore"]
