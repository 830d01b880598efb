"""PostgreSQL-backed note store."""

import logging

import psycopg2

from clients.postgres_client import PostgresClient
from core.exceptions import StoreError
from core.migrations import MigrationReport, migrate
from core.models import Note, NoteCreate, parse_note_id
from utils.timezone import now_utc

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, content, mood, background_color, created_at"


class PostgresNoteStore:
    """Note persistence on the notes table. Every operation is one statement."""

    def __init__(self, postgres: PostgresClient):
        self.postgres = postgres

    def initialize(self) -> MigrationReport:
        """
        Bring the schema to the latest version.

        Returns:
            MigrationReport for the run

        Raises:
            StoreError: If a migration fails
        """
        return migrate(self.postgres)

    def insert(self, data: NoteCreate) -> Note:
        """
        Insert a note.

        Args:
            data: Validated note fields

        Returns:
            Stored note with generated id and created_at
        """
        try:
            row = self.postgres.execute_returning(
                f"""
                INSERT INTO notes (
                    title, content, mood, background_color, created_at
                ) VALUES (
                    %s, %s, %s, %s, %s
                )
                RETURNING {_COLUMNS}
                """,
                (data.title, data.content, data.mood, data.background_color, now_utc())
            )[0]
        except psycopg2.Error as e:
            logger.error(f"Note insert failed: {e}")
            raise StoreError("The note could not be saved") from e

        return Note.model_validate(row)

    def list_all(self) -> list[Note]:
        """
        List every note.

        Returns:
            Notes ordered by creation time DESC, then id DESC
        """
        try:
            rows = self.postgres.execute(
                f"""
                SELECT {_COLUMNS} FROM notes
                ORDER BY created_at DESC, id DESC
                """
            )
        except psycopg2.Error as e:
            logger.error(f"Note listing failed: {e}")
            raise StoreError("Notes could not be loaded") from e

        return [Note.model_validate(row) for row in rows]

    def delete_by_id(self, note_id: int | str) -> int:
        """
        Hard delete a note.

        Args:
            note_id: Note id; values that cannot be an id match nothing

        Returns:
            1 if deleted, 0 if not found
        """
        parsed = parse_note_id(note_id)
        if parsed is None:
            return 0

        try:
            return self.postgres.execute_rowcount(
                "DELETE FROM notes WHERE id = %s",
                (parsed,)
            )
        except psycopg2.Error as e:
            logger.error(f"Note delete failed: {e}")
            raise StoreError("The note could not be deleted") from e
