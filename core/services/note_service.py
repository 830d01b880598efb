"""
Note service for diary entries.

Validates requests and delegates to whichever NoteStore it was built with.
Notes are immutable: the only mutations are create and delete.
"""

import logging

from core.exceptions import NotFoundError
from core.models import Note
from core.stores import NoteStore
from core.validation import validate_note_input

logger = logging.getLogger(__name__)


class NoteService:
    """Service for note operations."""

    def __init__(self, store: NoteStore):
        self.store = store

    def create_note(
        self,
        title: str | None,
        content: str | None = None,
        mood: str | None = None,
        background_color: str | None = None,
    ) -> Note:
        """
        Create a new note.

        Args:
            title: Entry title (required)
            content: Free text; may be empty only when mood is set
            mood: Mood value or alias; empty means no mood
            background_color: Hex color; empty means white

        Returns:
            Stored note with generated id and created_at

        Raises:
            ValidationError: If the input is rejected
            StoreError: If the store fails
        """
        data = validate_note_input(title, content, mood, background_color)
        note = self.store.insert(data)
        logger.info(f"Note {note.id} created")
        return note

    def list_notes(self) -> list[Note]:
        """
        List all notes.

        Returns:
            Notes ordered by creation time DESC
        """
        return self.store.list_all()

    def delete_note(self, note_id: int | str) -> None:
        """
        Delete a note.

        Raises:
            NotFoundError: If no note has this id
            StoreError: If the store fails
        """
        if self.store.delete_by_id(note_id) == 0:
            raise NotFoundError(f"Note {note_id} not found")
        logger.info(f"Note {note_id} deleted")
