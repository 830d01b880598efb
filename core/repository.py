"""
Client-side access to notes.

The view depends only on NoteRepository. RemoteNoteRepository (in
clients.diary_api_client) talks to the HTTP API; LocalNoteRepository calls a
NoteService in-process, normally one built over a FileNoteStore.
"""

from typing import Protocol

from core.exceptions import DiaryError
from core.models import Note
from core.services.note_service import NoteService


class RepositoryError(Exception):
    """A repository call failed. The message is meant for the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoteRepository(Protocol):
    """What the view needs from a note backend."""

    def create(
        self,
        title: str,
        content: str,
        mood: str | None,
        background_color: str | None,
    ) -> Note:
        ...

    def list(self) -> list[Note]:
        ...

    def delete(self, note_id: int | str) -> None:
        ...


class LocalNoteRepository:
    """Repository backed by an in-process NoteService."""

    def __init__(self, service: NoteService):
        self.service = service

    def create(self, title, content, mood, background_color) -> Note:
        try:
            return self.service.create_note(title, content, mood, background_color)
        except DiaryError as e:
            raise RepositoryError(e.message) from e

    def list(self) -> list[Note]:
        try:
            return self.service.list_notes()
        except DiaryError as e:
            raise RepositoryError(e.message) from e

    def delete(self, note_id) -> None:
        try:
            self.service.delete_note(note_id)
        except DiaryError as e:
            raise RepositoryError(e.message) from e
