"""Core domain models."""

from core.models.note import (
    DEFAULT_BACKGROUND_COLOR,
    MOOD_ALIASES,
    Mood,
    Note,
    NoteCreate,
    parse_note_id,
    resolve_mood,
)

__all__ = [
    "DEFAULT_BACKGROUND_COLOR",
    "MOOD_ALIASES",
    "Mood",
    "Note",
    "NoteCreate",
    "parse_note_id",
    "resolve_mood",
]
