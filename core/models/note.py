"""Note domain models and the mood vocabulary."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_BACKGROUND_COLOR = "#ffffff"


class Mood(str, Enum):
    """Emotional-state tag attached to a note."""

    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    TIRED = "tired"
    ANXIOUS = "anxious"
    CALM = "calm"
    EXCITED = "excited"
    NEUTRAL = "neutral"


# Mood keys used by the first release of the diary. Still accepted and
# stored verbatim so older clients keep working.
MOOD_ALIASES: dict[str, Mood] = {
    "mutlu": Mood.HAPPY,
    "uzgun": Mood.SAD,
    "sinirli": Mood.ANGRY,
    "yorgun": Mood.TIRED,
    "endise": Mood.ANXIOUS,
    "sakin": Mood.CALM,
    "heyecanli": Mood.EXCITED,
    "normal": Mood.NEUTRAL,
}


def resolve_mood(value: str | None) -> Mood | None:
    """
    Map a stored mood value to its Mood.

    Returns None for empty or unrecognized values.
    """
    if not value:
        return None
    try:
        return Mood(value)
    except ValueError:
        return MOOD_ALIASES.get(value)


class NoteCreate(BaseModel):
    """Normalized data handed to a store for insertion."""

    title: str = Field(..., min_length=1)
    content: str = ""
    mood: str | None = None
    background_color: str = DEFAULT_BACKGROUND_COLOR


class Note(BaseModel):
    """Full note entity as stored."""

    id: int
    title: str
    content: str
    mood: str | None
    background_color: str
    created_at: datetime

    model_config = {"from_attributes": True}


_MAX_NOTE_ID = 2**63 - 1


def parse_note_id(value: int | str) -> int | None:
    """
    Interpret a caller-supplied note id.

    Returns None when the value cannot name any note (not an integer, or
    outside the storable range), so lookups treat it as not found.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        note_id = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            return None
        note_id = int(text)
    if note_id < 1 or note_id > _MAX_NOTE_ID:
        return None
    return note_id
