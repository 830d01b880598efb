"""
Note input validation.

Shared by the note service and the client view so a form that passes
pre-flight here is exactly a form the service accepts.
"""

import re

from core.exceptions import ValidationError
from core.models import DEFAULT_BACKGROUND_COLOR, NoteCreate, resolve_mood

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def validate_note_input(
    title: str | None,
    content: str | None,
    mood: str | None,
    background_color: str | None = None,
) -> NoteCreate:
    """
    Validate and normalize raw note fields.

    Values are stored as submitted; only absent values are normalized
    (empty mood becomes None, empty color becomes the default white).
    Whitespace-only title, content or mood count as empty.

    Returns:
        NoteCreate ready for insertion

    Raises:
        ValidationError: title missing, both content and mood missing,
            unknown mood, or malformed color
    """
    title = title or ""
    content = content or ""
    mood = mood if mood and mood.strip() else None
    background_color = background_color or DEFAULT_BACKGROUND_COLOR

    if not title.strip():
        raise ValidationError("title required")

    if not content.strip() and mood is None:
        raise ValidationError("content or mood required")

    if mood is not None and resolve_mood(mood) is None:
        raise ValidationError(f"unknown mood '{mood}'")

    if not _HEX_COLOR.match(background_color):
        raise ValidationError(
            f"background_color must be a hex color like #ffffff, got '{background_color}'"
        )

    return NoteCreate(
        title=title,
        content=content,
        mood=mood,
        background_color=background_color,
    )
