"""
Turns note records into display cards.

Rendering is pure: the same note always yields an equal card and the same
HTML. User text is escaped.
"""

from dataclasses import dataclass
from html import escape

from core.models import Mood, Note, resolve_mood
from utils.timezone import format_entry_date

NO_MOOD_LABEL = "Not specified"
CARD_FALLBACK_COLOR = "#f9f9f9"

MOOD_GLYPHS: dict[Mood, str] = {
    Mood.HAPPY: "😊",
    Mood.SAD: "😢",
    Mood.ANGRY: "😠",
    Mood.TIRED: "😴",
    Mood.ANXIOUS: "😟",
    Mood.CALM: "😌",
    Mood.EXCITED: "🤩",
    Mood.NEUTRAL: "🙂",
}


def mood_display(value: str | None) -> str:
    """
    Label shown for a mood value.

    Known moods and aliases show the capitalized value followed by the
    mood's glyph; absent or unknown values show NO_MOOD_LABEL.
    """
    mood = resolve_mood(value)
    if mood is None:
        return NO_MOOD_LABEL
    return f"{value[:1].upper()}{value[1:]} {MOOD_GLYPHS[mood]}"


@dataclass
class NoteCard:
    """Display state of one entry in the list."""

    note_id: int
    title: str
    date_label: str
    mood_label: str
    background_color: str
    content: str
    is_open: bool = False

    def to_html(self) -> str:
        classes = "note-item open" if self.is_open else "note-item"
        return (
            f'<div class="{classes}" data-id="{self.note_id}" '
            f'style="background-color: {escape(self.background_color)}">'
            f'<div class="note-header">'
            f"<h3>{escape(self.title)}</h3>"
            f"<p><strong>Date:</strong> {escape(self.date_label)} | "
            f"<strong>Mood:</strong> {escape(self.mood_label)}</p>"
            f'<button class="delete-button" data-id="{self.note_id}">Delete</button>'
            f"</div>"
            f'<div class="note-content"><p>{escape(self.content)}</p></div>'
            f"</div>"
        )


def render_card(note: Note, tz_name: str = "UTC") -> NoteCard:
    """Build the card for a note, closed by default."""
    return NoteCard(
        note_id=note.id,
        title=note.title,
        date_label=format_entry_date(note.created_at, tz_name),
        mood_label=mood_display(note.mood),
        background_color=note.background_color or CARD_FALLBACK_COLOR,
        content=note.content,
    )


def render_cards(notes: list[Note], tz_name: str = "UTC") -> list[NoteCard]:
    """Cards in the order given; the store already sorts newest first."""
    return [render_card(note, tz_name) for note in notes]
