"""
View-model for the diary page.

NoteListView is built once at startup with a repository and two UI
callbacks, then handed to every event handler. It owns the form fields,
the visible cards and the placeholder text; it never holds canonical data.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from core.exceptions import ValidationError
from core.models import DEFAULT_BACKGROUND_COLOR, Note
from core.repository import NoteRepository, RepositoryError
from core.validation import validate_note_input
from ui.renderer import NoteCard, render_card, render_cards

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = "No entries yet."
LOAD_ERROR_PLACEHOLDER = "Entries could not be loaded."
DELETE_CONFIRMATION = "Are you sure you want to delete this entry?"


@dataclass
class NoteForm:
    """Current values of the entry form."""

    title: str = ""
    content: str = ""
    mood: str = ""
    background_color: str = DEFAULT_BACKGROUND_COLOR

    def clear(self) -> None:
        self.title = ""
        self.content = ""
        self.mood = ""
        self.background_color = DEFAULT_BACKGROUND_COLOR


class NoteListView:
    """
    Renders the note list and turns user actions into repository calls.

    Args:
        repository: Any NoteRepository (remote or local)
        confirm: Asks the user a yes/no question
        notify: Shows a message to the user
        tz_name: Timezone for entry dates
    """

    def __init__(
        self,
        repository: NoteRepository,
        confirm: Callable[[str], bool],
        notify: Callable[[str], None],
        tz_name: str = "UTC",
    ):
        self.repository = repository
        self.confirm = confirm
        self.notify = notify
        self.tz_name = tz_name

        self.form = NoteForm()
        self.cards: list[NoteCard] = []
        self.placeholder: str | None = EMPTY_PLACEHOLDER

    def load(self) -> None:
        """Fetch all notes and render them in the order received."""
        try:
            notes = self.repository.list()
        except RepositoryError as e:
            logger.error(f"Loading notes failed: {e.message}")
            self.cards = []
            self.placeholder = LOAD_ERROR_PLACEHOLDER
            self.notify(e.message)
            return

        self.cards = render_cards(notes, self.tz_name)
        self.placeholder = None if self.cards else EMPTY_PLACEHOLDER

    def submit(self) -> Note | None:
        """
        Save the form as a new note.

        Invalid input is reported without calling the repository. On
        success the card goes to the top and the form is cleared; on
        failure the form keeps its values.
        """
        title = self.form.title.strip()
        content = self.form.content.strip()
        mood = self.form.mood or None
        background_color = self.form.background_color

        try:
            validate_note_input(title, content, mood, background_color)
        except ValidationError as e:
            self.notify(e.message)
            return None

        try:
            note = self.repository.create(title, content, mood, background_color)
        except RepositoryError as e:
            self.notify(e.message)
            return None

        self.cards.insert(0, render_card(note, self.tz_name))
        self.placeholder = None
        self.form.clear()
        self.notify("Entry saved.")
        return note

    def request_delete(self, note_id: int | str) -> bool:
        """
        Delete a note after the user confirms.

        Returns:
            True if the note was deleted
        """
        if not self.confirm(DELETE_CONFIRMATION):
            return False

        try:
            self.repository.delete(note_id)
        except RepositoryError as e:
            self.notify(e.message)
            return False

        self.cards = [c for c in self.cards if str(c.note_id) != str(note_id)]
        if not self.cards:
            self.placeholder = EMPTY_PLACEHOLDER
        self.notify("Entry deleted.")
        return True

    def toggle(self, note_id: int | str) -> None:
        """Open or close a card. Purely local."""
        for card in self.cards:
            if str(card.note_id) == str(note_id):
                card.is_open = not card.is_open
                return

    def to_html(self) -> str:
        """The list container's inner HTML."""
        if self.placeholder is not None:
            return f'<p class="placeholder">{self.placeholder}</p>'
        return "\n".join(card.to_html() for card in self.cards)
