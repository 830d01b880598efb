"""Client-side rendering of the diary list."""

from ui.renderer import NoteCard, mood_display, render_card, render_cards
from ui.view import NoteForm, NoteListView
