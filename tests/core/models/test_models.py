"""Tests for note domain models."""

from datetime import datetime, timezone

import pytest

from core.models import MOOD_ALIASES, Mood, Note, NoteCreate, parse_note_id, resolve_mood


class TestResolveMood:

    @pytest.mark.parametrize("mood", list(Mood))
    def test_canonical_values(self, mood):
        assert resolve_mood(mood.value) is mood

    def test_every_mood_has_one_alias(self):
        assert sorted(MOOD_ALIASES.values()) == sorted(Mood)

    def test_alias(self):
        assert resolve_mood("mutlu") is Mood.HAPPY
        assert resolve_mood("endise") is Mood.ANXIOUS

    @pytest.mark.parametrize("value", [None, "", "HAPPY", "elated"])
    def test_unknown_is_none(self, value):
        assert resolve_mood(value) is None


class TestParseNoteId:

    @pytest.mark.parametrize("value,expected", [
        (5, 5),
        ("5", 5),
        (" 12 ", 12),
        ("9999", 9999),
    ])
    def test_valid(self, value, expected):
        assert parse_note_id(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "0", "-3", 0, -1, True, "²", str(2**63)])
    def test_invalid(self, value):
        assert parse_note_id(value) is None


class TestNoteModels:

    def test_note_create_defaults(self):
        data = NoteCreate(title="Only title")

        assert data.content == ""
        assert data.mood is None
        assert data.background_color == "#ffffff"

    def test_note_serializes_created_at_as_iso(self):
        note = Note(
            id=1,
            title="t",
            content="c",
            mood=None,
            background_color="#ffffff",
            created_at=datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc),
        )

        dumped = note.model_dump(mode="json")

        assert dumped["created_at"].startswith("2024-01-01T08:00:00")
