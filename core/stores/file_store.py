"""
Local note store kept in a single JSON document.

Document layout:
    {"schema_version": 3, "next_id": 4, "notes": [{...}, ...]}

Ids come from next_id and are never reused. Every mutation is one locked
read-modify-write followed by an atomic file replace, so a crash leaves
either the old or the new document on disk.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError as ModelValidationError

from core.exceptions import StoreError
from core.migrations import MigrationReport
from core.models import DEFAULT_BACKGROUND_COLOR, Note, NoteCreate, parse_note_id
from utils.timezone import now_utc

logger = logging.getLogger(__name__)


def _create_document(doc: dict[str, Any]) -> None:
    doc.setdefault("notes", [])
    doc.setdefault("next_id", 1)


def _add_mood(doc: dict[str, Any]) -> None:
    for note in doc["notes"]:
        note.setdefault("mood", None)


def _add_background_color(doc: dict[str, Any]) -> None:
    for note in doc["notes"]:
        note.setdefault("background_color", DEFAULT_BACKGROUND_COLOR)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _well_formed(doc: Any, strict: bool) -> bool:
    """
    Check the document layout before any migration or mutation touches it.

    A version-0 document read during initialize may still lack notes and
    next_id; anything from version 1 on must carry both.
    """
    if not isinstance(doc, dict):
        return False

    version = doc.get("schema_version", 0)
    if not _is_int(version) or version < 0:
        return False

    lenient = not strict and version == 0
    notes = doc.get("notes", [] if lenient else None)
    next_id = doc.get("next_id", 1 if lenient else None)

    return (
        isinstance(notes, list)
        and all(isinstance(n, dict) for n in notes)
        and _is_int(next_id)
    )


FILE_MIGRATIONS: tuple[tuple[int, str, Callable[[dict[str, Any]], None]], ...] = (
    (1, "create_notes", _create_document),
    (2, "add_mood", _add_mood),
    (3, "add_background_color", _add_background_color),
)


class FileNoteStore:
    """Note persistence in a JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def initialize(self) -> MigrationReport:
        """
        Create the document or upgrade an older one.

        Returns:
            MigrationReport for the run

        Raises:
            StoreError: If the file cannot be read or written
        """
        with self._lock:
            doc = self._read(strict=False) if self.path.exists() else {"schema_version": 0}
            start = doc.get("schema_version", 0)
            report = MigrationReport(from_version=start, to_version=start)

            for version, name, step in FILE_MIGRATIONS:
                if version <= start:
                    continue
                step(doc)
                doc["schema_version"] = version
                report.applied.append(name)
                report.to_version = version
                logger.info(f"Applied file migration {version} ({name})")

            if report.changed:
                self._write(doc)

            return report

    def insert(self, data: NoteCreate) -> Note:
        """
        Append a note.

        Returns:
            Stored note with generated id and created_at
        """
        with self._lock:
            doc = self._read()
            note = Note(
                id=doc["next_id"],
                title=data.title,
                content=data.content,
                mood=data.mood,
                background_color=data.background_color,
                created_at=now_utc(),
            )
            doc["next_id"] = note.id + 1
            doc["notes"].append(note.model_dump(mode="json"))
            self._write(doc)

        return note

    def list_all(self) -> list[Note]:
        """
        List every note.

        Returns:
            Notes ordered by creation time DESC, then id DESC
        """
        with self._lock:
            doc = self._read()

        try:
            notes = [Note.model_validate(item) for item in doc["notes"]]
        except ModelValidationError as e:
            logger.error(f"Corrupted note record in {self.path}: {e}")
            raise StoreError("Notes could not be loaded") from e

        if any(n.created_at.tzinfo is None for n in notes):
            logger.error(f"Note record without a UTC offset in {self.path}")
            raise StoreError("Notes could not be loaded")

        notes.sort(key=lambda n: (n.created_at, n.id), reverse=True)
        return notes

    def delete_by_id(self, note_id: int | str) -> int:
        """
        Remove a note.

        Returns:
            1 if deleted, 0 if not found
        """
        parsed = parse_note_id(note_id)
        if parsed is None:
            return 0

        with self._lock:
            doc = self._read()
            remaining = [n for n in doc["notes"] if n.get("id") != parsed]
            removed = len(doc["notes"]) - len(remaining)
            if removed:
                doc["notes"] = remaining
                self._write(doc)

        return removed

    def _read(self, strict: bool = True) -> dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                doc = json.load(f)
        except FileNotFoundError as e:
            logger.error(f"Note file missing: {self.path}. Was initialize() called?")
            raise StoreError("Notes storage is not available") from e
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read note file {self.path}: {e}")
            raise StoreError("Notes storage could not be read") from e

        if not _well_formed(doc, strict):
            logger.error(f"Note file {self.path} has an unexpected layout")
            raise StoreError("Notes storage could not be read")

        return doc

    def _write(self, doc: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(doc, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Could not write note file {self.path}: {e}")
            raise StoreError("Notes storage could not be written") from e
