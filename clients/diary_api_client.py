"""
HTTP client for the diary API.

Implements the NoteRepository contract on top of /api/notes so the view
can run against a remote server exactly as it runs against a local store.
"""

import json
import logging
from urllib.parse import quote

import requests

from core.models import Note
from core.repository import RepositoryError

logger = logging.getLogger(__name__)


class RemoteNoteRepository:
    """NoteRepository that calls the diary HTTP API."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: requests.Session | None = None):
        """
        Args:
            base_url: Server root, e.g. http://127.0.0.1:3000
            timeout: Per-request timeout in seconds
            session: Optional shared requests session

        Raises:
            ValueError: If base_url is empty
        """
        if not base_url:
            raise ValueError("base_url is required")

        self.notes_url = f"{base_url.rstrip('/')}/api/notes"
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, url: str, failure: str, **kwargs):
        """
        Send a request and unwrap the response envelope.

        Returns:
            The envelope's data field

        Raises:
            RepositoryError: Connection failure, bad JSON, or error envelope
        """
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Diary API connection failed: {e}")
            raise RepositoryError(f"{failure}: the server could not be reached") from e

        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError):
            logger.error(f"Diary API returned invalid JSON ({response.status_code}): {response.text[:200]}")
            raise RepositoryError(f"{failure}: server response {response.text or response.reason}")

        if not isinstance(body, dict):
            raise RepositoryError(f"{failure}: unexpected server response")

        if not response.ok or not body.get("success"):
            message = (body.get("error") or {}).get("message") or failure
            logger.warning(f"Diary API error {response.status_code}: {message}")
            raise RepositoryError(message)

        return body.get("data")

    def create(self, title, content, mood, background_color) -> Note:
        data = self._request(
            "POST",
            self.notes_url,
            "The note could not be saved",
            json={
                "title": title,
                "content": content,
                "mood": mood,
                "background_color": background_color,
            },
        )
        return Note.model_validate(data)

    def list(self) -> list[Note]:
        data = self._request("GET", self.notes_url, "Notes could not be loaded")
        return [Note.model_validate(item) for item in data or []]

    def delete(self, note_id) -> None:
        url = f"{self.notes_url}/{quote(str(note_id), safe='')}"
        self._request("DELETE", url, "The note could not be deleted")
