"""Tests for /api/notes endpoints."""

from unittest.mock import patch

from core.exceptions import StoreError


def _create(client, **body):
    return client.post("/api/notes", json=body)


# =============================================================================
# CREATE
# =============================================================================


class TestCreateNote:

    def test_returns_201_with_generated_fields(self, client):
        response = _create(
            client, title="Monday", content="Good day", mood="mutlu", background_color="#fceabb"
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        note = body["data"]
        assert isinstance(note["id"], int)
        assert note["created_at"]
        assert note["title"] == "Monday"
        assert note["mood"] == "mutlu"
        assert note["background_color"] == "#fceabb"

    def test_new_note_listed_first(self, client):
        _create(client, title="Sunday", content="Rest")
        created = _create(
            client, title="Monday", content="Good day", mood="mutlu", background_color="#fceabb"
        ).json()["data"]

        listed = client.get("/api/notes").json()["data"]

        assert listed[0] == created

    def test_empty_title_returns_400(self, client):
        response = _create(client, title="", content="x")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["message"] == "title required"
        assert client.get("/api/notes").json()["data"] == []

    def test_missing_title_returns_400(self, client):
        response = _create(client, content="x")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "title required"

    def test_missing_content_and_mood_returns_400(self, client):
        response = _create(client, title="Empty", content="", mood="")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "content or mood required"

    def test_null_mood_and_color_are_normalized(self, client):
        note = _create(client, title="Plain", content="x", mood=None, background_color=None).json()["data"]

        assert note["mood"] is None
        assert note["background_color"] == "#ffffff"

    def test_non_json_body_returns_400(self, client):
        response = client.post(
            "/api/notes", content=b"title=x", headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"


# =============================================================================
# LIST
# =============================================================================


class TestListNotes:

    def test_empty_list(self, client):
        response = client.get("/api/notes")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_returns_notes_newest_first(self, client):
        ids = [_create(client, title=f"Day {i}", content="x").json()["data"]["id"] for i in range(3)]

        listed = client.get("/api/notes").json()["data"]

        assert [n["id"] for n in listed] == list(reversed(ids))

    def test_store_fault_returns_500(self, client, file_store):
        with patch.object(file_store, "list_all", side_effect=StoreError("Notes could not be loaded")):
            response = client.get("/api/notes")

        assert response.status_code == 500
        body = response.json()
        assert body["error"]["code"] == "STORE_ERROR"
        assert body["error"]["message"] == "Notes could not be loaded"


# =============================================================================
# DELETE
# =============================================================================


class TestDeleteNote:

    def test_deletes_once(self, client):
        note_id = _create(client, title="Bye", content="x").json()["data"]["id"]

        first = client.delete(f"/api/notes/{note_id}")
        second = client.delete(f"/api/notes/{note_id}")

        assert first.status_code == 200
        assert first.json()["data"]["message"]
        assert second.status_code == 404
        assert second.json()["error"]["code"] == "NOT_FOUND"

    def test_unknown_id_returns_404(self, client):
        kept = _create(client, title="Keep", content="x").json()["data"]

        response = client.delete("/api/notes/9999")

        assert response.status_code == 404
        assert client.get("/api/notes").json()["data"] == [kept]

    def test_delete_first_of_two(self, client):
        first = _create(client, title="First", content="a").json()["data"]
        second = _create(client, title="Second", content="b").json()["data"]

        client.delete(f"/api/notes/{first['id']}")

        assert client.get("/api/notes").json()["data"] == [second]

    def test_store_fault_returns_500(self, client, file_store):
        with patch.object(file_store, "delete_by_id", side_effect=StoreError("The note could not be deleted")):
            response = client.delete("/api/notes/1")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "STORE_ERROR"


# =============================================================================
# ENVELOPE & HEALTH
# =============================================================================


class TestEnvelope:

    def test_meta_request_id_matches_header(self, client):
        response = client.get("/api/notes")

        assert response.json()["meta"]["request_id"] == response.headers["X-Request-ID"]

    def test_health_reports_schema_version(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["data"] == {"status": "healthy", "schema_version": 3}
