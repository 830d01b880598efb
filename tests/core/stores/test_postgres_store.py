"""Tests for PostgresNoteStore."""

from datetime import datetime, timezone
from unittest.mock import Mock

import psycopg2
import pytest

from clients.postgres_client import PostgresClient
from core.exceptions import StoreError
from core.models import NoteCreate
from core.stores import PostgresNoteStore


ROW = {
    "id": 7,
    "title": "Monday",
    "content": "Good day",
    "mood": "mutlu",
    "background_color": "#fceabb",
    "created_at": datetime(2024, 3, 4, 9, 30, tzinfo=timezone.utc),
}


@pytest.fixture
def postgres():
    return Mock(spec=PostgresClient)


@pytest.fixture
def store(postgres):
    return PostgresNoteStore(postgres)


class TestInsertUnit:
    """insert() against a mocked client."""

    def test_returns_stored_row(self, store, postgres):
        postgres.execute_returning.return_value = [ROW]

        note = store.insert(NoteCreate(
            title="Monday", content="Good day", mood="mutlu", background_color="#fceabb"
        ))

        assert note.id == 7
        assert note.created_at == ROW["created_at"]
        query, params = postgres.execute_returning.call_args.args
        assert "INSERT INTO notes" in query
        assert params[:4] == ("Monday", "Good day", "mutlu", "#fceabb")
        assert params[4].tzinfo is not None

    def test_driver_error_becomes_store_error(self, store, postgres):
        postgres.execute_returning.side_effect = psycopg2.OperationalError("disk full")

        with pytest.raises(StoreError) as exc_info:
            store.insert(NoteCreate(title="x", content="y"))

        assert "disk full" not in exc_info.value.message


class TestListAllUnit:
    """list_all() against a mocked client."""

    def test_orders_by_created_at_then_id(self, store, postgres):
        postgres.execute.return_value = [ROW]

        notes = store.list_all()

        assert [n.id for n in notes] == [7]
        query = postgres.execute.call_args.args[0]
        assert "ORDER BY created_at DESC, id DESC" in query

    def test_driver_error_becomes_store_error(self, store, postgres):
        postgres.execute.side_effect = psycopg2.DatabaseError("relation does not exist")

        with pytest.raises(StoreError, match="could not be loaded"):
            store.list_all()


class TestDeleteByIdUnit:
    """delete_by_id() against a mocked client."""

    def test_returns_rowcount(self, store, postgres):
        postgres.execute_rowcount.return_value = 1

        assert store.delete_by_id("7") == 1
        postgres.execute_rowcount.assert_called_once_with(
            "DELETE FROM notes WHERE id = %s", (7,)
        )

    def test_unparseable_id_skips_query(self, store, postgres):
        assert store.delete_by_id("abc") == 0
        assert store.delete_by_id(str(2**64)) == 0
        postgres.execute_rowcount.assert_not_called()

    def test_driver_error_becomes_store_error(self, store, postgres):
        postgres.execute_rowcount.side_effect = psycopg2.OperationalError("gone")

        with pytest.raises(StoreError):
            store.delete_by_id(1)


class TestPostgresNoteStore:
    """Round trips against a real database (TEST_DATABASE_URL)."""

    @pytest.fixture
    def pg_store(self, clean_db):
        store = PostgresNoteStore(clean_db)
        store.initialize()
        return store

    def test_initialize_is_idempotent(self, pg_store):
        report = pg_store.initialize()

        assert report.changed is False
        assert report.to_version == 3

    def test_insert_list_delete(self, pg_store):
        first = pg_store.insert(NoteCreate(title="First", content="a"))
        second = pg_store.insert(NoteCreate(title="Second", content="", mood="calm"))

        assert [n.id for n in pg_store.list_all()] == [second.id, first.id]
        assert pg_store.delete_by_id(first.id) == 1
        assert pg_store.delete_by_id(first.id) == 0
        assert pg_store.list_all() == [second]

    def test_defaults_apply_to_raw_inserts(self, pg_store, clean_db):
        """Rows written without color or timestamp get the column defaults."""
        clean_db.execute("INSERT INTO notes (title, content) VALUES ('raw', 'row')")

        [note] = pg_store.list_all()

        assert note.background_color == "#ffffff"
        assert note.mood is None
        assert note.created_at is not None
