"""API test fixtures: TestClient over a file-backed app."""

import pytest
from starlette.testclient import TestClient

from core.config import DiaryConfig


@pytest.fixture
def config(note_file):
    return DiaryConfig(storage_backend="file", data_file=note_file)


@pytest.fixture
def app(config, file_store):
    """FastAPI app with middleware, error handlers and all routers."""
    from main import create_app

    return create_app(config, store=file_store)


@pytest.fixture
def client(app):
    """Test client; entering it runs the lifespan (store initialization)."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
