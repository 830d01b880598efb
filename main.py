"""Diary FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from api.base import success_response
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from api.notes import create_notes_router
from api.pages import create_pages_router
from clients.postgres_client import PostgresClient
from core.config import DiaryConfig, load_config, resolve_database_url
from core.services.note_service import NoteService
from core.stores import FileNoteStore, NoteStore, PostgresNoteStore

logger = logging.getLogger(__name__)


def build_store(config: DiaryConfig) -> NoteStore:
    """
    Construct the configured note store.

    Raises:
        psycopg2.OperationalError: If the database is unreachable
        VaultError: If the database URL cannot be resolved
    """
    if config.storage_backend == "file":
        logger.info(f"Using file note store at {config.data_file}")
        return FileNoteStore(config.data_file)

    logger.info("Using PostgreSQL note store")
    return PostgresNoteStore(PostgresClient(resolve_database_url()))


def create_app(config: DiaryConfig | None = None, store: NoteStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or load_config()
    if store is None:
        store = build_store(config)
    note_svc = NoteService(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        # Startup: a store that cannot initialize is fatal
        report = store.initialize()
        app.state.schema_version = report.to_version
        if report.changed:
            logger.info(
                f"Schema upgraded from version {report.from_version} to {report.to_version}: "
                f"{', '.join(report.applied)}"
            )
        else:
            logger.info(f"Schema up to date at version {report.to_version}")

        yield

        PostgresClient.close_all_pools()

    app = FastAPI(title="Diary", lifespan=lifespan)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_notes_router(note_svc), prefix="/api")
    app.include_router(create_pages_router(
        note_svc,
        tz_name=config.display_timezone,
        stylesheet_url="/static/style.css" if config.static_dir else None,
    ))

    if config.static_dir:
        app.mount("/static", StaticFiles(directory=str(config.static_dir)), name="static")

    @app.get("/health")
    async def health_check():
        return success_response({
            "status": "healthy",
            "schema_version": getattr(app.state, "schema_version", None),
        })

    return app


def run() -> None:
    """Console entry point: configure logging and serve."""
    import uvicorn

    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    run()
