"""Server-rendered diary page."""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from core.repository import LocalNoteRepository
from core.services.note_service import NoteService
from ui.view import NoteListView

logger = logging.getLogger(__name__)

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
{stylesheet}
</head>
<body>
<h1>{title}</h1>
<div id="notesList">
{notes}
</div>
</body>
</html>
"""


def create_pages_router(
    note_svc: NoteService,
    tz_name: str = "UTC",
    title: str = "My Diary",
    stylesheet_url: str | None = None,
) -> APIRouter:
    router = APIRouter()

    @router.get("/", response_class=HTMLResponse)
    async def index():
        messages: list[str] = []
        view = NoteListView(
            LocalNoteRepository(note_svc),
            confirm=lambda _: False,
            notify=messages.append,
            tz_name=tz_name,
        )
        view.load()
        stylesheet = f'<link rel="stylesheet" href="{stylesheet_url}">' if stylesheet_url else ""
        status = 500 if messages else 200
        return HTMLResponse(
            _PAGE.format(title=title, stylesheet=stylesheet, notes=view.to_html()),
            status_code=status,
        )

    return router
