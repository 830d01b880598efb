"""/api/notes: create, list and delete diary entries."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from api.base import success_response
from core.services.note_service import NoteService


class NoteRequest(BaseModel):
    """
    Create-note body.

    Every field is optional here so missing values reach the service and
    come back as a VALIDATION_ERROR with a readable message.
    """

    title: str | None = None
    content: str | None = None
    mood: str | None = None
    background_color: str | None = None


def create_notes_router(note_svc: NoteService) -> APIRouter:
    router = APIRouter()

    @router.post("/notes", status_code=201)
    async def create_note(body: NoteRequest, request: Request):
        note = note_svc.create_note(
            title=body.title,
            content=body.content,
            mood=body.mood,
            background_color=body.background_color,
        )
        return success_response(note.model_dump(mode="json"), request)

    @router.get("/notes")
    async def list_notes(request: Request):
        notes = note_svc.list_notes()
        return success_response([n.model_dump(mode="json") for n in notes], request)

    @router.delete("/notes/{note_id}")
    async def delete_note(note_id: str, request: Request):
        note_svc.delete_note(note_id)
        return success_response({"message": "Note deleted"}, request)

    return router
