"""
Noteful Backend — Notes Route Handlers
========================================

What:  /api/notes collection and item routes.
How:   Same shape as the folder routes: ResolvedNote performs the 404 check,
       validation runs before the store, serialize_note escapes name and
       content on the way out.

Routes:
    GET    /api/notes            → 200 [Note]
    POST   /api/notes            → 201 Note + Location
    GET    /api/notes/{note_id}  → 200 Note
    PATCH  /api/notes/{note_id}  → 204
    DELETE /api/notes/{note_id}  → 204

An unknown folder_id on create is rejected by the database's foreign key and
answered by the error handler (500), not by request validation.
"""

import logging
from typing import List

from fastapi import APIRouter, Request, Response, status

from app.dependencies import DbSession, ResolvedNote
from app.schemas.common import AUTH_AND_SERVER_ERRORS, ErrorResponse, VerboseErrorResponse
from app.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from app.services.note_service import note_service
from app.services.sanitizer import serialize_note
from app.services.validation import validate_note_create, validate_note_update

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"], responses=AUTH_AND_SERVER_ERRORS)

NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(db: DbSession) -> List[NoteResponse]:
    notes = await note_service.get_all(db)
    return [serialize_note(note) for note in notes]


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "A required field is missing", "model": ErrorResponse},
        500: {"description": "folder_id does not reference a folder", "model": VerboseErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    db: DbSession,
    body: NoteCreate | None = None,
) -> NoteResponse:
    """
    Create a note from {"name", "folder_id", "content"}.

    Each missing field is reported by name, checked in that order.
    The response carries the store-assigned id and modified timestamp.
    """
    fields = validate_note_create(body)
    note = await note_service.insert(db, fields)
    response.headers["Location"] = str(
        request.app.url_path_for("get_note", note_id=str(note.id))
    )
    return serialize_note(note)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses=NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(note: ResolvedNote) -> NoteResponse:
    return serialize_note(note)


@router.patch(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        **NOT_FOUND,
        400: {"description": "Neither 'name' nor 'content' supplied", "model": ErrorResponse},
    },
    summary="Update a note's name and/or content",
)
async def update_note(
    note: ResolvedNote,
    db: DbSession,
    body: NoteUpdate | None = None,
) -> Response:
    """folder_id and modified are not writable and are ignored if sent."""
    fields = validate_note_update(body)
    await note_service.update(db, note.id, fields)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(note: ResolvedNote, db: DbSession) -> Response:
    await note_service.delete(db, note.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
