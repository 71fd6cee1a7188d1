"""
Noteful Backend — Request Body Validation
===========================================

What:  Per-field presence checks for create and update bodies.
How:   Each check inspects one typed schema field and raises ValidationError
       naming it. Update checks return the dict of fields that may be written,
       which is exactly what the store's partial update applies.
When:  Called by route handlers after item resolution and before any store call.

Rules:
    Folder create:  name non-blank                 → "'name' is required"
    Folder update:  name non-blank                 → "Request body must contain 'name'"
    Note create:    name non-blank, folder_id and
                    content not null (content may
                    be "")                         → "Missing '<field>' in request body"
    Note update:    name and/or content truthy     → "Request body must contain
                                                      either 'name' or 'content'"
                    (content, once sent, is written
                    even when empty)
"""

import logging
from typing import Any, Dict, Optional

from app.exceptions import ValidationError
from app.schemas.folder import FolderCreate, FolderUpdate
from app.schemas.note import NoteCreate, NoteUpdate

logger = logging.getLogger(__name__)

FOLDER_NAME_REQUIRED = "'name' is required"
FOLDER_UPDATE_REQUIRED = "Request body must contain 'name'"
NOTE_UPDATE_REQUIRED = "Request body must contain either 'name' or 'content'"


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string and whitespace-only strings."""
    return value is None or not value.strip()


def missing_field_message(field: str) -> str:
    return f"Missing '{field}' in request body"


def _reject(message: str, field: Optional[str] = None) -> None:
    logger.warning("Validation failed: %s", message)
    raise ValidationError(message=message, field=field)


def validate_folder_create(body: Optional[FolderCreate]) -> Dict[str, Any]:
    """Return the insert fields for a new folder, or raise ValidationError."""
    body = body or FolderCreate()
    if is_blank(body.name):
        _reject(FOLDER_NAME_REQUIRED, field="name")
    return {"name": body.name}


def validate_folder_update(body: Optional[FolderUpdate]) -> Dict[str, Any]:
    body = body or FolderUpdate()
    if is_blank(body.name):
        _reject(FOLDER_UPDATE_REQUIRED, field="name")
    return {"name": body.name}


def validate_note_create(body: Optional[NoteCreate]) -> Dict[str, Any]:
    """
    Check name, folder_id and content one at a time, in that order.

    The first missing field is reported by name. folder_id is only checked for
    presence; whether the folder exists is the store's concern.
    """
    body = body or NoteCreate()
    if is_blank(body.name):
        _reject(missing_field_message("name"), field="name")
    if body.folder_id is None:
        _reject(missing_field_message("folder_id"), field="folder_id")
    if body.content is None:
        _reject(missing_field_message("content"), field="content")
    return {
        "name": body.name,
        "folder_id": body.folder_id,
        "content": body.content,
    }


def validate_note_update(body: Optional[NoteUpdate]) -> Dict[str, Any]:
    """
    Return the fields to write: a non-blank name, and content whenever it was sent.

    At least one of them must be truthy; an empty content alongside a
    usable name clears the note's content.
    """
    body = body or NoteUpdate()
    if is_blank(body.name) and not body.content:
        _reject(NOTE_UPDATE_REQUIRED)
    fields: Dict[str, Any] = {}
    if not is_blank(body.name):
        fields["name"] = body.name
    if body.content is not None:
        fields["content"] = body.content
    return fields
