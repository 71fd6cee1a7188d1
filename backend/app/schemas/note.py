"""
Noteful Backend — Note Request/Response Schemas
=================================================

What:  Pydantic models defining the note API contract.
Who:   Used by the notes routes as request bodies and response models.

The external name of a note's parent reference is `folder_id`.
`id` and `modified` are never accepted from clients; they are simply not
fields of the request models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    All three fields are required; each one is checked individually so the
    400 response can name the missing field.
    """
    name: Optional[str] = Field(default=None, description="Note title (required, non-empty)")
    folder_id: Optional[int] = Field(default=None, description="Id of an existing folder")
    content: Optional[str] = Field(default=None, description="Note body (required, may be empty)")


class NoteUpdate(BaseModel):
    """Body of PATCH /api/notes/{id}: name and/or content."""
    name: Optional[str] = Field(default=None, description="New title")
    content: Optional[str] = Field(default=None, description="New body")


class NoteResponse(BaseModel):
    """Outbound note; `name` and `content` are HTML-escaped before they get here."""
    id: int = Field(description="Store-assigned note id")
    name: str = Field(description="Escaped note title")
    folder_id: int = Field(description="Parent folder id")
    content: str = Field(description="Escaped note body")
    modified: datetime = Field(description="Creation timestamp assigned by the store")

    model_config = {"from_attributes": True}
