"""
Noteful Backend — Folder Request/Response Schemas
===================================================

What:  Pydantic models defining the folder API contract.
How:   Request bodies parse into these typed models; presence rules are then
       checked field by field in app.services.validation, so that a missing
       name produces the documented 400 message instead of a schema error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderCreate(BaseModel):
    """Body of POST /api/folders. Unknown keys (e.g. a client-sent id) are ignored."""
    name: Optional[str] = Field(default=None, description="Folder name (required, non-empty)")


class FolderUpdate(BaseModel):
    """Body of PATCH /api/folders/{id}. Only the name is writable."""
    name: Optional[str] = Field(default=None, description="New folder name")


class FolderResponse(BaseModel):
    """Outbound folder; `name` is HTML-escaped before it gets here."""
    id: int = Field(description="Store-assigned folder id")
    name: str = Field(description="Escaped folder name")

    model_config = {"from_attributes": True}
