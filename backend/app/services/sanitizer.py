"""
Noteful Backend — Output Sanitizer
====================================

What:  Escapes free-text fields of outbound records.
How:   HTML entity encoding of &, <, > and double quotes. Single quotes are
       left as they are, so "<script>alert('x');</script>" is returned as
       "&lt;script&gt;alert('x');&lt;/script&gt;".
Who:   Every route that returns a folder or a note goes through
       serialize_folder() / serialize_note().

Stored values are never modified: the database keeps exactly what the client
sent, escaping happens on the way out. Ids, folder_id and timestamps are not
touched.
"""

import html
from typing import Optional

from app.models.folder import Folder
from app.models.note import Note
from app.schemas.folder import FolderResponse
from app.schemas.note import NoteResponse


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Entity-encode markup-significant characters; text without them is returned unchanged."""
    if value is None:
        return None
    return html.escape(value, quote=False).replace('"', "&quot;")


def serialize_folder(folder: Folder) -> FolderResponse:
    return FolderResponse(
        id=folder.id,
        name=sanitize_text(folder.name),
    )


def serialize_note(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        name=sanitize_text(note.name),
        folder_id=note.folder_id,
        content=sanitize_text(note.content),
        modified=note.modified,
    )
