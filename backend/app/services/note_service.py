"""
Noteful Backend — Note Store
==============================

What:  CRUD access to the `notes` table.
Who:   Note routes and the note resolution dependency.

Insert relies on the database for referential integrity: a folder_id that
does not reference an existing folder fails the foreign key and surfaces as
StoreError. Partial updates may only touch name and content; folder_id and
modified are fixed at creation.
"""

from app.models.note import Note
from app.services.store import RecordStore


class NoteService(RecordStore[Note]):
    model = Note
    resource = "note"
    updatable_fields = frozenset({"name", "content"})


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
