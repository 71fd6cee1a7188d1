"""
Noteful Backend — Folder Store
================================

What:  CRUD access to the `folders` table.
Who:   Folder routes and the folder resolution dependency.

Deleting a folder also removes its notes; the database does that through the
foreign key's ON DELETE CASCADE, this service issues a single DELETE.
"""

from app.models.folder import Folder
from app.services.store import RecordStore


class FolderService(RecordStore[Folder]):
    model = Folder
    resource = "folder"
    updatable_fields = frozenset({"name"})


folder_service = FolderService()
