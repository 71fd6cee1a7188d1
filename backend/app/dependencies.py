"""
Noteful Backend — Route Dependencies
======================================

What:  Typed dependencies shared by the routers: the database session and
       the item-route resolution step.
Why:   Every item route starts with the same lookup and the same 404; doing
       it once here keeps the handlers to their verb logic.
How:   resolve_folder / resolve_note look the path id up before the verb
       handler runs. A missing record raises NotFoundError (404) and the
       handler is never called; a found record is handed to the handler as
       an ordinary typed argument.

Usage:
    @router.get("/folders/{folder_id}")
    async def get_folder(folder: ResolvedFolder) -> FolderResponse:
        ...

FastAPI caches dependencies per request, so the resolution step and the
handler share one DbSession.
"""

import logging
from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import NotFoundError
from app.models.folder import Folder
from app.models.note import Note
from app.services.folder_service import folder_service
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def resolve_folder(
    db: DbSession,
    folder_id: int = Path(description="Folder id"),
) -> Folder:
    folder = await folder_service.get_by_id(db, folder_id)
    if folder is None:
        logger.warning("Folder with id %s not found", folder_id)
        raise NotFoundError(resource="Folder", resource_id=folder_id)
    return folder


async def resolve_note(
    db: DbSession,
    note_id: int = Path(description="Note id"),
) -> Note:
    note = await note_service.get_by_id(db, note_id)
    if note is None:
        logger.warning("Note with id %s not found", note_id)
        raise NotFoundError(resource="Note", resource_id=note_id)
    return note


ResolvedFolder = Annotated[Folder, Depends(resolve_folder)]
ResolvedNote = Annotated[Note, Depends(resolve_note)]
