"""
Noteful Backend — Folder Route Handlers
=========================================

What:  /api/folders collection and item routes.
How:   Item routes receive the folder already resolved by the ResolvedFolder
       dependency (404 before the handler runs). Bodies are checked by
       app.services.validation before any store call; every outbound folder
       passes through serialize_folder (HTML escaping).

Routes:
    GET    /api/folders              → 200 [Folder]
    POST   /api/folders              → 201 Folder + Location
    GET    /api/folders/{folder_id}  → 200 Folder
    PATCH  /api/folders/{folder_id}  → 204
    DELETE /api/folders/{folder_id}  → 204
"""

import logging
from typing import List

from fastapi import APIRouter, Request, Response, status

from app.dependencies import DbSession, ResolvedFolder
from app.schemas.common import AUTH_AND_SERVER_ERRORS, ErrorResponse
from app.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from app.services.folder_service import folder_service
from app.services.sanitizer import serialize_folder
from app.services.validation import validate_folder_create, validate_folder_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Folders"], responses=AUTH_AND_SERVER_ERRORS)

NOT_FOUND = {404: {"description": "Folder not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Missing or empty 'name'", "model": ErrorResponse}}


@router.get(
    "/folders",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(db: DbSession) -> List[FolderResponse]:
    folders = await folder_service.get_all(db)
    return [serialize_folder(folder) for folder in folders]


@router.post(
    "/folders",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    db: DbSession,
    body: FolderCreate | None = None,
) -> FolderResponse:
    """
    Create a folder from {"name": ...}.

    The Location header points at the new folder's item route.
    """
    fields = validate_folder_create(body)
    folder = await folder_service.insert(db, fields)
    response.headers["Location"] = str(
        request.app.url_path_for("get_folder", folder_id=str(folder.id))
    )
    return serialize_folder(folder)


@router.get(
    "/folders/{folder_id}",
    response_model=FolderResponse,
    responses=NOT_FOUND,
    summary="Get a single folder by ID",
)
async def get_folder(folder: ResolvedFolder) -> FolderResponse:
    return serialize_folder(folder)


@router.patch(
    "/folders/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Rename a folder",
)
async def update_folder(
    folder: ResolvedFolder,
    db: DbSession,
    body: FolderUpdate | None = None,
) -> Response:
    """Only `name` is writable. Success has no body; re-fetch to see the change."""
    fields = validate_folder_update(body)
    await folder_service.update(db, folder.id, fields)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/folders/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a folder and its notes",
)
async def delete_folder(folder: ResolvedFolder, db: DbSession) -> Response:
    await folder_service.delete(db, folder.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
