import logging

from fastapi import APIRouter, Depends, Request, Response
from postgrest.exceptions import APIError as PostgRESTAPIError
from supabase import AsyncClient

from common.database.client import get_db
from common.exceptions import UNIQUE_VIOLATION, ConflictError, NotFoundError
from common.validation import require_field, require_valid_id
from services.notes_service.crud import folders as crud
from services.notes_service.schemas.folders import FolderIn, FolderResponse

router = APIRouter()
logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Folder name already exists"


@router.get("", response_model=list[FolderResponse])
async def list_folders(
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    """All folders, sorted by name."""
    return await crud.list_folders(db)


@router.get("/{folder_id}", response_model=FolderResponse)
async def get_folder(
    folder_id: str,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(folder_id)

    folder = await crud.get_folder_by_id(db, folder_id)
    if not folder:
        raise NotFoundError("Folder")
    return folder


@router.post("", response_model=FolderResponse, status_code=201)
async def create_folder(
    folder_in: FolderIn,
    request: Request,
    response: Response,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_field(folder_in.name, "name")

    try:
        folder = await crud.create_folder(db, folder_in.name)
    except PostgRESTAPIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(DUPLICATE_NAME) from exc
        raise

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{folder['id']}"
    return folder


@router.put("/{folder_id}", response_model=FolderResponse)
async def update_folder(
    folder_id: str,
    folder_in: FolderIn,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(folder_id)
    require_field(folder_in.name, "name")

    try:
        updated = await crud.update_folder(db, folder_id, folder_in.name)
    except PostgRESTAPIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(DUPLICATE_NAME) from exc
        raise

    if not updated:
        raise NotFoundError("Folder")
    return updated


@router.delete("/{folder_id}", status_code=204)
async def delete_folder(
    folder_id: str,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    """Unset `folder_id` on every note, then delete the folder, atomically."""
    require_valid_id(folder_id)

    deleted, touched = await crud.delete_folder_cascade(db, folder_id)
    logger.info("delete_folder: folder=%s deleted=%s notes_updated=%d", folder_id, deleted, touched)

    if not deleted:
        raise NotFoundError("Folder")
    return None
