import logging

from fastapi import APIRouter, Depends, Request, Response
from postgrest.exceptions import APIError as PostgRESTAPIError
from supabase import AsyncClient

from common.database.client import get_db
from common.exceptions import UNIQUE_VIOLATION, ConflictError, NotFoundError
from common.validation import require_field, require_valid_id
from services.notes_service.crud import tags as crud
from services.notes_service.schemas.tags import TagIn, TagResponse

router = APIRouter()
logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Tag name already exists"


@router.get("", response_model=list[TagResponse])
async def list_tags(
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    return await crud.list_tags(db)


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(
    tag_id: str,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(tag_id)

    tag = await crud.get_tag_by_id(db, tag_id)
    if not tag:
        raise NotFoundError("Tag")
    return tag


@router.post("", response_model=TagResponse, status_code=201)
async def create_tag(
    tag_in: TagIn,
    request: Request,
    response: Response,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_field(tag_in.name, "name")

    try:
        tag = await crud.create_tag(db, tag_in.name)
    except PostgRESTAPIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(DUPLICATE_NAME) from exc
        raise

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{tag['id']}"
    return tag


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: str,
    tag_in: TagIn,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(tag_id)
    require_field(tag_in.name, "name")

    try:
        updated = await crud.update_tag(db, tag_id, tag_in.name)
    except PostgRESTAPIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(DUPLICATE_NAME) from exc
        raise

    if not updated:
        raise NotFoundError("Tag")
    return updated


@router.delete("/{tag_id}", status_code=204)
async def delete_tag(
    tag_id: str,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    """Remove the tag id from every note's tag list, then delete the tag, atomically."""
    require_valid_id(tag_id)

    deleted, touched = await crud.delete_tag_cascade(db, tag_id)
    logger.info("delete_tag: tag=%s deleted=%s notes_updated=%d", tag_id, deleted, touched)

    if not deleted:
        raise NotFoundError("Tag")
    return None
