from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from supabase import AsyncClient

from common.database.client import get_db
from common.exceptions import NotFoundError
from common.validation import require_field, require_valid_id
from services.notes_service.crud import notes as crud
from services.notes_service.schemas.notes import NoteIn, NoteResponse

router = APIRouter()


def _validate_note_body(note_in: NoteIn) -> None:
    require_field(note_in.title, "title")
    if note_in.folder_id:
        require_valid_id(note_in.folder_id, "folder_id")
    for tag_id in note_in.tags or []:
        require_valid_id(tag_id, "tags")


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    search_term: Optional[str] = Query(None, description="Case-insensitive match on title or content"),
    folder_id: Optional[str] = Query(None),
    tag_id: Optional[str] = Query(None),
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    """Notes, most recently updated first. Filters combine with AND."""
    if folder_id:
        require_valid_id(folder_id, "folder_id")
    if tag_id:
        require_valid_id(tag_id, "tag_id")

    notes = await crud.list_notes(db, search_term, folder_id, tag_id)
    return await crud.populate_tags(db, notes)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(note_id)

    note = await crud.get_note_by_id(db, note_id)
    if not note:
        raise NotFoundError("Note")
    populated = await crud.populate_tags(db, [note])
    return populated[0]


@router.post("", response_model=NoteResponse, status_code=201)
async def create_note(
    note_in: NoteIn,
    request: Request,
    response: Response,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    _validate_note_body(note_in)

    note = await crud.create_note(
        db,
        title=note_in.title,
        content=note_in.content,
        folder_id=note_in.folder_id or None,
        tags=note_in.tags,
    )

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{note['id']}"
    populated = await crud.populate_tags(db, [note])
    return populated[0]


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    note_in: NoteIn,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(note_id)
    _validate_note_body(note_in)

    updated = await crud.replace_note(
        db,
        note_id,
        title=note_in.title,
        content=note_in.content,
        folder_id=note_in.folder_id or None,
        tags=note_in.tags,
    )
    if not updated:
        raise NotFoundError("Note")
    populated = await crud.populate_tags(db, [updated])
    return populated[0]


@router.delete("/{note_id}", status_code=204)
async def delete_note(
    note_id: str,
    db: AsyncClient = Depends(get_db),  # noqa: B008
):
    require_valid_id(note_id)

    deleted = await crud.delete_note(db, note_id)
    if not deleted:
        raise NotFoundError("Note")
    return None
