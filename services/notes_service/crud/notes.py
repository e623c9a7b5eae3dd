import re
from typing import Optional

from supabase import AsyncClient

from . import tags as crud_tags

# Anything that is not a word character or whitespace may carry meaning in a
# Postgres regex; a backslash makes it literal.
_REGEX_SPECIAL = re.compile(r"([^\w\s])")


def _contains_regex(term: str) -> str:
    """Quoted PostgREST imatch value matching ``term`` literally anywhere in the column."""
    regex = _REGEX_SPECIAL.sub(r"\\\1", term)
    quoted = regex.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{quoted}"'


async def list_notes(
    db: AsyncClient,
    search_term: Optional[str] = None,
    folder_id: Optional[str] = None,
    tag_id: Optional[str] = None,
) -> list[dict]:
    query = db.table("notes").select("*")

    if search_term:
        pattern = _contains_regex(search_term)
        query = query.or_(f"title.imatch.{pattern},content.imatch.{pattern}")

    if folder_id:
        query = query.eq("folder_id", folder_id)

    if tag_id:
        query = query.contains("tags", [tag_id])

    result = await query.order("updated_at", desc=True).execute()
    return result.data or []


async def get_note_by_id(db: AsyncClient, note_id: str) -> Optional[dict]:
    result = (
        await db.table("notes")
        .select("*")
        .eq("id", note_id)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None


def _note_payload(
    title: str,
    content: Optional[str],
    folder_id: Optional[str],
    tags: Optional[list[str]],
) -> dict:
    return {
        "title": title,
        "content": content,
        "folder_id": folder_id,
        "tags": list(tags or []),
    }


async def create_note(
    db: AsyncClient,
    title: str,
    content: Optional[str] = None,
    folder_id: Optional[str] = None,
    tags: Optional[list[str]] = None,
) -> dict:
    data = _note_payload(title, content, folder_id, tags)
    result = await db.table("notes").insert(data).execute()
    return result.data[0]


async def replace_note(
    db: AsyncClient,
    note_id: str,
    title: str,
    content: Optional[str] = None,
    folder_id: Optional[str] = None,
    tags: Optional[list[str]] = None,
) -> Optional[dict]:
    """Full replace: omitted fields are written as null / empty list."""
    data = _note_payload(title, content, folder_id, tags)
    result = (
        await db.table("notes")
        .update(data)
        .eq("id", note_id)
        .execute()
    )
    return result.data[0] if result.data else None


async def delete_note(db: AsyncClient, note_id: str) -> bool:
    result = (
        await db.table("notes")
        .delete()
        .eq("id", note_id)
        .execute()
    )
    return len(result.data) > 0 if result.data else False


async def populate_tags(db: AsyncClient, notes: list[dict]) -> list[dict]:
    """Replace each note's tag ids with the matching tag rows.

    Ids that no longer resolve to a tag are dropped. Order of the note's own
    tag list is kept.
    """
    tag_ids = sorted({tag_id for note in notes for tag_id in (note.get("tags") or [])})
    tags_by_id = {
        str(tag["id"]): tag for tag in await crud_tags.get_tags_by_ids(db, tag_ids)
    }

    populated = []
    for note in notes:
        expanded = [
            tags_by_id[str(tag_id)]
            for tag_id in (note.get("tags") or [])
            if str(tag_id) in tags_by_id
        ]
        populated.append({**note, "tags": expanded})
    return populated
