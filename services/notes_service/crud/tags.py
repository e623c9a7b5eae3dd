from typing import Optional

from supabase import AsyncClient


async def list_tags(db: AsyncClient) -> list[dict]:
    result = await db.table("tags").select("*").order("name").execute()
    return result.data or []


async def get_tags_by_ids(db: AsyncClient, tag_ids: list[str]) -> list[dict]:
    if not tag_ids:
        return []
    result = await db.table("tags").select("*").in_("id", tag_ids).execute()
    return result.data or []


async def get_tag_by_id(db: AsyncClient, tag_id: str) -> Optional[dict]:
    result = (
        await db.table("tags")
        .select("*")
        .eq("id", tag_id)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None


async def create_tag(db: AsyncClient, name: str) -> dict:
    result = await db.table("tags").insert({"name": name}).execute()
    return result.data[0]


async def update_tag(db: AsyncClient, tag_id: str, name: str) -> Optional[dict]:
    result = (
        await db.table("tags")
        .update({"name": name})
        .eq("id", tag_id)
        .execute()
    )
    return result.data[0] if result.data else None


async def delete_tag_cascade(db: AsyncClient, tag_id: str) -> tuple[bool, int]:
    """Delete the tag and its note references in one transaction.

    Returns whether a tag row was removed and how many notes were touched.
    """
    result = await db.rpc("delete_tag_cascade", {"p_tag_id": tag_id}).execute()
    row = result.data[0] if result.data else {}
    return bool(row.get("deleted")), row.get("notes_updated") or 0
