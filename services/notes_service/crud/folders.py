from typing import Optional

from supabase import AsyncClient


async def list_folders(db: AsyncClient) -> list[dict]:
    result = await db.table("folders").select("*").order("name").execute()
    return result.data or []


async def get_folder_by_id(db: AsyncClient, folder_id: str) -> Optional[dict]:
    result = (
        await db.table("folders")
        .select("*")
        .eq("id", folder_id)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None


async def create_folder(db: AsyncClient, name: str) -> dict:
    result = await db.table("folders").insert({"name": name}).execute()
    return result.data[0]


async def update_folder(db: AsyncClient, folder_id: str, name: str) -> Optional[dict]:
    result = (
        await db.table("folders")
        .update({"name": name})
        .eq("id", folder_id)
        .execute()
    )
    return result.data[0] if result.data else None


async def delete_folder_cascade(db: AsyncClient, folder_id: str) -> tuple[bool, int]:
    """Delete the folder and its note references in one transaction.

    Returns whether a folder row was removed and how many notes were touched.
    """
    result = await db.rpc("delete_folder_cascade", {"p_folder_id": folder_id}).execute()
    row = result.data[0] if result.data else {}
    return bool(row.get("deleted")), row.get("notes_updated") or 0
