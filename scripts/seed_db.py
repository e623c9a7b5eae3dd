"""Seed the notes database with a small sample data set.

Inserts folders and tags first, then notes that reference them by name.
Reads SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY from the environment (or .env).

Usage:
    python -m scripts.seed_db [--reset]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from common.database.client import close_client, open_client

logger = logging.getLogger("noteful.seed")

FOLDERS: list[str] = ["Archive", "Drafts", "Personal", "Work"]

TAGS: list[str] = ["breed", "hybrid", "domestic", "feral"]

# Each entry: (title, content, folder name or None, tag names)
NOTES: list[tuple[str, str, str | None, list[str]]] = [
    (
        "5 life lessons learned from cats",
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
        "Archive",
        ["breed"],
    ),
    (
        "What the government doesn't want you to know about cats",
        "Posuere sollicitudin aliquam ultrices sagittis orci a.",
        "Drafts",
        ["hybrid", "domestic"],
    ),
    (
        "The most boring article about cats you'll ever read",
        "Sed ut perspiciatis unde omnis iste natus error sit voluptatem.",
        "Personal",
        ["feral"],
    ),
    (
        "7 things Lady Gaga has in common with cats",
        "Morbi tristique senectus et netus et malesuada fames ac.",
        "Work",
        [],
    ),
    (
        "10 ways cats can help you live to 100",
        "Ut enim ad minim veniam, quis nostrud exercitation ullamco.",
        None,
        ["breed", "domestic"],
    ),
]


async def reset(db) -> None:
    for table in ("notes", "folders", "tags"):
        await db.table(table).delete().neq("id", "00000000-0000-0000-0000-000000000000").execute()
        logger.info("Cleared %s", table)


async def seed(db) -> None:
    folders = (await db.table("folders").insert([{"name": n} for n in FOLDERS]).execute()).data
    tags = (await db.table("tags").insert([{"name": n} for n in TAGS]).execute()).data
    folder_ids = {f["name"]: f["id"] for f in folders}
    tag_ids = {t["name"]: t["id"] for t in tags}

    rows = [
        {
            "title": title,
            "content": content,
            "folder_id": folder_ids[folder] if folder else None,
            "tags": [tag_ids[name] for name in tag_names],
        }
        for title, content, folder, tag_names in NOTES
    ]
    notes = (await db.table("notes").insert(rows).execute()).data
    logger.info("Seeded %d folders, %d tags, %d notes", len(folders), len(tags), len(notes))


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the notes database")
    parser.add_argument("--reset", action="store_true", help="Delete existing rows first")
    args = parser.parse_args(argv)

    db = await open_client()
    try:
        if args.reset:
            await reset(db)
        await seed(db)
    finally:
        await close_client(db)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(asyncio.run(main()))
