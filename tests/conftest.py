import pytest
from fastapi.testclient import TestClient

from common.database.client import get_db
from fake_supabase import FakeSupabase
from main import app


@pytest.fixture()
def db():
    return FakeSupabase()


@pytest.fixture()
def seed(db):
    """Three folders, three tags and four notes wired between them."""
    folders = [db.insert_row("folders", {"name": name}) for name in ("Archive", "Drafts", "Personal")]
    tags = [db.insert_row("tags", {"name": name}) for name in ("breed", "domestic", "feral")]
    notes = [
        db.insert_row("notes", {
            "title": "5 life lessons learned from cats",
            "content": "Lorem ipsum dolor sit amet",
            "folder_id": folders[0]["id"],
            "tags": [tags[0]["id"]],
        }),
        db.insert_row("notes", {
            "title": "What the government doesn't want you to know about cats",
            "content": "Posuere sollicitudin aliquam ultrices",
            "folder_id": folders[0]["id"],
            "tags": [tags[0]["id"], tags[1]["id"]],
        }),
        db.insert_row("notes", {
            "title": "7 things Lady Gaga has in common with cats",
            "content": "Morbi tristique senectus et netus",
            "folder_id": folders[1]["id"],
            "tags": [tags[1]["id"]],
        }),
        db.insert_row("notes", {
            "title": "The most boring article about cats",
            "content": "Nothing about GAGA in the title, 100% cats",
        }),
    ]
    return {"folders": folders, "tags": tags, "notes": notes}


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
