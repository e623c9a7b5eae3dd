from datetime import datetime

MISSING_ID = "00000000-0000-4000-8000-000000000000"


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_list_folders_sorted_by_name(client, db, seed):
    db.insert_row("folders", {"name": "Aardvark"})
    r = client.get("/api/folders")
    assert r.status_code == 200
    names = [f["name"] for f in r.json()]
    assert names == ["Aardvark", "Archive", "Drafts", "Personal"]
    assert len(names) == db.count("folders")


def test_folder_response_fields(client, seed):
    r = client.get("/api/folders")
    for folder in r.json():
        assert set(folder) == {"id", "name", "created_at", "updated_at"}


def test_get_folder(client, seed):
    stored = seed["folders"][1]
    r = client.get(f"/api/folders/{stored['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == stored["id"]
    assert r.json()["name"] == "Drafts"


def test_get_folder_with_bad_id(client, seed):
    r = client.get("/api/folders/12345")
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "The `id` is not valid"


def test_get_folder_with_absent_id(client, seed):
    r = client.get(f"/api/folders/{MISSING_ID}")
    assert r.status_code == 404


def test_create_then_get_folder(client):
    r = client.post("/api/folders", json={"name": "Work"})
    assert r.status_code == 201
    created = r.json()
    assert r.headers["location"] == f"/api/folders/{created['id']}"

    r = client.get(f"/api/folders/{created['id']}")
    assert r.json() == created


def test_create_folder_requires_name(client, db):
    r = client.post("/api/folders", json={})
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Missing `name` in request body"

    r = client.post("/api/folders", json={"name": ""})
    assert r.status_code == 400
    assert db.count("folders") == 0


def test_create_duplicate_folder_is_a_conflict(client, db):
    assert client.post("/api/folders", json={"name": "Work"}).status_code == 201

    r = client.post("/api/folders", json={"name": "Work"})
    assert r.status_code == 400
    assert r.json()["error"] == {"code": "conflict", "message": "Folder name already exists"}
    assert db.count("folders") == 1


def test_update_folder(client, seed):
    stored = seed["folders"][0]
    r = client.put(f"/api/folders/{stored['id']}", json={"name": "Old stuff"})
    assert r.status_code == 200
    assert r.json()["name"] == "Old stuff"
    assert _ts(r.json()["created_at"]) == _ts(stored["created_at"])
    assert _ts(r.json()["updated_at"]) > _ts(stored["updated_at"])


def test_update_folder_with_same_name(client, seed):
    stored = seed["folders"][0]
    r = client.put(f"/api/folders/{stored['id']}", json={"name": stored["name"]})
    assert r.status_code == 200


def test_update_folder_to_existing_name_is_a_conflict(client, seed):
    r = client.put(f"/api/folders/{seed['folders'][0]['id']}", json={"name": "Drafts"})
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Folder name already exists"


def test_update_folder_validation(client, seed):
    assert client.put("/api/folders/nope", json={"name": "x"}).status_code == 400
    r = client.put(f"/api/folders/{seed['folders'][0]['id']}", json={})
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Missing `name` in request body"


def test_update_folder_with_absent_id(client, seed):
    r = client.put(f"/api/folders/{MISSING_ID}", json={"name": "x"})
    assert r.status_code == 404


def test_delete_folder_clears_note_references(client, db, seed):
    folder_id = seed["folders"][0]["id"]
    referencing = [n["id"] for n in seed["notes"] if n["folder_id"] == folder_id]
    assert len(referencing) == 2

    r = client.delete(f"/api/folders/{folder_id}")
    assert r.status_code == 204
    assert db.find("folders", folder_id) is None

    for note_id in referencing:
        note = client.get(f"/api/notes/{note_id}").json()
        assert note["folder_id"] is None
    # notes survive and unrelated references are untouched
    assert db.count("notes") == 4
    assert db.find("notes", seed["notes"][2]["id"])["folder_id"] == seed["folders"][1]["id"]


def test_delete_folder_is_a_single_database_call(client, db, seed):
    db.calls.clear()
    client.delete(f"/api/folders/{seed['folders'][0]['id']}")
    assert db.calls == [("rpc", "delete_folder_cascade")]


def test_delete_folder_failure_changes_nothing(client, db, seed):
    folder_id = seed["folders"][0]["id"]
    db.fail("rpc", "delete_folder_cascade")

    r = client.delete(f"/api/folders/{folder_id}")
    assert r.status_code == 500
    assert r.json()["error"]["code"] == "db_error"
    assert db.find("folders", folder_id) is not None
    assert db.find("notes", seed["notes"][0]["id"])["folder_id"] == folder_id


def test_delete_folder_with_bad_id(client):
    r = client.delete("/api/folders/not-valid")
    assert r.status_code == 400


def test_delete_folder_with_absent_id(client, seed):
    r = client.delete(f"/api/folders/{MISSING_ID}")
    assert r.status_code == 404
