"""End-to-end flow through the HTTP API on an in-memory database."""

import uuid
from datetime import datetime, timedelta

import pytest


def _ts(value):
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed.utcoffset() == timedelta(0)
    return parsed


async def _signup(client, username):
    resp = await client.post("/api/user/signup", json={"username": username, "password": "secret1"})
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['data']['token']}"}


@pytest.mark.asyncio
async def test_alice_manages_her_notes(async_client):
    alice = await _signup(async_client, "alice")

    groceries = (
        await async_client.post(
            "/api/notes", json={"title": "Groceries", "text": "milk, eggs"}, headers=alice
        )
    ).json()["data"]
    work = (
        await async_client.post("/api/notes", json={"title": "Work", "text": "ship it"}, headers=alice)
    ).json()["data"]

    listed = (await async_client.get("/api/notes", headers=alice)).json()["data"]
    assert [n["id"] for n in listed] == [work["id"], groceries["id"]]

    updated = (
        await async_client.put(
            "/api/notes", params={"id": groceries["id"]}, json={"text": "milk, eggs, bread"},
            headers=alice,
        )
    ).json()["data"]
    assert updated["owner_id"] == groceries["owner_id"]
    assert updated["created_at"] == groceries["created_at"]
    assert _ts(updated["modified_at"]) > _ts(groceries["modified_at"])

    # the edited note is now the most recent one
    listed = (await async_client.get("/api/notes", headers=alice)).json()["data"]
    assert [n["id"] for n in listed] == [groceries["id"], work["id"]]

    found = (
        await async_client.get("/api/notes/search", params={"q": "GROC"}, headers=alice)
    ).json()["data"]
    assert [n["id"] for n in found] == [groceries["id"]]

    resp = await async_client.delete("/api/notes", params={"id": work["id"]}, headers=alice)
    assert resp.status_code == 204
    listed = (await async_client.get("/api/notes", headers=alice)).json()["data"]
    assert [n["id"] for n in listed] == [groceries["id"]]


@pytest.mark.asyncio
async def test_users_cannot_see_each_others_notes(async_client):
    alice = await _signup(async_client, "alice")
    bob = await _signup(async_client, "bob")

    note = (
        await async_client.post("/api/notes", json={"title": "Diary", "text": "private"}, headers=alice)
    ).json()["data"]
    params = {"id": note["id"]}

    assert (await async_client.get(f"/api/notes/{note['id']}", headers=bob)).status_code == 404
    assert (
        await async_client.put("/api/notes", params=params, json={"title": "mine"}, headers=bob)
    ).status_code == 404
    assert (await async_client.delete("/api/notes", params=params, headers=bob)).status_code == 404
    assert (await async_client.get("/api/notes", headers=bob)).json()["data"] == []
    assert (
        await async_client.get("/api/notes/search", params={"q": "Diary"}, headers=bob)
    ).json()["data"] == []

    # alice's note is untouched
    still = (await async_client.get(f"/api/notes/{note['id']}", headers=alice)).json()["data"]
    assert still["title"] == "Diary"
    assert still["modified_at"] == note["modified_at"]


@pytest.mark.asyncio
async def test_foreign_note_looks_exactly_like_missing_note(async_client):
    alice = await _signup(async_client, "alice")
    bob = await _signup(async_client, "bob")

    note = (
        await async_client.post("/api/notes", json={"title": "Diary", "text": "private"}, headers=alice)
    ).json()["data"]
    random_id = str(uuid.uuid4())

    async def as_bob(note_id):
        get = await async_client.get(f"/api/notes/{note_id}", headers=bob)
        put = await async_client.put(
            "/api/notes", params={"id": note_id}, json={"title": "mine"}, headers=bob
        )
        delete = await async_client.delete("/api/notes", params={"id": note_id}, headers=bob)
        return [(r.status_code, r.json()) for r in (get, put, delete)]

    foreign = await as_bob(note["id"])
    missing = await as_bob(random_id)

    assert foreign == missing
    assert foreign == [
        (404, {"status": "fail", "message": "Note not found."}),
        (404, {
            "status": "fail",
            "message": "Note not found or you do not have permission to update it.",
        }),
        (404, {
            "status": "fail",
            "message": "Note not found or you do not have permission to delete it.",
        }),
    ]
