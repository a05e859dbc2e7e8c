"""Unit tests for NoteRepository on an in-memory SQLite session."""

import uuid

import pytest

from swingnotes.core.repositories import NoteChanges, NoteRepository, OwnerNotFoundError
from swingnotes.core.repositories.note_repository import _like_pattern


@pytest.mark.asyncio
async def test_create_note_sets_timestamps(test_session, test_user):
    repo = NoteRepository(test_session)
    note = await repo.create_note(test_user.id, "Groceries", "milk, eggs")

    assert note.owner_id == test_user.id
    assert note.created_at == note.modified_at


@pytest.mark.asyncio
async def test_create_note_for_missing_owner(test_session):
    repo = NoteRepository(test_session)
    with pytest.raises(OwnerNotFoundError):
        await repo.create_note(uuid.uuid4(), "orphan", "text")


@pytest.mark.asyncio
async def test_list_by_owner_most_recent_first(test_session, test_user, other_user):
    repo = NoteRepository(test_session)
    first = await repo.create_note(test_user.id, "first", "1")
    second = await repo.create_note(test_user.id, "second", "2")
    await repo.create_note(other_user.id, "not mine", "3")

    # touching the older note moves it to the front
    await repo.update_note(first.id, test_user.id, NoteChanges(text="1b"))

    notes = await repo.list_by_owner(test_user.id)
    assert [n.id for n in notes] == [first.id, second.id]


@pytest.mark.asyncio
async def test_get_by_id_and_owner_is_scoped(test_session, test_note, other_user):
    repo = NoteRepository(test_session)
    assert (await repo.get_by_id_and_owner(test_note.id, test_note.owner_id)).id == test_note.id
    assert await repo.get_by_id_and_owner(test_note.id, other_user.id) is None


@pytest.mark.asyncio
async def test_update_only_touches_supplied_fields(test_session, test_note):
    repo = NoteRepository(test_session)
    updated = await repo.update_note(test_note.id, test_note.owner_id, NoteChanges(title="Shopping"))

    assert updated.title == "Shopping"
    assert updated.text == "milk, eggs"
    assert updated.owner_id == test_note.owner_id
    assert updated.modified_at > updated.created_at


@pytest.mark.asyncio
async def test_update_by_non_owner_changes_nothing(test_session, test_note, other_user):
    repo = NoteRepository(test_session)
    result = await repo.update_note(test_note.id, other_user.id, NoteChanges(title="hijacked"))
    assert result is None

    unchanged = await repo.get_by_id_and_owner(test_note.id, test_note.owner_id)
    assert unchanged.title == "Groceries"


@pytest.mark.asyncio
async def test_update_with_no_changes_returns_none(test_session, test_note):
    repo = NoteRepository(test_session)
    assert await repo.update_note(test_note.id, test_note.owner_id, NoteChanges()) is None


@pytest.mark.asyncio
async def test_delete_note_is_scoped(test_session, test_note, other_user):
    repo = NoteRepository(test_session)
    assert await repo.delete_note(test_note.id, other_user.id) is False
    assert await repo.delete_note(test_note.id, test_note.owner_id) is True
    assert await repo.delete_note(test_note.id, test_note.owner_id) is False


@pytest.mark.asyncio
async def test_search_is_case_insensitive_and_scoped(test_session, test_user, other_user):
    repo = NoteRepository(test_session)
    await repo.create_note(test_user.id, "Groceries", "x")
    await repo.create_note(test_user.id, "grocery list", "x")
    await repo.create_note(test_user.id, "Work", "groceries in text only")
    await repo.create_note(other_user.id, "Groceries too", "x")

    notes = await repo.search_by_title(test_user.id, "GROCER")
    assert sorted(n.title for n in notes) == ["Groceries", "grocery list"]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(test_session, test_user):
    repo = NoteRepository(test_session)
    await repo.create_note(test_user.id, "100% done", "x")
    await repo.create_note(test_user.id, "1000 things", "x")
    await repo.create_note(test_user.id, "snake_case", "x")
    await repo.create_note(test_user.id, "snakeXcase", "x")

    assert [n.title for n in await repo.search_by_title(test_user.id, "0%")] == ["100% done"]
    assert [n.title for n in await repo.search_by_title(test_user.id, "e_c")] == ["snake_case"]


def test_like_pattern_escapes():
    assert _like_pattern("a%b_c\\") == "%a\\%b\\_c\\\\%"


def test_note_changes_contract():
    assert NoteChanges().is_empty() is True
    assert NoteChanges(title="t").as_dict() == {"title": "t"}
    assert NoteChanges(title="t", text="x").as_dict() == {"title": "t", "text": "x"}


@pytest.mark.asyncio
async def test_repeated_updates_strictly_advance_modified_at(test_session, test_note):
    repo = NoteRepository(test_session)
    owner_id = test_note.owner_id
    previous = test_note.modified_at

    for i in range(20):
        updated = await repo.update_note(test_note.id, owner_id, NoteChanges(text=f"rev {i}"))
        assert updated.modified_at > previous
        assert updated.owner_id == owner_id
        previous = updated.modified_at
