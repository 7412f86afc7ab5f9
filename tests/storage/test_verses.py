"""Tests for verse CRUD, legacy type decoding, and cascading deletes."""

import json
import uuid

import pytest

from retreat_verses import storage
from retreat_verses.models import DEFAULT_MEAL_PURPOSE, DEFAULT_SNACK_PURPOSE


# ── Add / update ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_add_verse(store):
    verse = await store.add_verse("  In the beginning  ", " custom ")
    assert verse.text == "In the beginning"
    assert verse.type == "custom"
    assert [v.id for v in await store.get_verses()] == [verse.id]


@pytest.mark.asyncio
async def test_add_verse_type_not_checked_against_purposes(store):
    await store.add_verse("text", "not-a-purpose")
    assert "not-a-purpose" not in await store.get_verse_purposes()


@pytest.mark.asyncio
async def test_add_verse_seeds_purposes(store):
    await store.add_verse("text", DEFAULT_MEAL_PURPOSE)
    stored = json.loads((storage.data_dir() / "purposes.json").read_text(encoding="utf-8"))
    assert stored == [DEFAULT_MEAL_PURPOSE, DEFAULT_SNACK_PURPOSE]


@pytest.mark.asyncio
@pytest.mark.parametrize("text,type", [("", "t"), ("  ", "t"), ("x", ""), ("x", " ")])
async def test_add_verse_requires_fields(store, text, type):
    with pytest.raises(ValueError):
        await store.add_verse(text, type)
    assert await store.get_verses() == []


@pytest.mark.asyncio
async def test_update_verse(store):
    verse = await store.add_verse("old", "a")
    assert await store.update_verse(verse.id, " new ", " b ") is True
    [updated] = await store.get_verses()
    assert (updated.text, updated.type) == ("new", "b")


@pytest.mark.asyncio
async def test_update_verse_blank_not_applied(store):
    verse = await store.add_verse("old", "a")
    assert await store.update_verse(verse.id, "", "b") is False
    assert await store.update_verse(verse.id, "new", "  ") is False
    [unchanged] = await store.get_verses()
    assert (unchanged.text, unchanged.type) == ("old", "a")


@pytest.mark.asyncio
async def test_update_missing_verse(store):
    assert await store.update_verse(uuid.uuid4(), "t", "a") is False


# ── Legacy numeric type ──────────────────────────────────


def _write_raw_verses(records):
    (storage.data_dir() / "verses.json").write_text(json.dumps(records))


@pytest.mark.asyncio
async def test_legacy_numeric_types_decoded(store):
    ids = [uuid.uuid4() for _ in range(4)]
    _write_raw_verses([
        {"id": str(ids[0]), "text": "a", "type": 1},
        {"id": str(ids[1]), "text": "b", "type": 0},
        {"id": str(ids[2]), "text": "c", "type": 7},
        {"id": str(ids[3]), "text": "d"},
    ])
    verses = await store.get_verses()
    assert [v.type for v in verses] == [
        DEFAULT_SNACK_PURPOSE,
        DEFAULT_MEAL_PURPOSE,
        DEFAULT_MEAL_PURPOSE,
        DEFAULT_MEAL_PURPOSE,
    ]


@pytest.mark.asyncio
async def test_legacy_type_upgraded_on_write(store):
    legacy_id = uuid.uuid4()
    _write_raw_verses([{"id": str(legacy_id), "text": "a", "type": 1}])

    await store.add_verse("b", "c")

    stored = json.loads((storage.data_dir() / "verses.json").read_text(encoding="utf-8"))
    assert stored[0] == {"id": str(legacy_id), "text": "a", "type": DEFAULT_SNACK_PURPOSE}
    assert all(isinstance(v["type"], str) for v in stored)


@pytest.mark.asyncio
async def test_string_type_kept(store):
    _write_raw_verses([{"id": str(uuid.uuid4()), "text": "a", "type": "custom"}])
    [verse] = await store.get_verses()
    assert verse.type == "custom"


# ── Delete ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_verse_removes_exactly_its_registrations(store):
    groups = [await store.add_group(f"G{i}", "pw") for i in range(3)]
    target = await store.add_verse("target", "a")
    other = await store.add_verse("other", "a")
    for g in groups:
        await store.register_verse(g.id, target.id)
    await store.register_verse(groups[0].id, other.id)

    assert len(await store.get_registrations()) == 4
    assert await store.delete_verse(target.id) is True
    remaining = await store.get_registrations()
    assert len(remaining) == 1
    assert remaining[0].verse_id == other.id


@pytest.mark.asyncio
async def test_delete_missing_verse_changes_nothing(store):
    group = await store.add_group("G", "pw")
    verse = await store.add_verse("v", "a")
    await store.register_verse(group.id, verse.id)
    before = {
        name: (storage.data_dir() / f"{name}.json").read_text(encoding="utf-8")
        for name in storage.COLLECTIONS
    }

    assert await store.delete_verse(uuid.uuid4()) is False

    after = {
        name: (storage.data_dir() / f"{name}.json").read_text(encoding="utf-8")
        for name in storage.COLLECTIONS
    }
    assert before == after


@pytest.mark.asyncio
async def test_delete_verses_bulk(store):
    group = await store.add_group("G", "pw")
    verses = [await store.add_verse(f"v{i}", "a") for i in range(3)]
    for v in verses:
        await store.register_verse(group.id, v.id)

    assert await store.delete_verses({verses[0].id, verses[2].id}) == 2
    assert [v.id for v in await store.get_verses()] == [verses[1].id]
    assert [r.verse_id for r in await store.get_registrations()] == [verses[1].id]


@pytest.mark.asyncio
async def test_delete_verses_empty(store):
    assert await store.delete_verses([]) == 0


@pytest.mark.asyncio
async def test_delete_all_verses(store):
    group = await store.add_group("G", "pw")
    verse = await store.add_verse("v", "a")
    await store.add_verse("w", "a")
    await store.register_verse(group.id, verse.id)

    assert await store.delete_all_verses() == 2
    assert await store.get_verses() == []
    assert await store.get_registrations() == []
    assert len(await store.get_groups()) == 1
    assert await store.delete_all_verses() == 0
