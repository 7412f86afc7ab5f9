"""Verse collection CRUD."""

import logging
from collections.abc import Iterable
from uuid import UUID, uuid4

from retreat_verses.models import Verse

from . import registrations
from .files import VERSES
from .gate import UnitOfWork
from .purposes import ensure_default_purposes

logger = logging.getLogger(__name__)


async def load_verses(uow: UnitOfWork) -> list[Verse]:
    return [Verse.model_validate(v) for v in await uow.read(VERSES)]


async def save_verses(uow: UnitOfWork, verses: list[Verse]) -> None:
    await uow.write(VERSES, [v.to_json() for v in verses])


async def add_verse(uow: UnitOfWork, text: str, type: str) -> Verse:
    if not text or not text.strip():
        raise ValueError("Verse text is required.")
    if not type or not type.strip():
        raise ValueError("Verse type is required.")

    await ensure_default_purposes(uow)
    verses = await load_verses(uow)
    verse = Verse(id=uuid4(), text=text.strip(), type=type.strip())
    verses.append(verse)
    await save_verses(uow, verses)
    return verse


async def update_verse(uow: UnitOfWork, verse_id: UUID, text: str, type: str) -> bool:
    if not text or not text.strip() or not type or not type.strip():
        return False

    await ensure_default_purposes(uow)
    verses = await load_verses(uow)
    target = next((v for v in verses if v.id == verse_id), None)
    if target is None:
        return False

    target.text = text.strip()
    target.type = type.strip()
    await save_verses(uow, verses)
    return True


async def delete_verses(uow: UnitOfWork, ids: Iterable[UUID]) -> int:
    """Delete verses by id and their registrations. Returns verses removed."""
    id_set = set(ids)
    verses = await load_verses(uow)
    kept = [v for v in verses if v.id not in id_set]
    removed = len(verses) - len(kept)
    if removed == 0:
        return 0

    await save_verses(uow, kept)
    dropped = await registrations.remove_where(uow, lambda r: r.verse_id in id_set)
    logger.info(f"Deleted {removed} verse(s) and {dropped} registration(s)")
    return removed


async def delete_all_verses(uow: UnitOfWork) -> int:
    count = len(await load_verses(uow))
    if count == 0:
        return 0
    await save_verses(uow, [])
    await registrations.clear(uow)
    logger.info(f"Deleted all {count} verse(s) and every registration")
    return count
