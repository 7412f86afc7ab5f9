"""Verse purposes: a case-insensitive set of labels, seeded on first use."""

import logging

from pydantic import TypeAdapter

from retreat_verses.models import DEFAULT_PURPOSES

from .files import PURPOSES
from .gate import UnitOfWork

logger = logging.getLogger(__name__)

_PURPOSE_LIST = TypeAdapter(list[str])


async def ensure_default_purposes(uow: UnitOfWork) -> list[str]:
    """Seed and persist the default purposes if the collection is empty."""
    purposes = _PURPOSE_LIST.validate_python(await uow.read(PURPOSES))
    if purposes:
        return purposes
    purposes = list(DEFAULT_PURPOSES)
    await uow.write(PURPOSES, purposes)
    logger.info("Seeded default verse purposes")
    return purposes


async def list_purposes(uow: UnitOfWork) -> list[str]:
    return await ensure_default_purposes(uow)


async def add_purpose(uow: UnitOfWork, name: str) -> bool:
    """Add a purpose unless it exists (case-insensitive). Returns whether added."""
    if not name or not name.strip():
        return False
    name = name.strip()

    purposes = await ensure_default_purposes(uow)
    if any(p.casefold() == name.casefold() for p in purposes):
        return False
    purposes.append(name)
    await uow.write(PURPOSES, purposes)
    return True
