"""Registrations of verses to groups, and their usage status.

A registration moves Registered -> Used or Registered -> Recited, and
back to Registered only through reset. Used and recited are never both
set. Rule violations come back as ``OperationResult(success=False)``.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from retreat_verses.models import OperationResult, Registration

from .files import GROUPS, REGISTRATIONS, VERSES
from .gate import UnitOfWork

GROUP_NOT_FOUND = "Group not found."
VERSE_NOT_FOUND = "Verse not found."
ALREADY_REGISTERED = "This verse is already registered to the group."
REGISTERED = "Verse registered."
REGISTRATION_NOT_FOUND = "Registered verse not found."
UNREGISTERED = "Verse unregistered."
ALREADY_USED = "This verse has already been used."
ALREADY_RECITED = "This verse has already been recited."
MARKED_USED = "Verse marked as used."
MARKED_RECITED = "Verse marked as recited."
NOTHING_TO_RESET = "There is no status to reset."
STATUS_RESET = "Verse status reset."


class _RecordId(BaseModel):
    id: UUID


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def load_registrations(uow: UnitOfWork) -> list[Registration]:
    return [Registration.model_validate(r) for r in await uow.read(REGISTRATIONS)]


async def save_registrations(uow: UnitOfWork, registrations: list[Registration]) -> None:
    await uow.write(REGISTRATIONS, [r.to_json() for r in registrations])


async def list_for_group(uow: UnitOfWork, group_id: UUID) -> list[Registration]:
    return [r for r in await load_registrations(uow) if r.group_id == group_id]


async def remove_where(uow: UnitOfWork, predicate: Callable[[Registration], bool]) -> int:
    """Drop every registration matching predicate. Always rewrites the file."""
    registrations = await load_registrations(uow)
    kept = [r for r in registrations if not predicate(r)]
    await save_registrations(uow, kept)
    return len(registrations) - len(kept)


async def clear(uow: UnitOfWork) -> None:
    await save_registrations(uow, [])


async def register(uow: UnitOfWork, group_id: UUID, verse_id: UUID) -> OperationResult:
    if not await _has_id(uow, GROUPS, group_id):
        return OperationResult(success=False, message=GROUP_NOT_FOUND)
    if not await _has_id(uow, VERSES, verse_id):
        return OperationResult(success=False, message=VERSE_NOT_FOUND)

    registrations = await load_registrations(uow)
    if any(r.matches(group_id, verse_id) for r in registrations):
        return OperationResult(success=False, message=ALREADY_REGISTERED)

    registrations.append(
        Registration(group_id=group_id, verse_id=verse_id, registered_at=_now())
    )
    await save_registrations(uow, registrations)
    return OperationResult(success=True, message=REGISTERED)


async def unregister(uow: UnitOfWork, group_id: UUID, verse_id: UUID) -> OperationResult:
    registrations = await load_registrations(uow)
    kept = [r for r in registrations if not r.matches(group_id, verse_id)]
    if len(kept) == len(registrations):
        return OperationResult(success=False, message=REGISTRATION_NOT_FOUND)
    await save_registrations(uow, kept)
    return OperationResult(success=True, message=UNREGISTERED)


async def mark_used(uow: UnitOfWork, group_id: UUID, verse_id: UUID) -> OperationResult:
    return await _mark(uow, group_id, verse_id, "used_at", MARKED_USED)


async def mark_recited(uow: UnitOfWork, group_id: UUID, verse_id: UUID) -> OperationResult:
    return await _mark(uow, group_id, verse_id, "recited_at", MARKED_RECITED)


async def reset_status(uow: UnitOfWork, group_id: UUID, verse_id: UUID) -> OperationResult:
    registrations = await load_registrations(uow)
    target = next((r for r in registrations if r.matches(group_id, verse_id)), None)
    if target is None:
        return OperationResult(success=False, message=REGISTRATION_NOT_FOUND)
    if target.status == "registered":
        return OperationResult(success=False, message=NOTHING_TO_RESET)

    target.used_at = None
    target.recited_at = None
    await save_registrations(uow, registrations)
    return OperationResult(success=True, message=STATUS_RESET)


async def _mark(
    uow: UnitOfWork, group_id: UUID, verse_id: UUID, field: str, message: str
) -> OperationResult:
    registrations = await load_registrations(uow)
    target = next((r for r in registrations if r.matches(group_id, verse_id)), None)
    if target is None:
        return OperationResult(success=False, message=REGISTRATION_NOT_FOUND)
    if target.used_at is not None:
        return OperationResult(success=False, message=ALREADY_USED)
    if target.recited_at is not None:
        return OperationResult(success=False, message=ALREADY_RECITED)

    setattr(target, field, _now())
    await save_registrations(uow, registrations)
    return OperationResult(success=True, message=message)


async def _has_id(uow: UnitOfWork, name: str, record_id: UUID) -> bool:
    # Foreign keys are checked by id only; the rest of each record is ignored.
    return any(_RecordId.model_validate(r).id == record_id for r in await uow.read(name))
