"""Group collection: CRUD and password hashing."""

import base64
import hashlib
import logging
from collections.abc import Iterable
from uuid import UUID, uuid4

from retreat_verses.models import Group

from . import registrations
from .files import GROUPS
from .gate import UnitOfWork

logger = logging.getLogger(__name__)


def hash_password(group_id: UUID, password: str) -> str:
    """Salt the trimmed password with the group id, SHA-256, base64."""
    data = f"{group_id.hex}:{password.strip()}".encode("utf-8")
    return base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")


async def load_groups(uow: UnitOfWork) -> list[Group]:
    return [Group.model_validate(g) for g in await uow.read(GROUPS)]


async def save_groups(uow: UnitOfWork, groups: list[Group]) -> None:
    await uow.write(GROUPS, [g.to_json() for g in groups])


async def add_group(uow: UnitOfWork, name: str, password: str) -> Group:
    if not name or not name.strip():
        raise ValueError("Group name is required.")
    if not password or not password.strip():
        raise ValueError("Group password is required.")

    groups = await load_groups(uow)
    group = Group(id=uuid4(), name=name.strip())
    group.password_hash = hash_password(group.id, password)
    groups.append(group)
    await save_groups(uow, groups)
    return group


async def update_group(
    uow: UnitOfWork, group_id: UUID, name: str, password: str | None = None
) -> bool:
    """Rename a group, and replace its password if one is given."""
    if not name or not name.strip():
        return False

    groups = await load_groups(uow)
    target = next((g for g in groups if g.id == group_id), None)
    if target is None:
        return False

    target.name = name.strip()
    if password and password.strip():
        target.password_hash = hash_password(target.id, password)
    await save_groups(uow, groups)
    return True


async def verify_password(uow: UnitOfWork, group_id: UUID, password: str) -> bool:
    if not password or not password.strip():
        return False
    group = next((g for g in await load_groups(uow) if g.id == group_id), None)
    if group is None or not group.password_hash.strip():
        return False
    return group.password_hash == hash_password(group.id, password)


async def delete_groups(uow: UnitOfWork, ids: Iterable[UUID]) -> int:
    """Delete groups by id and their registrations. Returns groups removed."""
    id_set = set(ids)
    groups = await load_groups(uow)
    kept = [g for g in groups if g.id not in id_set]
    removed = len(groups) - len(kept)
    if removed == 0:
        return 0

    await save_groups(uow, kept)
    dropped = await registrations.remove_where(uow, lambda r: r.group_id in id_set)
    logger.info(f"Deleted {removed} group(s) and {dropped} registration(s)")
    return removed


async def delete_all_groups(uow: UnitOfWork) -> int:
    count = len(await load_groups(uow))
    if count == 0:
        return 0
    await save_groups(uow, [])
    await registrations.clear(uow)
    logger.info(f"Deleted all {count} group(s) and every registration")
    return count
