"""DataStore: the public storage surface.

Each method opens exactly one unit of work, so the whole read-decide-write
sequence of an operation, cascades included, runs under the gate.
"""

from collections.abc import Iterable
from pathlib import Path
from uuid import UUID

from retreat_verses.models import Group, OperationResult, Registration, Verse

from . import groups, purposes, registrations, verses
from .gate import Gate


class DataStore:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self._gate = Gate(root)

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    async def get_groups(self) -> list[Group]:
        async with self._gate.unit_of_work() as uow:
            return await groups.load_groups(uow)

    async def add_group(self, name: str, password: str) -> Group:
        async with self._gate.unit_of_work() as uow:
            return await groups.add_group(uow, name, password)

    async def update_group(self, group_id: UUID, name: str, password: str | None = None) -> bool:
        async with self._gate.unit_of_work() as uow:
            return await groups.update_group(uow, group_id, name, password)

    async def verify_group_password(self, group_id: UUID, password: str) -> bool:
        async with self._gate.unit_of_work() as uow:
            return await groups.verify_password(uow, group_id, password)

    async def delete_group(self, group_id: UUID) -> bool:
        async with self._gate.unit_of_work() as uow:
            return await groups.delete_groups(uow, [group_id]) > 0

    async def delete_groups(self, ids: Iterable[UUID]) -> int:
        id_set = set(ids)
        if not id_set:
            return 0
        async with self._gate.unit_of_work() as uow:
            return await groups.delete_groups(uow, id_set)

    async def delete_all_groups(self) -> int:
        async with self._gate.unit_of_work() as uow:
            return await groups.delete_all_groups(uow)

    # ------------------------------------------------------------------
    # Verses and purposes
    # ------------------------------------------------------------------

    async def get_verses(self) -> list[Verse]:
        async with self._gate.unit_of_work() as uow:
            return await verses.load_verses(uow)

    async def add_verse(self, text: str, type: str) -> Verse:
        async with self._gate.unit_of_work() as uow:
            return await verses.add_verse(uow, text, type)

    async def update_verse(self, verse_id: UUID, text: str, type: str) -> bool:
        async with self._gate.unit_of_work() as uow:
            return await verses.update_verse(uow, verse_id, text, type)

    async def delete_verse(self, verse_id: UUID) -> bool:
        async with self._gate.unit_of_work() as uow:
            return await verses.delete_verses(uow, [verse_id]) > 0

    async def delete_verses(self, ids: Iterable[UUID]) -> int:
        id_set = set(ids)
        if not id_set:
            return 0
        async with self._gate.unit_of_work() as uow:
            return await verses.delete_verses(uow, id_set)

    async def delete_all_verses(self) -> int:
        async with self._gate.unit_of_work() as uow:
            return await verses.delete_all_verses(uow)

    async def get_verse_purposes(self) -> list[str]:
        async with self._gate.unit_of_work() as uow:
            return await purposes.list_purposes(uow)

    async def add_verse_purpose(self, name: str) -> bool:
        async with self._gate.unit_of_work() as uow:
            return await purposes.add_purpose(uow, name)

    # ------------------------------------------------------------------
    # Registrations
    # ------------------------------------------------------------------

    async def get_registrations(self) -> list[Registration]:
        async with self._gate.unit_of_work() as uow:
            return await registrations.load_registrations(uow)

    async def get_registrations_for_group(self, group_id: UUID) -> list[Registration]:
        async with self._gate.unit_of_work() as uow:
            return await registrations.list_for_group(uow, group_id)

    async def register_verse(self, group_id: UUID, verse_id: UUID) -> OperationResult:
        async with self._gate.unit_of_work() as uow:
            return await registrations.register(uow, group_id, verse_id)

    async def unregister_verse(self, group_id: UUID, verse_id: UUID) -> OperationResult:
        async with self._gate.unit_of_work() as uow:
            return await registrations.unregister(uow, group_id, verse_id)

    async def use_verse(self, group_id: UUID, verse_id: UUID) -> OperationResult:
        async with self._gate.unit_of_work() as uow:
            return await registrations.mark_used(uow, group_id, verse_id)

    async def recite_verse(self, group_id: UUID, verse_id: UUID) -> OperationResult:
        async with self._gate.unit_of_work() as uow:
            return await registrations.mark_recited(uow, group_id, verse_id)

    async def reset_verse_status(self, group_id: UUID, verse_id: UUID) -> OperationResult:
        async with self._gate.unit_of_work() as uow:
            return await registrations.reset_status(uow, group_id, verse_id)
