"""Exclusive section and unit of work.

Every store operation runs inside ``Gate.unit_of_work()``. Only one unit
of work is open at a time, so a read-decide-write sequence spanning
several collections is never interleaved with another operation.

There is no rollback: if a later write in a unit of work fails, earlier
writes stay on disk.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from .files import read_collection, write_collection

logger = logging.getLogger(__name__)


async def _in_thread(func: Callable[..., Any], *args: Any) -> Any:
    """Run blocking file I/O in a thread; a cancelled caller still waits for it.

    The gate must stay held until the thread finishes, otherwise the next
    operation could touch a file mid-write.
    """
    fut = asyncio.ensure_future(asyncio.to_thread(func, *args))
    try:
        return await asyncio.shield(fut)
    except asyncio.CancelledError:
        while not fut.done():
            try:
                await asyncio.wait([fut])
            except asyncio.CancelledError:
                continue
        raise


class UnitOfWork:
    """Collection reads and writes for one gated operation."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._open = True

    def _check_open(self) -> None:
        if not self._open:
            raise RuntimeError("Unit of work used after its section ended")

    async def read(self, name: str) -> list[Any]:
        self._check_open()
        return await _in_thread(read_collection, self._root, name)

    async def write(self, name: str, records: list[Any]) -> None:
        self._check_open()
        logger.debug(f"Writing {len(records)} record(s) to {name}")
        await _in_thread(write_collection, self._root, name, records)

    def close(self) -> None:
        self._open = False


class Gate:
    """Single process-wide lock around every store operation."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._lock = asyncio.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[UnitOfWork]:
        async with self._lock:
            uow = UnitOfWork(self._root)
            try:
                yield uow
            finally:
                uow.close()
