"""Tests for the exclusive section and unit of work."""

import asyncio
import threading
import time

import pytest

from retreat_verses import storage
from retreat_verses.storage import gate as gate_module


@pytest.mark.asyncio
async def test_unit_of_work_reads_and_writes():
    gate = storage.Gate(storage.data_dir())
    async with gate.unit_of_work() as uow:
        await uow.write(storage.PURPOSES, ["x"])
        assert await uow.read(storage.PURPOSES) == ["x"]


@pytest.mark.asyncio
async def test_unit_of_work_closed_after_section():
    gate = storage.Gate(storage.data_dir())
    async with gate.unit_of_work() as uow:
        pass
    with pytest.raises(RuntimeError):
        await uow.read(storage.GROUPS)
    with pytest.raises(RuntimeError):
        await uow.write(storage.GROUPS, [])


@pytest.mark.asyncio
async def test_sections_never_overlap():
    gate = storage.Gate(storage.data_dir())
    active = 0
    peak = 0

    async def work():
        nonlocal active, peak
        async with gate.unit_of_work() as uow:
            active += 1
            peak = max(peak, active)
            await uow.read(storage.GROUPS)
            await asyncio.sleep(0)
            active -= 1

    await asyncio.gather(*(work() for _ in range(10)))
    assert peak == 1
    assert not gate.locked


@pytest.mark.asyncio
async def test_lock_released_on_error():
    gate = storage.Gate(storage.data_dir())
    with pytest.raises(KeyError):
        async with gate.unit_of_work():
            raise KeyError("boom")
    assert not gate.locked


@pytest.mark.asyncio
async def test_cancelled_write_holds_gate_until_done(store, monkeypatch):
    started = threading.Event()
    events = []
    real_write = gate_module.write_collection

    def slow_write(root, name, records):
        if name == storage.GROUPS:
            started.set()
            events.append("write-begin")
            time.sleep(0.3)
            real_write(root, name, records)
            events.append("write-end")
        else:
            real_write(root, name, records)

    monkeypatch.setattr(gate_module, "write_collection", slow_write)

    task = asyncio.create_task(store.add_group("G", "pw"))
    while not started.is_set():
        await asyncio.sleep(0.01)
    task.cancel()

    groups = await store.get_groups()
    events.append("read")

    with pytest.raises(asyncio.CancelledError):
        await task
    assert events == ["write-begin", "write-end", "read"]
    assert [g.name for g in groups] == ["G"]
