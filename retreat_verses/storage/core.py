"""Storage initialization and the process-wide store."""

from pathlib import Path

from .store import DataStore

_store: DataStore | None = None


def init_storage(data_dir: Path) -> DataStore:
    global _store
    _store = DataStore(data_dir)
    return _store


def get_store() -> DataStore:
    assert _store is not None, "Call init_storage() before using storage"
    return _store


def data_dir() -> Path:
    return get_store().root
