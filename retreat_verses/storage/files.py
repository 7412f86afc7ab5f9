"""Whole-file JSON collections.

Each collection is one JSON array in one file. Readers get the full
array, writers replace the full file. A missing file is an empty
collection.
"""

import json
from pathlib import Path
from typing import Any

GROUPS = "groups"
VERSES = "verses"
REGISTRATIONS = "registrations"
PURPOSES = "purposes"

COLLECTIONS = (GROUPS, VERSES, REGISTRATIONS, PURPOSES)


def collection_path(root: Path, name: str) -> Path:
    if name not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {name}")
    return root / f"{name}.json"


def read_collection(root: Path, name: str) -> list[Any]:
    """Load a collection. Returns [] if the file is missing or holds null."""
    path = collection_path(root, name)
    if not path.is_file():
        return []
    data = json.loads(path.read_text(encoding="utf-8"))
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a JSON array")
    return data


def write_collection(root: Path, name: str, records: list[Any]) -> None:
    """Replace a collection file with the given records."""
    path = collection_path(root, name)
    path.write_text(
        json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8"
    )
