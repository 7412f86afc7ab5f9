"""Core domain models.

Every collection file is read and written through these types. Field
names are camelCase on disk and snake_case in Python.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_MEAL_PURPOSE = "식사용"
DEFAULT_SNACK_PURPOSE = "간식용"
DEFAULT_PURPOSES = (DEFAULT_MEAL_PURPOSE, DEFAULT_SNACK_PURPOSE)

RegistrationStatus = Literal["registered", "used", "recited"]


def decode_verse_type(raw: Any) -> str:
    """Normalize a stored verse type to its purpose string.

    Older files store the type as a number: 1 is the snack purpose, any
    other number is the meal purpose. A missing type is the meal purpose.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, int) and not isinstance(raw, bool):
        return DEFAULT_SNACK_PURPOSE if raw == 1 else DEFAULT_MEAL_PURPOSE
    return DEFAULT_MEAL_PURPOSE


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Group(_Record):
    id: UUID
    name: str
    password_hash: str = ""


class Verse(_Record):
    id: UUID
    text: str = ""
    type: str = DEFAULT_MEAL_PURPOSE

    @field_validator("type", mode="before")
    @classmethod
    def _decode_type(cls, value: Any) -> str:
        return decode_verse_type(value)


class Registration(_Record):
    group_id: UUID
    verse_id: UUID
    registered_at: datetime
    used_at: datetime | None = None
    recited_at: datetime | None = None

    @property
    def status(self) -> RegistrationStatus:
        if self.used_at is not None:
            return "used"
        if self.recited_at is not None:
            return "recited"
        return "registered"

    def matches(self, group_id: UUID, verse_id: UUID) -> bool:
        return self.group_id == group_id and self.verse_id == verse_id


class OperationResult(BaseModel):
    """Outcome of a status-changing registration operation."""

    success: bool
    message: str
