"""Pydantic request/response models for API endpoints."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateGroup(_Body):
    name: str
    password: str


class UpdateGroup(_Body):
    name: str
    password: str | None = None


class GroupOut(_Body):
    id: UUID
    name: str


class PasswordBody(_Body):
    password: str


class VerseBody(_Body):
    text: str
    type: str


class PurposeBody(_Body):
    name: str


class IdsBody(_Body):
    ids: list[UUID]


class RegistrationBody(_Body):
    group_id: UUID
    verse_id: UUID
