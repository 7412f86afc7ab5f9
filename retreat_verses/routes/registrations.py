"""Registration listing and status transitions.

Status endpoints always answer 200 with ``{success, message}``; a failed
transition is reported in the body, not as an HTTP error.
"""

from fastapi import APIRouter

from retreat_verses import storage
from retreat_verses.models import OperationResult

from .models import RegistrationBody

router = APIRouter()


@router.get("/registrations")
async def list_registrations():
    return [r.to_json() for r in await storage.get_store().get_registrations()]


@router.post("/registrations/register", response_model=OperationResult)
async def register(body: RegistrationBody):
    return await storage.get_store().register_verse(body.group_id, body.verse_id)


@router.post("/registrations/unregister", response_model=OperationResult)
async def unregister(body: RegistrationBody):
    return await storage.get_store().unregister_verse(body.group_id, body.verse_id)


@router.post("/registrations/use", response_model=OperationResult)
async def use(body: RegistrationBody):
    return await storage.get_store().use_verse(body.group_id, body.verse_id)


@router.post("/registrations/recite", response_model=OperationResult)
async def recite(body: RegistrationBody):
    return await storage.get_store().recite_verse(body.group_id, body.verse_id)


@router.post("/registrations/reset", response_model=OperationResult)
async def reset(body: RegistrationBody):
    return await storage.get_store().reset_verse_status(body.group_id, body.verse_id)
