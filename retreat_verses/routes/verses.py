"""Verse CRUD and verse purposes."""

from uuid import UUID

from fastapi import APIRouter, HTTPException

from retreat_verses import storage

from .models import IdsBody, PurposeBody, VerseBody

router = APIRouter()


@router.get("/verses")
async def list_verses():
    return [v.to_json() for v in await storage.get_store().get_verses()]


@router.post("/verses", status_code=201)
async def create_verse(body: VerseBody):
    try:
        verse = await storage.get_store().add_verse(body.text, body.type)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return verse.to_json()


@router.put("/verses/{verse_id}")
async def update_verse(verse_id: UUID, body: VerseBody):
    if not await storage.get_store().update_verse(verse_id, body.text, body.type):
        raise HTTPException(404, "Verse not found or text/type is blank")
    return {"ok": True}


@router.delete("/verses/{verse_id}")
async def delete_verse(verse_id: UUID):
    """Delete a verse and every registration of it."""
    if not await storage.get_store().delete_verse(verse_id):
        raise HTTPException(404, "Verse not found")
    return {"ok": True}


@router.post("/verses/bulk-delete")
async def delete_verses(body: IdsBody):
    return {"deleted": await storage.get_store().delete_verses(body.ids)}


@router.delete("/verses")
async def delete_all_verses():
    return {"deleted": await storage.get_store().delete_all_verses()}


@router.get("/purposes")
async def list_purposes():
    """List verse purposes, seeding the defaults on first use."""
    return await storage.get_store().get_verse_purposes()


@router.post("/purposes")
async def add_purpose(body: PurposeBody):
    """Add a purpose; ``added`` is false for blanks and case-insensitive duplicates."""
    return {"added": await storage.get_store().add_verse_purpose(body.name)}
