"""Group CRUD, password check, and per-group registrations."""

from uuid import UUID

from fastapi import APIRouter, HTTPException

from retreat_verses import storage

from .models import CreateGroup, GroupOut, IdsBody, PasswordBody, UpdateGroup

router = APIRouter()


@router.get("/groups", response_model=list[GroupOut])
async def list_groups():
    """List all groups (without password hashes)."""
    return await storage.get_store().get_groups()


@router.post("/groups", response_model=GroupOut, status_code=201)
async def create_group(body: CreateGroup):
    try:
        return await storage.get_store().add_group(body.name, body.password)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.put("/groups/{group_id}")
async def update_group(group_id: UUID, body: UpdateGroup):
    """Rename a group; replace its password only if one is given."""
    if not await storage.get_store().update_group(group_id, body.name, body.password):
        raise HTTPException(404, "Group not found or name is blank")
    return {"ok": True}


@router.delete("/groups/{group_id}")
async def delete_group(group_id: UUID):
    """Delete a group and all its registrations."""
    if not await storage.get_store().delete_group(group_id):
        raise HTTPException(404, "Group not found")
    return {"ok": True}


@router.post("/groups/bulk-delete")
async def delete_groups(body: IdsBody):
    return {"deleted": await storage.get_store().delete_groups(body.ids)}


@router.delete("/groups")
async def delete_all_groups():
    return {"deleted": await storage.get_store().delete_all_groups()}


@router.post("/groups/{group_id}/verify-password")
async def verify_password(group_id: UUID, body: PasswordBody):
    return {"ok": await storage.get_store().verify_group_password(group_id, body.password)}


@router.get("/groups/{group_id}/registrations")
async def group_registrations(group_id: UUID):
    registrations = await storage.get_store().get_registrations_for_group(group_id)
    return [r.to_json() for r in registrations]
