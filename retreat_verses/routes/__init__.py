"""FastAPI API endpoints under /api.

Endpoint groups: health, groups (with password check and per-group
registrations), verses, purposes, registrations (list + status changes).
Authentication and page rendering live outside this package.
"""

from fastapi import APIRouter

from .groups import router as groups_router
from .registrations import router as registrations_router
from .verses import router as verses_router

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


router.include_router(groups_router)
router.include_router(verses_router)
router.include_router(registrations_router)
