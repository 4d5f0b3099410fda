"""
Admin routes for roster and stand management.

This module provides administrative endpoints for adding and removing
hunters and for creating and renaming stands.

Date: 2026-10-19
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from logic.admin import CampAdmin
from logic.errors import NotFoundError, StorageError
from server.deps import get_admin

router = APIRouter()


class HunterCreate(BaseModel):
    """Request model for adding a hunter."""

    name: str
    pin: Optional[str] = None
    isAdmin: Optional[bool] = None


class StandUpdate(BaseModel):
    """Request model for naming a stand."""

    name: str


@router.post("/api/admin/hunters")
def add_hunter(data: HunterCreate, admin: CampAdmin = Depends(get_admin)):
    """Add a hunter to the roster.

    Returns:
        Dictionary with success flag and the new hunter's id, name and
        admin flag.
    """
    try:
        hunter = admin.add_hunter(data.name, data.pin, bool(data.isAdmin))
    except StorageError:
        raise HTTPException(500, "Failed to add hunter")

    return {
        "success": True,
        "hunter": {"id": hunter.id, "name": hunter.name, "isAdmin": hunter.is_admin},
    }


@router.delete("/api/admin/hunters/{hunter_id}")
def remove_hunter(hunter_id: int, admin: CampAdmin = Depends(get_admin)):
    """Remove a hunter, releasing their stand if they hold one."""
    try:
        admin.remove_hunter(hunter_id)
    except StorageError:
        raise HTTPException(500, "Failed to remove hunter")

    return {"success": True}


@router.put("/api/admin/stands/{stand_id}")
def rename_stand(stand_id: int, data: StandUpdate, admin: CampAdmin = Depends(get_admin)):
    """Rename a stand.

    Raises:
        HTTPException: 404 if the stand does not exist.
    """
    try:
        stand = admin.rename_stand(stand_id, data.name)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except StorageError:
        raise HTTPException(500, "Failed to update stand")

    return {"success": True, "stand": stand.to_json()}


@router.post("/api/admin/stands")
def add_stand(data: StandUpdate, admin: CampAdmin = Depends(get_admin)):
    """Create a new stand."""
    try:
        stand = admin.add_stand(data.name)
    except StorageError:
        raise HTTPException(500, "Failed to add stand")

    return {"success": True, "stand": stand.to_json()}
