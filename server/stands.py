"""
Stand API routes.

This module contains the endpoints for listing stands and for checking
hunters in and out of them.

Date: 2026-10-19
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from logic.errors import ConflictError, NotFoundError, StorageError, ValidationError
from logic.occupancy import OccupancyManager
from logic.store import EntitySet, JsonStore
from server.deps import get_occupancy, get_store

router = APIRouter()


class CheckInRequest(BaseModel):
    """Request model for checking into a stand."""

    hunterId: int
    standId: int


class CheckOutRequest(BaseModel):
    """Request model for checking out."""

    hunterId: int


@router.get("/api/stands")
def list_stands(store: JsonStore = Depends(get_store)):
    """Get all stands with their occupancy.

    Returns:
        List of stand records.
    """
    try:
        stands = store.load(EntitySet.STANDS)
    except StorageError:
        raise HTTPException(500, "Failed to load stands")
    return [s.to_json() for s in stands]


@router.post("/api/checkin")
def check_in(data: CheckInRequest, manager: OccupancyManager = Depends(get_occupancy)):
    """Check a hunter into a stand.

    Args:
        data: Hunter and stand ids.

    Returns:
        Dictionary with success flag and the updated stand and hunter.

    Raises:
        HTTPException: 404 if the stand or hunter is unknown, 400 if the stand
            is already occupied.
    """
    try:
        stand, hunter = manager.check_in(data.hunterId, data.standId)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except ConflictError as e:
        raise HTTPException(400, str(e))
    except StorageError:
        raise HTTPException(500, "Check-in failed")

    return {"success": True, "stand": stand.to_json(), "hunter": hunter.public()}


@router.post("/api/checkout")
def check_out(data: CheckOutRequest, manager: OccupancyManager = Depends(get_occupancy)):
    """Check a hunter out of their current stand.

    Raises:
        HTTPException: 400 if the hunter is not checked in.
    """
    try:
        manager.check_out(data.hunterId)
    except ValidationError as e:
        raise HTTPException(400, str(e))
    except StorageError:
        raise HTTPException(500, "Check-out failed")

    return {"success": True}
