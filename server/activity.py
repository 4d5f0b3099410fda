"""
Activity feed API routes.

Date: 2026-10-19
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from logic.errors import NotFoundError, StorageError, ValidationError
from logic.occupancy import OccupancyManager
from server.deps import get_occupancy

router = APIRouter()


class LogRequest(BaseModel):
    """Request model for logging a sighting or harvest."""

    hunterId: int
    type: Optional[Literal["sighting", "harvest"]] = None
    description: Optional[str] = None


@router.get("/api/activity")
def recent_activity(manager: OccupancyManager = Depends(get_occupancy)):
    """Get the most recent activity, newest first.

    Returns:
        Up to ACTIVITY_LIMIT activity entries.
    """
    try:
        entries = manager.recent_activity()
    except StorageError:
        raise HTTPException(500, "Failed to load activity")
    return [e.to_json() for e in entries]


@router.post("/api/log")
def log_activity(data: LogRequest, manager: OccupancyManager = Depends(get_occupancy)):
    """Log a sighting or harvest for a hunter.

    Raises:
        HTTPException: 404 if the hunter is unknown.
    """
    try:
        manager.log_event(data.hunterId, data.type or "sighting", data.description)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except ValidationError as e:
        raise HTTPException(400, str(e))
    except StorageError:
        raise HTTPException(500, "Failed to log activity")

    return {"success": True}
