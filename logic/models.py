"""
Entity models for stands, hunters and activity entries.

Every model inherits from :class:`CampModel`, which maps the camelCase keys
of the persisted JSON (``checkInTime``, ``isAdmin``, ``currentStand``) to
snake_case attributes. Dump with :meth:`CampModel.to_json` to get the wire
form back.

Date: 2026-10-19
"""

import enum
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


class ActivityType(str, enum.Enum):
    CHECKIN = "checkin"
    CHECKOUT = "checkout"
    SIGHTING = "sighting"
    HARVEST = "harvest"


class CampModel(BaseModel):
    """Base for persisted camp records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Stand(CampModel):
    """A hunting stand. ``occupied`` is true exactly when ``hunter`` is set."""

    id: int
    name: str
    occupied: bool = False
    hunter: Optional[str] = None
    check_in_time: Optional[str] = None

    def occupy(self, hunter_name: str, when: Optional[str] = None):
        self.occupied = True
        self.hunter = hunter_name
        self.check_in_time = when or utc_now()

    def release(self):
        self.occupied = False
        self.hunter = None
        self.check_in_time = None


class Hunter(CampModel):
    id: int
    name: str
    pin: str = "0000"
    is_admin: bool = False
    current_stand: Optional[int] = None

    def public(self) -> Dict[str, Any]:
        """Wire form without the PIN."""
        return {
            "id": self.id,
            "name": self.name,
            "isAdmin": self.is_admin,
            "currentStand": self.current_stand,
        }


class ActivityEntry(CampModel):
    id: int
    type: ActivityType
    hunter: str
    stand: Optional[str] = None
    description: Optional[str] = None
    timestamp: str
