"""
Activity logging module.

The activity log is append-only: entries are recorded for check-ins,
check-outs, sightings and harvests and are never edited afterwards.

Date: 2026-10-19
"""

from typing import List, Optional

from logic.config import ACTIVITY_LIMIT
from logic.models import ActivityEntry, ActivityType, utc_now
from logic.repository import Repository


class ActivityLog:
    """In-memory view of the activity collection.

    ``record`` only appends to ``entries``; saving the collection is left
    to the caller.
    """

    def __init__(self, entries: List[ActivityEntry]):
        self.entries = entries

    def record(
        self,
        type: ActivityType,
        hunter: str,
        stand: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ActivityEntry:
        """Append a new entry stamped with the current time.

        Args:
            type: Kind of event.
            hunter: Name of the hunter the event belongs to.
            stand: Display name of the stand involved, if any.
            description: Free text for sightings and harvests.

        Returns:
            The appended entry.
        """
        entry = ActivityEntry(
            id=Repository(self.entries).next_id(),
            type=ActivityType(type),
            hunter=hunter,
            stand=stand,
            description=description,
            timestamp=utc_now(),
        )
        self.entries.append(entry)
        return entry

    def recent(self, n: int = ACTIVITY_LIMIT) -> List[ActivityEntry]:
        """Return the last ``n`` entries, newest first."""
        if n <= 0:
            return []
        return list(reversed(self.entries[-n:]))
