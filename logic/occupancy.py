"""
Stand occupancy module.

This module owns the check-in and check-out transitions. Both keep the camp
consistent across the three collections:

- a stand is occupied by at most one hunter;
- a hunter occupies at most one stand;
- an occupied stand names its hunter, and that hunter points back at it.

Each operation is one load-mutate-save cycle held under the camp lock, so
two requests served by different worker threads cannot both claim the same
stand. The lock is per process; running several server processes against one
data directory is not supported.

Date: 2026-10-19
"""

import logging
import threading
from typing import Optional, Tuple

from logic.activity import ActivityLog
from logic.errors import ConflictError, NotFoundError, ValidationError
from logic.models import ActivityEntry, ActivityType, Hunter, Stand
from logic.repository import Repository
from logic.store import EntitySet, JsonStore

_logger = logging.getLogger(__name__)

# Shared by every component that rewrites stands or hunters.
CAMP_LOCK = threading.RLock()

LOGGABLE_TYPES = {ActivityType.SIGHTING, ActivityType.HARVEST}


def release_stand(stands: Repository[Stand], stand_id: Optional[int]) -> Optional[Stand]:
    """Clear the occupancy fields of a stand.

    A missing stand is skipped, which lets a hunter pointing at a stand that
    no longer exists (or was never marked occupied) be cleaned up.

    Returns:
        The released stand, or None if it does not exist.
    """
    stand = stands.find_by_id(stand_id)
    if stand is not None:
        stand.release()
    return stand


class OccupancyManager:
    """Check-in, check-out and event logging against a store.

    Attributes:
        store: Store the collections are loaded from and saved to.
        lock: Lock guarding each load-mutate-save cycle.
    """

    def __init__(self, store: JsonStore, lock: Optional[threading.RLock] = None):
        self.store = store
        self.lock = lock or CAMP_LOCK

    def check_in(self, hunter_id: int, stand_id: int) -> Tuple[Stand, Hunter]:
        """Check a hunter into a stand.

        If the hunter already holds another stand, that stand is released
        first. Checking into an occupied stand is rejected, including the
        stand the hunter already holds.

        Args:
            hunter_id: Hunter checking in.
            stand_id: Stand to occupy.

        Returns:
            Tuple of the updated stand and hunter.

        Raises:
            NotFoundError: If the stand or the hunter does not exist.
            ConflictError: If the stand is already occupied.
            StorageError: If a collection cannot be loaded or saved.
        """
        with self.lock:
            stands = Repository(self.store.load(EntitySet.STANDS))
            hunters = Repository(self.store.load(EntitySet.HUNTERS))
            activity = ActivityLog(self.store.load(EntitySet.ACTIVITY))

            stand = stands.find_by_id(stand_id)
            hunter = hunters.find_by_id(hunter_id)
            if stand is None or hunter is None:
                raise NotFoundError("Stand or hunter not found")

            if stand.occupied:
                raise ConflictError("Stand is already occupied")

            if hunter.current_stand is not None:
                previous = release_stand(stands, hunter.current_stand)
                _logger.info(
                    "Released stand %s held by %s",
                    previous.name if previous else hunter.current_stand,
                    hunter.name,
                )

            stand.occupy(hunter.name)
            hunter.current_stand = stand.id

            activity.record(ActivityType.CHECKIN, hunter.name, stand=stand.name)

            self.store.save(EntitySet.STANDS, stands.items)
            self.store.save(EntitySet.HUNTERS, hunters.items)
            self.store.save(EntitySet.ACTIVITY, activity.entries)

        _logger.info("%s checked in to %s", hunter.name, stand.name)
        return stand, hunter

    def check_out(self, hunter_id: int) -> Tuple[Optional[Stand], Hunter]:
        """Check a hunter out of their current stand.

        Returns:
            Tuple of the released stand (None if the hunter pointed at a
            stand that no longer exists) and the updated hunter.

        Raises:
            ValidationError: If the hunter does not exist or is not checked in.
            StorageError: If a collection cannot be loaded or saved.
        """
        with self.lock:
            hunters = Repository(self.store.load(EntitySet.HUNTERS))
            stands = Repository(self.store.load(EntitySet.STANDS))
            activity = ActivityLog(self.store.load(EntitySet.ACTIVITY))

            hunter = hunters.find_by_id(hunter_id)
            if hunter is None or hunter.current_stand is None:
                raise ValidationError("Hunter not checked in")

            stand = release_stand(stands, hunter.current_stand)
            hunter.current_stand = None

            activity.record(
                ActivityType.CHECKOUT,
                hunter.name,
                stand=stand.name if stand else "Unknown",
            )

            self.store.save(EntitySet.STANDS, stands.items)
            self.store.save(EntitySet.HUNTERS, hunters.items)
            self.store.save(EntitySet.ACTIVITY, activity.entries)

        _logger.info("%s checked out of %s", hunter.name, stand.name if stand else "unknown stand")
        return stand, hunter

    def log_event(
        self,
        hunter_id: int,
        type: ActivityType = ActivityType.SIGHTING,
        description: Optional[str] = None,
    ) -> ActivityEntry:
        """Record a sighting or harvest for a hunter.

        The entry names the hunter's current stand when they are checked in.

        Raises:
            NotFoundError: If the hunter does not exist.
            ValidationError: If the type is not a sighting or harvest.
            StorageError: If a collection cannot be loaded or saved.
        """
        try:
            type = ActivityType(type)
        except ValueError as e:
            raise ValidationError(f"Unknown activity type: {type}") from e
        if type not in LOGGABLE_TYPES:
            raise ValidationError(f"Cannot log a {type.value} event")

        with self.lock:
            hunters = Repository(self.store.load(EntitySet.HUNTERS))
            activity = ActivityLog(self.store.load(EntitySet.ACTIVITY))

            hunter = hunters.find_by_id(hunter_id)
            if hunter is None:
                raise NotFoundError("Hunter not found")

            stand_name = None
            if hunter.current_stand is not None:
                stands = Repository(self.store.load(EntitySet.STANDS))
                stand = stands.find_by_id(hunter.current_stand)
                stand_name = stand.name if stand else None

            entry = activity.record(type, hunter.name, stand=stand_name, description=description)
            self.store.save(EntitySet.ACTIVITY, activity.entries)

        _logger.info("%s logged a %s", hunter.name, type.value)
        return entry

    def recent_activity(self, n: Optional[int] = None):
        """Newest-first slice of the activity log."""
        activity = ActivityLog(self.store.load(EntitySet.ACTIVITY))
        if n is None:
            return activity.recent()
        return activity.recent(n)
