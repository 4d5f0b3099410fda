"""
Admin operations for hunters and stands.

Date: 2026-10-19
"""

import logging
import threading
from typing import Optional

from logic.config import DEFAULT_PIN
from logic.errors import NotFoundError
from logic.models import Hunter, Stand
from logic.occupancy import CAMP_LOCK, release_stand
from logic.repository import Repository
from logic.store import EntitySet, JsonStore

_logger = logging.getLogger(__name__)


class CampAdmin:
    """Roster and stand maintenance.

    Shares the camp lock with the occupancy manager so an admin edit cannot
    interleave with a check-in.
    """

    def __init__(self, store: JsonStore, lock: Optional[threading.RLock] = None):
        self.store = store
        self.lock = lock or CAMP_LOCK

    def add_hunter(self, name: str, pin: Optional[str] = None, is_admin: bool = False) -> Hunter:
        """Register a new hunter.

        Args:
            name: Display name, also used for login.
            pin: Login PIN; defaults to DEFAULT_PIN.
            is_admin: Whether the hunter may use admin routes.

        Returns:
            The created hunter.
        """
        with self.lock:
            hunters = Repository(self.store.load(EntitySet.HUNTERS))
            hunter = Hunter(
                id=hunters.next_id(),
                name=name,
                pin=pin or DEFAULT_PIN,
                is_admin=bool(is_admin),
                current_stand=None,
            )
            hunters.items.append(hunter)
            self.store.save(EntitySet.HUNTERS, hunters.items)

        _logger.info("Added hunter %s (id %s)", hunter.name, hunter.id)
        return hunter

    def remove_hunter(self, hunter_id: int) -> bool:
        """Remove a hunter, releasing their stand first.

        The release is not written to the activity log. Removing an id that
        does not exist is not an error.

        Returns:
            True if a hunter was removed.
        """
        with self.lock:
            hunters = Repository(self.store.load(EntitySet.HUNTERS))
            hunter = hunters.find_by_id(hunter_id)

            if hunter is not None and hunter.current_stand is not None:
                stands = Repository(self.store.load(EntitySet.STANDS))
                if release_stand(stands, hunter.current_stand) is not None:
                    self.store.save(EntitySet.STANDS, stands.items)

            remaining = [h for h in hunters.items if h.id != hunter_id]
            self.store.save(EntitySet.HUNTERS, remaining)

        if hunter is not None:
            _logger.info("Removed hunter %s (id %s)", hunter.name, hunter.id)
        return hunter is not None

    def rename_stand(self, stand_id: int, name: str) -> Stand:
        """Change a stand's display name.

        Raises:
            NotFoundError: If the stand does not exist.
        """
        with self.lock:
            stands = Repository(self.store.load(EntitySet.STANDS))
            stand = stands.find_by_id(stand_id)
            if stand is None:
                raise NotFoundError("Stand not found")

            old_name = stand.name
            stand.name = name
            self.store.save(EntitySet.STANDS, stands.items)

        _logger.info("Renamed stand %s from %s to %s", stand.id, old_name, name)
        return stand

    def add_stand(self, name: str) -> Stand:
        """Create a new, unoccupied stand."""
        with self.lock:
            stands = Repository(self.store.load(EntitySet.STANDS))
            stand = Stand(id=stands.next_id(), name=name)
            stands.items.append(stand)
            self.store.save(EntitySet.STANDS, stands.items)

        _logger.info("Added stand %s (id %s)", stand.name, stand.id)
        return stand
