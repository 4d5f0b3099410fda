"""
Dependency wiring for the API routes.

Routes receive the store and the managers through FastAPI's ``Depends`` so
tests can point the whole app at a temporary data directory by overriding
:func:`get_store`.

Date: 2026-10-19
"""

from typing import Optional

from fastapi import Depends

from logic.admin import CampAdmin
from logic.config import DATA_DIR
from logic.occupancy import OccupancyManager
from logic.store import JsonStore

_store: Optional[JsonStore] = None


def get_store() -> JsonStore:
    """Process-wide store over the configured data directory."""
    global _store
    if _store is None:
        _store = JsonStore(DATA_DIR)
    return _store


def get_occupancy(store: JsonStore = Depends(get_store)) -> OccupancyManager:
    return OccupancyManager(store)


def get_admin(store: JsonStore = Depends(get_store)) -> CampAdmin:
    return CampAdmin(store)
