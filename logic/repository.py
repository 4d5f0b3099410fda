"""
Query helpers over loaded collections.

A Repository wraps a snapshot returned by the store. It never loads or saves
anything itself; mutations made to the records it returns are persisted by
whoever owns the snapshot.

Date: 2026-10-19
"""

from typing import Generic, List, Optional, TypeVar

from logic.models import CampModel

T = TypeVar("T", bound=CampModel)


class Repository(Generic[T]):
    """Lookup by id or name over a list of records."""

    def __init__(self, items: List[T]):
        self.items = items

    def find_by_id(self, item_id: Optional[int]) -> Optional[T]:
        if item_id is None:
            return None
        return next((i for i in self.items if i.id == item_id), None)

    def find_by_name(self, name: str) -> Optional[T]:
        return next((i for i in self.items if i.name == name), None)

    def all(self) -> List[T]:
        return list(self.items)

    def next_id(self) -> int:
        """Next free id: one past the largest id in the collection.

        Unlike ``len + 1`` this cannot hand out an id that is still in use
        after a record has been removed.
        """
        return max((i.id for i in self.items), default=0) + 1
