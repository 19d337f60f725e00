from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..logging import get_logger
from .interface import ItemBackend, PersistenceError
from .models import InventoryItem


class InventoryStore:
    """Authoritative collection of inventory items.

    Every mutation is written through the backend and persisted before the
    call returns. A failed persist is logged, never raised: the in-memory
    state stays the source of truth for the rest of the session.
    """

    def __init__(self, backend: ItemBackend) -> None:
        self.backend = backend
        self.logger = get_logger(__name__)
        self._items: List[InventoryItem] = []
        self._deferred = 0
        self._dirty = False

    # ---------- reads ----------

    def all(self) -> List[InventoryItem]:
        """Snapshot copy of the items, in storage order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, item_id: str) -> Optional[InventoryItem]:
        return next((item for item in self._items if item.id == item_id), None)

    def find_by_name(self, name: str) -> Optional[InventoryItem]:
        return self.backend.find_by_name(name)

    # ---------- writes ----------

    def insert(self, item: InventoryItem) -> None:
        self.backend.insert(item)
        self._changed()

    def delete(self, item_id: str) -> bool:
        if not self.backend.delete(item_id):
            return False
        self._changed()
        return True

    def update_quantity(self, item_id: str, quantity: float) -> None:
        self.backend.update_quantity(item_id, quantity)
        self._changed()

    # ---------- persistence ----------

    def reload(self) -> None:
        """Refresh the snapshot from the backend's working copy."""
        self._items = self.backend.list_items()

    def save(self) -> bool:
        try:
            self.backend.save()
        except PersistenceError as e:
            self.logger.warning(f"Inventory not persisted: {e}")
            return False
        return True

    @contextmanager
    def deferred_persistence(self) -> Iterator["InventoryStore"]:
        """Batch several mutations into a single persist on exit."""
        self._deferred += 1
        try:
            yield self
        finally:
            self._deferred -= 1
            if not self._deferred and self._dirty:
                self._dirty = False
                self.save()

    def _changed(self) -> None:
        self.reload()
        if self._deferred:
            self._dirty = True
        else:
            self.save()
