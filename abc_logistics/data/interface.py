# abc_logistics/data/interface.py
from __future__ import annotations

from typing import List, Optional, Protocol

from .models import InventoryItem


class PersistenceError(RuntimeError):
    """A backend could not write its state to storage."""


# ---- Durable key-value storage ----

class KeyValueStorage(Protocol):
    """String keys to string values, in the manner of browser local storage."""

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value. Raises OSError when the write fails."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key; absent keys are ignored."""
        ...


# ---- Item persistence protocol ----

class ItemBackend(Protocol):
    """
    Backend-agnostic contract for the inventory store.

    - Mutating calls change the backend's working copy only; nothing is
      durable until save() is called.
    - list_items() returns items in storage order.
    """

    def load(self) -> None:
        """Restore state from storage. A corrupt blob yields an empty collection."""
        ...

    def list_items(self) -> List[InventoryItem]:
        ...

    def find_by_name(self, name: str) -> Optional[InventoryItem]:
        """First item whose name matches case-insensitively."""
        ...

    def insert(self, item: InventoryItem) -> None:
        ...

    def delete(self, item_id: str) -> bool:
        """Remove an item; returns False when the id is unknown."""
        ...

    def update_quantity(self, item_id: str, quantity: float) -> None:
        """Set quantity and recompute total value from the stored unit price."""
        ...

    def save(self) -> None:
        """Write the full collection to storage. Raises PersistenceError."""
        ...
