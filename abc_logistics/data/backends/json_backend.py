from __future__ import annotations

from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ...config import get_config
from ...logging import get_logger
from ..interface import ItemBackend, KeyValueStorage, PersistenceError
from ..models import InventoryItem, name_key

_ITEM_LIST = TypeAdapter(List[InventoryItem])


class JsonItemBackend(ItemBackend):
    """
    Flat-list implementation.
    - The whole collection is a JSON array of camelCase records under one key.
    - Items keep insertion order, which is the storage order.
    """

    def __init__(self, storage: KeyValueStorage, key: Optional[str] = None) -> None:
        self.storage = storage
        self.key = key or get_config().items_key
        self.logger = get_logger(__name__)
        self._items: List[InventoryItem] = []

    def load(self) -> None:
        raw = self.storage.get_item(self.key)
        if not raw:
            self._items = []
            return
        try:
            self._items = _ITEM_LIST.validate_json(raw)
        except ValidationError as e:
            self.logger.warning(f"Stored inventory under {self.key!r} is unreadable, starting empty: {e.error_count()} error(s)")
            self._items = []

    def list_items(self) -> List[InventoryItem]:
        return list(self._items)

    def find_by_name(self, name: str) -> Optional[InventoryItem]:
        key = name_key(name)
        return next((item for item in self._items if item.name_key() == key), None)

    def insert(self, item: InventoryItem) -> None:
        self._items.append(item)

    def delete(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        return len(self._items) != before

    def update_quantity(self, item_id: str, quantity: float) -> None:
        self._items = [
            item.with_quantity(quantity) if item.id == item_id else item
            for item in self._items
        ]

    def save(self) -> None:
        payload = _ITEM_LIST.dump_json(self._items, by_alias=True).decode("utf-8")
        try:
            self.storage.set_item(self.key, payload)
        except OSError as e:
            raise PersistenceError(f"Could not write inventory to {self.key!r}: {e}") from e
