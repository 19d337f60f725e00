from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from ..config import AppConfig, get_config
from ..data.bootstrap import initialize_store
from ..data.id_allocator import IdAllocator
from ..data.interface import ItemBackend, KeyValueStorage
from ..data.models import InventoryItem, MergeSummary
from ..data.reconciler import reconcile_duplicates
from ..data.store import InventoryStore
from ..data.util import get_item_backend, get_storage
from ..logging import get_logger
from .validation import duplicate_name_message, validate_new_item


class AddItemResult(BaseModel):
    """Outcome of an add-item submission. Failures carry per-field errors."""
    ok: bool
    item: Optional[InventoryItem] = None
    errors: Dict[str, str] = Field(default_factory=dict)
    message: str = ""


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class InventoryService:
    """Wires storage, backend, id allocator and store for the UI.

    Call start() once per session: it loads (or seeds/migrates) the store and
    runs the duplicate reconciler before anything reads the inventory.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        backend: ItemBackend,
        allocator: Optional[IdAllocator] = None,
        categories: Optional[Iterable[str]] = None,
        legacy_key: Optional[str] = None,
    ) -> None:
        self.storage = storage
        self.backend = backend
        self.allocator = allocator or IdAllocator(storage)
        self.categories = list(categories) if categories is not None else None
        self.legacy_key = legacy_key
        self.logger = get_logger(__name__)
        self.merged_duplicates: List[MergeSummary] = []
        self._store: Optional[InventoryStore] = None

    @property
    def store(self) -> InventoryStore:
        if self._store is None:
            raise RuntimeError("InventoryService.start() must be called before use.")
        return self._store

    def start(self) -> List[MergeSummary]:
        self._store = initialize_store(self.backend, self.storage, self.allocator, self.legacy_key)
        self.merged_duplicates = reconcile_duplicates(self._store)
        return self.merged_duplicates

    def items(self) -> List[InventoryItem]:
        return self.store.all()

    def add_item(
        self,
        name: Any,
        category: Any,
        quantity: Any,
        unit_price: Any,
        status: Any = "In Stock",
        today: Optional[str] = None,
    ) -> AddItemResult:
        """Validate, reject duplicate names, allocate an id, insert and persist."""
        checked = validate_new_item(name, category, quantity, unit_price, status, self.categories)
        if not checked.ok:
            return AddItemResult(ok=False, errors=checked.errors)

        existing = self.store.find_by_name(checked.name)
        if existing is not None:
            return AddItemResult(ok=False, errors={"name": duplicate_name_message(existing)})

        item = InventoryItem.create(
            self.allocator.next_id(),
            checked.name,
            checked.category,
            checked.quantity,
            checked.unit_price,
            today or today_iso(),
            checked.status,
        )
        self.store.insert(item)
        self.logger.info(f"Added {item.id} {item.name!r}")
        return AddItemResult(
            ok=True,
            item=item,
            message=f'Item "{item.name}" ({item.id}) added successfully.',
        )

    def delete_item(self, item_id: str) -> bool:
        deleted = self.store.delete(item_id)
        if deleted:
            self.logger.info(f"Deleted {item_id}")
        else:
            self.logger.debug(f"Delete ignored, no item {item_id}")
        return deleted


def build_inventory_service(
    config: Optional[AppConfig] = None,
    storage: Optional[KeyValueStorage] = None,
) -> InventoryService:
    """Compose a service from configuration; the backend kind comes from config."""
    config = config or get_config()
    storage = storage if storage is not None else get_storage(config.data_dir)
    backend = get_item_backend(config.storage_backend, storage, key=config.items_key)
    allocator = IdAllocator(storage, key=config.counter_key, prefix=config.id_prefix)
    return InventoryService(
        storage, backend, allocator, categories=config.categories, legacy_key=config.legacy_key
    )
