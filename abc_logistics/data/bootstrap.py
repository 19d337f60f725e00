from __future__ import annotations

import json
from typing import List, Optional

from pydantic import ValidationError

from ..config import get_config
from ..logging import get_logger
from .id_allocator import IdAllocator
from .interface import ItemBackend, KeyValueStorage
from .models import InventoryItem
from .seed_data import seed_store
from .store import InventoryStore


def read_legacy_items(raw: Optional[str]) -> Optional[List[InventoryItem]]:
    """Parse the old flat-array format.

    Returns None when there is nothing usable: no data, an empty array, or a
    blob that fails to parse or validate.
    """
    if not raw:
        return None
    logger = get_logger(__name__)
    try:
        records = json.loads(raw)
        if not isinstance(records, list):
            raise ValueError(f"expected a JSON array, got {type(records).__name__}")
        items = [InventoryItem.from_record(record) for record in records]
    except (ValueError, ValidationError) as e:
        logger.warning(f"Legacy inventory could not be read, ignoring it: {e}")
        return None

    ids = [item.id for item in items]
    if len(set(ids)) != len(ids):
        logger.warning("Legacy inventory contains repeated ids, ignoring it")
        return None
    return items or None


def initialize_store(
    backend: ItemBackend,
    storage: KeyValueStorage,
    allocator: IdAllocator,
    legacy_key: Optional[str] = None,
) -> InventoryStore:
    """Load the store, then fill it from legacy data or the seed set if empty.

    Legacy data takes precedence over seeding and its key is cleared once
    imported. An existing non-empty store is left as loaded.
    """
    logger = get_logger(__name__)
    legacy_key = legacy_key or get_config().legacy_key

    backend.load()
    store = InventoryStore(backend)
    store.reload()
    if len(store):
        logger.debug(f"Loaded {len(store)} inventory item(s)")
        return store

    legacy = read_legacy_items(storage.get_item(legacy_key))
    if legacy is not None:
        with store.deferred_persistence():
            for item in legacy:
                store.insert(item)
        allocator.advance_past(item.id for item in legacy)
        try:
            storage.remove_item(legacy_key)
        except OSError as e:
            logger.warning(f"Legacy key {legacy_key!r} could not be cleared: {e}")
        logger.info(f"Migrated {len(legacy)} item(s) from legacy key {legacy_key!r}")
        return store

    items = seed_store(store, allocator)
    logger.info(f"Seeded inventory with {len(items)} starter item(s)")
    return store
