#!/usr/bin/env python3
"""
seed_data.py

Initializes a local storage directory with the fixed starter inventory, or
wipes it and seeds again.

Run:
  python -m abc_logistics.data.seed_data --backend sqlite --reset
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from ..config import get_config
from .models import InventoryItem, format_item_id

# (name, category, quantity, unit price, date added, status)
SEED_ROWS = [
    ("Forklift Model X200",      "Equipment",      3,  45000, "2025-11-15", "In Stock"),
    ("Pallet Wrap Film",         "Supplies",       8,  120,   "2025-12-01", "Low Stock"),
    ("Steel Beams 6m",           "Raw Materials",  0,  850,   "2025-12-10", "Out of Stock"),
    ("Shipping Containers 20ft", "Finished Goods", 12, 3200,  "2026-01-05", "In Stock"),
    ("Safety Helmets",           "Supplies",       45, 35,    "2026-01-20", "In Stock"),
]


def seed_items(prefix: Optional[str] = None) -> List[InventoryItem]:
    """The starter items, numbered 0001..0005 under ``prefix``."""
    prefix = prefix or get_config().id_prefix
    return [
        InventoryItem.create(format_item_id(prefix, i), name, category, quantity, price, added, status)
        for i, (name, category, quantity, price, added, status) in enumerate(SEED_ROWS, start=1)
    ]


def seed_store(store, allocator) -> List[InventoryItem]:
    """Insert the starter items and reserve their ids; the next item gets 0006."""
    items = seed_items(allocator.prefix)
    with store.deferred_persistence():
        for item in items:
            store.insert(item)
    allocator.reset(len(items) + 1)
    return items


def main(argv=None) -> int:
    from ..logging import get_logger
    from .bootstrap import initialize_store
    from .id_allocator import IdAllocator
    from .util import get_item_backend, get_storage

    config = get_config()
    parser = argparse.ArgumentParser(description="Seed local inventory storage.")
    parser.add_argument("--backend", choices=["sqlite", "json"], default=config.storage_backend)
    parser.add_argument("--data-dir", type=str, default=config.data_dir)
    parser.add_argument("--reset", action="store_true", help="Discard stored items and the id counter first.")
    parser.add_argument("--no-overwrite", action="store_true", help="Fail if inventory data already exists.")
    args = parser.parse_args(argv)

    logger = get_logger(__name__)
    storage = get_storage(args.data_dir)

    if args.no_overwrite and storage.get_item(config.items_key):
        logger.error(f"Refusing to overwrite existing inventory in {args.data_dir}")
        return 2

    if args.reset:
        storage.remove_item(config.items_key)
        storage.remove_item(config.counter_key)

    allocator = IdAllocator(storage)
    store = initialize_store(get_item_backend(args.backend, storage), storage, allocator)

    # simple summary
    print(f"Inventory ready in {args.data_dir} ({args.backend})")
    print(f" items: {len(store)} | next id: {allocator.prefix}-{allocator.peek():04d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
