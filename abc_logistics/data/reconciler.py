from __future__ import annotations

from typing import Dict, List

from ..logging import get_logger
from .models import InventoryItem, MergeSummary
from .store import InventoryStore


def find_duplicate_groups(items: List[InventoryItem]) -> List[List[InventoryItem]]:
    """Group items sharing a case-insensitive name, oldest first.

    Groups appear in order of first occurrence. Within a group the sort by
    date is stable, so equal dates keep storage order.
    """
    groups: Dict[str, List[InventoryItem]] = {}
    for item in items:
        groups.setdefault(item.name_key(), []).append(item)
    return [
        sorted(group, key=lambda item: item.date_added)
        for group in groups.values()
        if len(group) > 1
    ]


def reconcile_duplicates(store: InventoryStore) -> List[MergeSummary]:
    """Merge items that share a name into the oldest one.

    The keeper's quantity becomes the sum over the group and its own unit
    price sets the total value; the other records are deleted. Status is
    left as it was. The store is persisted once if anything merged.
    """
    logger = get_logger(__name__)
    summaries: List[MergeSummary] = []

    with store.deferred_persistence():
        for group in find_duplicate_groups(store.all()):
            keeper, others = group[0], group[1:]
            merged_quantity = sum(item.quantity for item in group)

            store.update_quantity(keeper.id, merged_quantity)
            for item in others:
                store.delete(item.id)

            summaries.append(MergeSummary(name=keeper.name, count=len(group), merged_quantity=merged_quantity))
            logger.info(
                f"Merged {len(group)} entries named {keeper.name!r} into {keeper.id} "
                f"(removed {', '.join(item.id for item in others)}); combined qty {merged_quantity:g}"
            )

    return summaries
