from .inventory import (
    InventoryItem,
    ItemStatus,
    STATUSES,
    LOW_STATUSES,
    format_item_id,
    name_key,
)
from .data_filters import InventoryFilters
from .views import (
    ChartData,
    KpiTotals,
    MergeSummary,
    QuantityTier,
)
from .profile import (
    DeveloperProfile,
    Experience,
    Project,
    initials,
)

__all__ = [
    # Inventory
    "InventoryItem",
    "ItemStatus",
    "STATUSES",
    "LOW_STATUSES",
    "format_item_id",
    "name_key",
    # Filter classes
    "InventoryFilters",
    # View models
    "ChartData",
    "KpiTotals",
    "MergeSummary",
    "QuantityTier",
    # About page
    "DeveloperProfile",
    "Experience",
    "Project",
    "initials",
]
