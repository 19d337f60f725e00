from __future__ import annotations

from typing import Any, List, Optional

import pandas as pd

from ..data.models import (
    ChartData,
    InventoryFilters,
    InventoryItem,
    KpiTotals,
    LOW_STATUSES,
    QuantityTier,
)

COLUMNS = ["id", "name", "category", "quantity", "unit_price", "total_value", "date_added", "status"]

# tier -> (bar fill, bar border)
TIER_COLORS = {
    "danger": ("rgba(220, 38, 38, 0.75)", "#dc2626"),
    "warning": ("rgba(217, 119, 6, 0.75)", "#d97706"),
    "normal": ("rgba(26, 58, 92, 0.75)", "#1a3a5c"),
}


# ---------- frame helpers ----------

def items_frame(items: List[InventoryItem]) -> pd.DataFrame:
    """One row per item, in the order given, with snake_case columns."""
    return pd.DataFrame([item.model_dump() for item in items], columns=COLUMNS)


def _ordered(items: List[InventoryItem], frame: pd.DataFrame) -> List[InventoryItem]:
    return [items[i] for i in frame.index]


def _by_date_desc(frame: pd.DataFrame) -> pd.DataFrame:
    # ISO YYYY-MM-DD strings sort chronologically as plain strings
    return frame.sort_values("date_added", ascending=False, kind="stable")


def _by_name(frame: pd.DataFrame) -> pd.DataFrame:
    return frame.sort_values("name", kind="stable", key=lambda s: s.str.lower())


def _term_mask(frame: pd.DataFrame, term: str) -> pd.Series:
    return (
        frame["name"].str.lower().str.contains(term, regex=False)
        | frame["id"].str.lower().str.startswith(term)
    )


# ---------- views ----------

def compute_kpis(items: List[InventoryItem]) -> KpiTotals:
    df = items_frame(items)
    return KpiTotals(
        total_items=int(len(df)),
        total_value=float(df["total_value"].sum()) if not df.empty else 0.0,
        low_stock_count=int(df["status"].isin(LOW_STATUSES).sum()),
        categories_in_use=int(df["category"].nunique()),
    )


def recent_activity(items: List[InventoryItem], limit: int = 5) -> List[InventoryItem]:
    """The ``limit`` most recently added items, newest first."""
    if not items:
        return []
    return _ordered(items, _by_date_desc(items_frame(items)).head(int(limit)))


def quantity_tier(quantity: Any, threshold: float = 5) -> QuantityTier:
    """0 is danger, up to and including ``threshold`` is warning, above is normal."""
    try:
        q = float(quantity)
    except (TypeError, ValueError):
        q = 0.0
    if pd.isna(q) or q == 0:
        return "danger"
    if q <= threshold:
        return "warning"
    return "normal"


def chart_label(name: Optional[str], max_length: int = 20) -> str:
    label = name or "(unnamed)"
    if len(label) > max_length:
        return label[: max_length - 2] + "…"
    return label


def build_chart_data(items: List[InventoryItem], max_label: int = 20, threshold: float = 5) -> ChartData:
    """Bar chart of quantities, sorted by name so bar order is stable across edits."""
    if not items:
        return ChartData()
    ordered = _ordered(items, _by_name(items_frame(items)))
    tiers = [quantity_tier(item.quantity, threshold) for item in ordered]
    return ChartData(
        labels=[chart_label(item.name, max_label) for item in ordered],
        full_names=[item.name for item in ordered],
        quantities=[item.quantity for item in ordered],
        tiers=tiers,
        background_colors=[TIER_COLORS[t][0] for t in tiers],
        border_colors=[TIER_COLORS[t][1] for t in tiers],
    )


def chart_frame(chart: ChartData) -> pd.DataFrame:
    """Long-form frame for st.bar_chart: one row per bar with its colour."""
    return pd.DataFrame(
        {
            "item": chart.labels,
            "name": chart.full_names,
            "quantity": chart.quantities,
            "color": chart.border_colors,
        }
    )


def filter_items(items: List[InventoryItem], filters: InventoryFilters) -> List[InventoryItem]:
    """Inventory table rows: search AND category AND status, newest first."""
    if not items:
        return []
    df = items_frame(items)
    mask = pd.Series(True, index=df.index)
    term = filters.search.strip().lower()
    if term:
        mask &= _term_mask(df, term)
    if filters.category:
        mask &= df["category"] == filters.category
    if filters.status:
        mask &= df["status"] == filters.status
    return _ordered(items, _by_date_desc(df.loc[mask]))


def search_items(items: List[InventoryItem], term: Optional[str]) -> List[InventoryItem]:
    """Dashboard search: matches sorted by name. An empty term matches nothing."""
    term = (term or "").strip().lower()
    if not term or not items:
        return []
    df = items_frame(items)
    return _ordered(items, _by_name(df.loc[_term_mask(df, term)]))


def list_categories(items: List[InventoryItem]) -> List[str]:
    if not items:
        return []
    return sorted(items_frame(items)["category"].drop_duplicates().tolist())


def category_options(configured: List[str], items: List[InventoryItem]) -> List[str]:
    """Configured categories first, then any other category found on stored items."""
    extra = [c for c in list_categories(items) if c not in configured]
    return list(configured) + extra
