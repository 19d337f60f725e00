from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

QuantityTier = Literal["danger", "warning", "normal"]


class KpiTotals(BaseModel):
    """Dashboard KPIs computed over the current inventory snapshot."""
    total_items: int = Field(description="Number of items")
    total_value: float = Field(description="SUM(total_value)")
    low_stock_count: int = Field(description="Items in Low Stock or Out of Stock")
    categories_in_use: int = Field(description="DISTINCT categories")


class ChartData(BaseModel):
    """Bar chart payload, one entry per item sorted by name."""
    labels: List[str] = Field(default_factory=list, description="Possibly truncated item names")
    full_names: List[str] = Field(default_factory=list, description="Untruncated item names for tooltips")
    quantities: List[float] = Field(default_factory=list)
    tiers: List[QuantityTier] = Field(default_factory=list)
    background_colors: List[str] = Field(default_factory=list)
    border_colors: List[str] = Field(default_factory=list)


class MergeSummary(BaseModel):
    """One merged duplicate group reported by the reconciler."""
    name: str = Field(description="Name of the surviving (keeper) item")
    count: int = Field(description="Number of records merged into the keeper")
    merged_quantity: float = Field(description="Combined quantity written to the keeper")
