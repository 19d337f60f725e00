from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .inventory import ItemStatus


class InventoryFilters(BaseModel):
    """Filters for the inventory table."""
    search: str = Field(default="", description="Substring of the name or prefix of the id (case-insensitive)")
    category: Optional[str] = Field(default=None, description="Exact category filter")
    status: Optional[ItemStatus] = Field(default=None, description="Exact status filter")
