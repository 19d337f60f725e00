from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

ItemStatus = Literal["In Stock", "Low Stock", "Out of Stock"]

STATUSES: Tuple[str, ...] = ("In Stock", "Low Stock", "Out of Stock")
LOW_STATUSES: Tuple[str, ...] = ("Low Stock", "Out of Stock")


class InventoryItem(BaseModel):
    """A single stock line.

    Serialized with camelCase aliases, which are also the relational column
    names. ``total_value`` is always ``quantity * unit_price``.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(pattern=r"^.+-\d{4,}$", description="Item code, PREFIX-NNNN")
    name: str = Field(min_length=1, description="Item name, unique case-insensitively")
    category: str = Field(min_length=1, description="Item category")
    quantity: float = Field(ge=0, description="Quantity on hand")
    unit_price: float = Field(ge=0, alias="unitPrice", description="Price per unit")
    date_added: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$", alias="dateAdded", description="YYYY-MM-DD")
    status: ItemStatus = Field(default="In Stock", description="Caller-supplied stock status")

    @computed_field(alias="totalValue")
    @property
    def total_value(self) -> float:
        return self.quantity * self.unit_price

    @classmethod
    def create(
        cls,
        item_id: str,
        name: str,
        category: str,
        quantity: float,
        unit_price: float,
        date_added: str,
        status: ItemStatus = "In Stock",
    ) -> "InventoryItem":
        return cls(
            id=item_id,
            name=name,
            category=category,
            quantity=quantity,
            unit_price=unit_price,
            date_added=date_added,
            status=status,
        )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "InventoryItem":
        """Build an item from a persisted camelCase record (``totalValue`` is ignored)."""
        return cls.model_validate(record)

    def with_quantity(self, quantity: float) -> "InventoryItem":
        """Copy with a new quantity; total value follows this item's own unit price."""
        return self.model_copy(update={"quantity": float(quantity)})

    def name_key(self) -> str:
        return name_key(self.name)


def name_key(name: Optional[str]) -> str:
    """Case-insensitive comparison key for item names."""
    return (name or "").strip().lower()


def format_item_id(prefix: str, counter: int) -> str:
    return f"{prefix}-{counter:04d}"
