from __future__ import annotations

import math
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, Field

from ..data.models import STATUSES, InventoryItem

NUMBERS_ONLY = "Numbers only — letters and symbols are not allowed."


class ValidationResult(BaseModel):
    """Outcome of checking a submitted add-item form.

    ``errors`` maps a field name to the message shown beside it. Parsed
    values are only meaningful when ``ok`` is true.
    """
    errors: Dict[str, str] = Field(default_factory=dict)
    name: str = ""
    category: str = ""
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    status: str = "In Stock"

    @property
    def ok(self) -> bool:
        return not self.errors


def _parse_number(raw: Any) -> Tuple[Optional[float], Optional[str]]:
    """Return (value, problem) where problem is "missing" or "invalid"."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None, "missing"
    if isinstance(raw, bool):
        return None, "invalid"
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        return None, "invalid"
    if not math.isfinite(value):
        return None, "invalid"
    return value, None


def _check_number(raw: Any, label: str) -> Tuple[Optional[float], Optional[str]]:
    value, problem = _parse_number(raw)
    if problem == "invalid":
        return None, NUMBERS_ONLY
    if problem == "missing":
        return None, f"{label} is required."
    if value < 0:
        return None, f"{label} cannot be negative."
    return value, None


def validate_new_item(
    name: Any,
    category: Any,
    quantity: Any,
    unit_price: Any,
    status: Any = "In Stock",
    categories: Optional[Iterable[str]] = None,
) -> ValidationResult:
    errors: Dict[str, str] = {}

    name = name.strip() if isinstance(name, str) else ""
    if not name:
        errors["name"] = "Item name is required."

    category = category.strip() if isinstance(category, str) else ""
    allowed = list(categories) if categories is not None else None
    if not category or (allowed is not None and category not in allowed):
        errors["category"] = "Please select a category."

    qty, qty_error = _check_number(quantity, "Quantity")
    if qty_error:
        errors["quantity"] = qty_error

    price, price_error = _check_number(unit_price, "Unit price")
    if price_error:
        errors["unit_price"] = price_error

    status = status if status not in (None, "") else "In Stock"
    if status not in STATUSES:
        errors["status"] = "Please select a status."

    return ValidationResult(
        errors=errors,
        name=name,
        category=category,
        quantity=qty,
        unit_price=price,
        status=status if status in STATUSES else "In Stock",
    )


def duplicate_name_message(existing: InventoryItem) -> str:
    return f'"{existing.name}" already exists ({existing.id}). Item names must be unique.'
