from __future__ import annotations

from typing import Iterable

from ..data.models import MergeSummary


def format_currency(amount) -> str:
    """US dollars with thousands separators, e.g. ``$1,575.00`` or ``-$12.50``."""
    value = float(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_quantity(quantity) -> str:
    value = float(quantity)
    return str(int(value)) if value.is_integer() else str(value)


def status_tone(status: str) -> str:
    if status == "In Stock":
        return "success"
    if status == "Low Stock":
        return "warning"
    return "danger"


_TONE_COLORS = {"success": "#198754", "warning": "#b58105", "danger": "#dc3545"}


def status_style(status: str) -> str:
    """CSS for a status cell, coloured by its tone."""
    return f"color: {_TONE_COLORS[status_tone(status)]}; font-weight: 600"


def describe_merges(summaries: Iterable[MergeSummary]) -> str:
    """Banner text listing each merged duplicate group."""
    return "; ".join(
        f'"{s.name}" ({s.count} entries merged, combined qty: {format_quantity(s.merged_quantity)})'
        for s in summaries
    )
