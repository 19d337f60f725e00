import pytest

from abc_logistics.data.models import InventoryFilters
from abc_logistics.data.seed_data import seed_items
from abc_logistics.services.views import (
    TIER_COLORS,
    build_chart_data,
    category_options,
    chart_label,
    compute_kpis,
    filter_items,
    items_frame,
    list_categories,
    quantity_tier,
    recent_activity,
    search_items,
)


@pytest.fixture
def seeds():
    return seed_items()


def test_kpis_for_seed_set(seeds):
    kpis = compute_kpis(seeds)
    assert kpis.total_items == 5
    assert kpis.low_stock_count == 2
    assert kpis.categories_in_use == 4
    assert kpis.total_value == 135000 + 960 + 0 + 38400 + 1575


def test_kpis_for_empty_inventory():
    kpis = compute_kpis([])
    assert kpis.model_dump() == {
        "total_items": 0, "total_value": 0.0, "low_stock_count": 0, "categories_in_use": 0,
    }


def test_items_frame_columns(seeds):
    df = items_frame(seeds)
    assert list(df.columns) == [
        "id", "name", "category", "quantity", "unit_price", "total_value", "date_added", "status",
    ]
    assert df["total_value"].tolist() == [i.total_value for i in seeds]


def test_recent_activity_newest_first(seeds, make_item):
    items = seeds + [make_item("ABC-0006", "Tape", date_added="2026-02-01")]
    recent = recent_activity(items)
    assert [i.id for i in recent] == ["ABC-0006", "ABC-0005", "ABC-0004", "ABC-0003", "ABC-0002"]
    assert recent_activity([]) == []
    assert len(recent_activity(items, limit=2)) == 2


def test_recent_activity_ties_keep_storage_order(make_item):
    items = [
        make_item("ABC-0001", "A", date_added="2025-01-01"),
        make_item("ABC-0002", "B", date_added="2025-01-01"),
        make_item("ABC-0003", "C", date_added="2024-12-31"),
    ]
    assert [i.id for i in recent_activity(items)] == ["ABC-0001", "ABC-0002", "ABC-0003"]


@pytest.mark.parametrize("quantity,tier", [
    (0, "danger"),
    (0.5, "warning"),
    (1, "warning"),
    (5, "warning"),
    (5.01, "normal"),
    (45, "normal"),
    ("abc", "danger"),
    (None, "danger"),
])
def test_quantity_tier(quantity, tier):
    assert quantity_tier(quantity) == tier


def test_chart_sorted_by_name_with_colors(seeds):
    chart = build_chart_data(seeds)
    assert chart.full_names == [
        "Forklift Model X200", "Pallet Wrap Film", "Safety Helmets",
        "Shipping Containers 20ft", "Steel Beams 6m",
    ]
    assert chart.quantities == [3, 8, 45, 12, 0]
    assert chart.tiers == ["warning", "normal", "normal", "normal", "danger"]
    assert chart.background_colors[0] == TIER_COLORS["warning"][0]
    assert chart.border_colors[-1] == "#dc2626"
    assert chart.labels[3] == "Shipping Container…"


def test_chart_sort_ignores_case(make_item):
    items = [make_item("ABC-0001", "beta"), make_item("ABC-0002", "Alpha"), make_item("ABC-0003", "Gamma")]
    assert build_chart_data(items).full_names == ["Alpha", "beta", "Gamma"]


def test_chart_empty():
    assert build_chart_data([]).labels == []


def test_chart_label():
    assert chart_label("x" * 20) == "x" * 20
    assert chart_label("x" * 21) == "x" * 18 + "…"
    assert chart_label("") == "(unnamed)"


def test_filter_by_name_substring(seeds):
    found = filter_items(seeds, InventoryFilters(search="STEEL"))
    assert [i.id for i in found] == ["ABC-0003"]


def test_filter_by_id_prefix(seeds):
    assert [i.id for i in filter_items(seeds, InventoryFilters(search="abc-000"))] == [
        "ABC-0005", "ABC-0004", "ABC-0003", "ABC-0002", "ABC-0001",
    ]
    assert [i.id for i in filter_items(seeds, InventoryFilters(search="abc-0004"))] == ["ABC-0004"]
    # ids match by prefix only
    assert filter_items(seeds, InventoryFilters(search="0004")) == []


def test_filter_conjunctive(seeds):
    found = filter_items(seeds, InventoryFilters(category="Supplies"))
    assert [i.id for i in found] == ["ABC-0005", "ABC-0002"]
    found = filter_items(seeds, InventoryFilters(category="Supplies", status="Low Stock"))
    assert [i.id for i in found] == ["ABC-0002"]
    assert filter_items(seeds, InventoryFilters(search="helmet", status="Low Stock")) == []


def test_filter_without_criteria_returns_everything_newest_first(seeds):
    assert [i.id for i in filter_items(seeds, InventoryFilters())][0] == "ABC-0005"
    assert filter_items([], InventoryFilters(search="x")) == []


def test_search_sorted_by_name(seeds):
    assert [i.name for i in search_items(seeds, " s ")] == [
        "Safety Helmets", "Shipping Containers 20ft", "Steel Beams 6m",
    ]
    assert search_items(seeds, "") == []
    assert search_items(seeds, "   ") == []
    assert search_items(seeds, "zzz") == []


def test_search_treats_term_literally(make_item):
    items = [make_item("ABC-0001", "Bolts (M8)"), make_item("ABC-0002", "Nuts")]
    assert [i.id for i in search_items(items, "(m8")] == ["ABC-0001"]


def test_list_categories(seeds):
    assert list_categories(seeds) == ["Equipment", "Finished Goods", "Raw Materials", "Supplies"]


def test_category_options_keep_configured_order_and_add_stored_extras(make_item):
    items = [make_item("ABC-0001", category="Spare Parts"), make_item("ABC-0002", category="Supplies")]
    assert category_options(["Equipment", "Supplies"], items) == ["Equipment", "Supplies", "Spare Parts"]
    assert category_options(["Equipment"], []) == ["Equipment"]
