import pandas as pd
import streamlit as st

from abc_logistics.config import get_config
from abc_logistics.data.models import STATUSES, InventoryFilters
from abc_logistics.services.formatting import describe_merges, format_currency, format_quantity, status_style
from abc_logistics.services.inventory_service import InventoryService, build_inventory_service
from abc_logistics.services.views import (
    build_chart_data,
    category_options,
    chart_frame,
    compute_kpis,
    filter_items,
    recent_activity,
    search_items,
)

st.set_page_config(page_title="ABC Logistics — Inventory", layout="wide")
config = get_config()


# -----------------------------------------------------------------------------
# Service (one per browser session, so startup and duplicate merging run once)
# -----------------------------------------------------------------------------
def get_service() -> InventoryService:
    if "inventory_service" not in st.session_state:
        service = build_inventory_service(config)
        service.start()
        st.session_state["inventory_service"] = service
        st.session_state["show_merge_warning"] = bool(service.merged_duplicates)
    return st.session_state["inventory_service"]


def items_table(items, columns):
    rows = []
    for item in items:
        row = {
            "ID": item.id,
            "Name": item.name,
            "Category": item.category,
            "Quantity": format_quantity(item.quantity),
            "Unit Price": format_currency(item.unit_price),
            "Total Value": format_currency(item.total_value),
            "Status": item.status,
            "Date Added": item.date_added,
        }
        rows.append({c: row[c] for c in columns})
    df = pd.DataFrame(rows, columns=columns)
    if "Status" not in columns:
        return df
    return df.style.map(status_style, subset=["Status"])


def render_chart(items, empty_message: str) -> None:
    chart = build_chart_data(items, max_label=config.chart_label_max, threshold=config.low_quantity_threshold)
    if not chart.labels:
        st.info(empty_message)
        return
    # Labels may collide after truncation, so bars are keyed by full name
    st.bar_chart(chart_frame(chart), x="name", y="quantity", color="color", use_container_width=True)


service = get_service()
items = service.items()

# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------
st.sidebar.header("Inventory filters")
search = st.sidebar.text_input("Search by name or ID")
category_sel = st.sidebar.selectbox("Category", ["(All)"] + category_options(config.categories, items))
status_sel = st.sidebar.selectbox("Status", ["(All)"] + list(STATUSES))

# -----------------------------------------------------------------------------
# Duplicate warning banner
# -----------------------------------------------------------------------------
st.title("ABC Logistics — Inventory")
if st.session_state.get("show_merge_warning"):
    st.warning(f"Duplicate items were found and merged: {describe_merges(service.merged_duplicates)}.")
    if st.button("Dismiss"):
        st.session_state["show_merge_warning"] = False
        st.rerun()

# -----------------------------------------------------------------------------
# KPIs
# -----------------------------------------------------------------------------
kpis = compute_kpis(items)
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total items", f"{kpis.total_items:,}")
c2.metric("Total value", format_currency(kpis.total_value))
c3.metric("Low / out of stock", f"{kpis.low_stock_count:,}")
c4.metric("Categories in use", f"{kpis.categories_in_use:,}")

# -----------------------------------------------------------------------------
# Recent activity + chart (or dashboard search results)
# -----------------------------------------------------------------------------
st.markdown("### Recent activity")
recent = recent_activity(items, config.recent_activity_limit)
if recent:
    st.dataframe(
        items_table(recent, ["ID", "Name", "Category", "Total Value", "Status", "Date Added"]),
        use_container_width=True,
        hide_index=True,
    )
else:
    st.caption("No recent activity.")

st.markdown("### Stock levels")
dash_term = st.text_input("Search the dashboard", key="dashboard_search")
if dash_term.strip():
    matched = search_items(items, dash_term)
    render_chart(matched, "No items match your search.")
    if matched:
        st.dataframe(
            items_table(matched, ["ID", "Name", "Category", "Quantity", "Unit Price", "Status"]),
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.caption(f'No items found matching "{dash_term}".')
else:
    render_chart(items, "No inventory items to display.")

# -----------------------------------------------------------------------------
# Inventory table + delete
# -----------------------------------------------------------------------------
st.markdown("### Inventory")
filters = InventoryFilters(
    search=search,
    category=None if category_sel == "(All)" else category_sel,
    status=None if status_sel == "(All)" else status_sel,
)
filtered = filter_items(items, filters)
if filtered:
    st.dataframe(
        items_table(filtered, ["ID", "Name", "Category", "Quantity", "Unit Price", "Total Value", "Status", "Date Added"]),
        use_container_width=True,
        hide_index=True,
    )
else:
    st.caption("No items match the current filters.")

with st.expander("Delete an item"):
    delete_id = st.selectbox("Item", [i.id for i in items], format_func=lambda i: f"{i} — {next(x.name for x in items if x.id == i)}")
    confirm = st.checkbox("I understand this cannot be undone.")
    if st.button("Delete", disabled=not (delete_id and confirm)):
        service.delete_item(delete_id)
        st.rerun()

# -----------------------------------------------------------------------------
# Add item form
# -----------------------------------------------------------------------------
st.markdown("### Add item")
if st.session_state.get("form_feedback"):
    st.success(st.session_state.pop("form_feedback"))

with st.form("inventory_form", clear_on_submit=False):
    f_name = st.text_input("Item name")
    f_category = st.selectbox("Category", [""] + config.categories, format_func=lambda c: c or "Select a category")
    f_quantity = st.text_input("Quantity")
    f_price = st.text_input("Unit price")
    f_status = st.selectbox("Status", list(STATUSES))
    submitted = st.form_submit_button("Add item")

if submitted:
    result = service.add_item(f_name, f_category, f_quantity, f_price, f_status)
    if result.ok:
        st.session_state["form_feedback"] = result.message
        st.rerun()
    for field, message in result.errors.items():
        st.error(f"{field.replace('_', ' ').capitalize()}: {message}")
