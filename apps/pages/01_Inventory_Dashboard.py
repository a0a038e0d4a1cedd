import os, sys
import streamlit as st
import plotly.express as px

_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.engine import InventoryView, distinct_values
from inventory_tracker.frames import items_frame, category_breakdown
from inventory_tracker.ui.session import (
    get_workspace, session_value, form_nonce, bump_form_nonce, number_input_bounds, show_delete_prompt,
)

st.set_page_config(page_title="Inventory Dashboard", layout="wide")
st.title("Inventory Dashboard")

ws = get_workspace()
store = ws.items
form = session_value("item_form", ws.item_form)
view = session_value("inventory_view", lambda: InventoryView(stock=ws.cfg.stock))

# Sidebar filters
items = store.records
view.search = st.sidebar.text_input("Search items", value=view.search)
cat_opts = [""] + distinct_values(items, "category")
sup_opts = [""] + distinct_values(items, "supplier")
view.category = st.sidebar.selectbox(
    "Category", cat_opts,
    index=cat_opts.index(view.category) if view.category in cat_opts else 0,
    format_func=lambda v: v or "All categories",
)
view.supplier = st.sidebar.selectbox(
    "Supplier", sup_opts,
    index=sup_opts.index(view.supplier) if view.supplier in sup_opts else 0,
    format_func=lambda v: v or "All suppliers",
)

# KPIs over the full list
stats = view.stats(items)
col1, col2, col3, col4 = st.columns(4)
col1.metric("Total Items", f"{stats.total:,}")
col2.metric("Low Stock Items", f"{stats.low:,}")
col3.metric("Critical Stock", f"{stats.critical:,}")
col4.metric("Categories", f"{stats.categories:,}")

# Add / edit form
nonce = form_nonce("item_form")
title = "Edit Item" if form.editing else "Add New Item"
with st.expander(title, expanded=form.editing):
    d = form.draft
    with st.form(key=f"item_form_{nonce}"):
        name = st.text_input("Name", value=d.name)
        quantity = st.number_input("Quantity", step=1, **number_input_bounds(d.quantity, 0))
        category = st.text_input("Category", value=d.category)
        supplier = st.text_input("Supplier", value=d.supplier)
        submitted = st.form_submit_button("Update Item" if form.editing else "Add Item")
    if submitted:
        form.update(name=name, quantity=quantity, category=category, supplier=supplier)
        result = form.submit()
        if result.ok:
            bump_form_nonce("item_form")
            st.rerun()
        for err in result.errors:
            st.error(err)
    if form.editing and st.button("Cancel", key="item_cancel"):
        form.cancel()
        bump_form_nonce("item_form")
        st.rerun()

show_delete_prompt(store, "item_pending_delete")

# Grid
rows = view.rows(items)
if not rows:
    st.info("No items found")
else:
    st.dataframe(
        items_frame(rows, ws.cfg.stock).drop(columns=["id"]),
        column_config={
            "stock_pct": st.column_config.ProgressColumn("Stock level", min_value=0, max_value=100, format="%.0f%%"),
        },
        hide_index=True,
        use_container_width=True,
    )
    labels = {it.id: f"{it.name} ({it.category})" for it in rows}
    picked = st.selectbox("Select an item", list(labels), format_func=labels.get)
    c_edit, c_del = st.columns(2)
    if c_edit.button("Edit", key="item_edit"):
        form.edit(store.get(picked))
        bump_form_nonce("item_form")
        st.rerun()
    if c_del.button("Delete", key="item_delete"):
        st.session_state["item_pending_delete"] = store.request_delete(picked)
        st.rerun()

# Stock by category
breakdown = category_breakdown(items, ws.cfg.stock)
if not breakdown.empty:
    long = breakdown.melt(id_vars="category", value_vars=["Critical", "Low", "Good"], var_name="status", value_name="count")
    fig = px.bar(long, x="category", y="count", color="status", title="Stock Status by Category",
                 color_discrete_map={"Critical": "red", "Low": "orange", "Good": "green"})
    st.plotly_chart(fig, use_container_width=True)
