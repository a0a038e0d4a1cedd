import os, sys
import streamlit as st
import pandas as pd

_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.engine import SupplierView, SUPPLIER_SORT_FIELDS
from inventory_tracker.frames import suppliers_frame
from inventory_tracker.models import SUPPLIER_STATUSES
from inventory_tracker.ui.session import (
    get_workspace, session_value, form_nonce, bump_form_nonce, number_input_bounds, show_delete_prompt,
)

st.set_page_config(page_title="Supplier Info", layout="wide")
st.title("Supplier Management")

ws = get_workspace()
store = ws.suppliers
form = session_value("supplier_form", lambda: ws.supplier_form(detailed=True))
view = session_value("supplier_view", SupplierView)

suppliers = store.records
view.search = st.text_input("Search suppliers...", value=view.search)

# Add / edit form
nonce = form_nonce("supplier_form")
show_form = session_value("supplier_show_form", lambda: False)
if st.button("Close Form" if show_form else "Add New Supplier"):
    form.cancel()
    bump_form_nonce("supplier_form")
    st.session_state["supplier_show_form"] = not show_form
    st.rerun()

if show_form or form.editing:
    d = form.draft
    st.subheader("Edit Supplier" if form.editing else "Add New Supplier")
    with st.form(key=f"supplier_form_{nonce}"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Name", value=d.name)
        contact = c2.text_input("Contact", value=d.contact)
        email = c1.text_input("Email", value=d.email)
        status = c2.selectbox(
            "Status", SUPPLIER_STATUSES,
            index=SUPPLIER_STATUSES.index(d.status) if d.status in SUPPLIER_STATUSES else 0,
            format_func=str.capitalize,
        )
        payment_terms = c1.text_input("Payment Terms", value=d.payment_terms or "", placeholder="e.g., Net 30")
        rating = c2.number_input("Rating (1-5)", step=1,
                                 **number_input_bounds(d.rating, 1, 5, default=ws.cfg.suppliers.default_rating))
        address = st.text_input("Address", value=d.address)
        items_supplied = st.text_area("Items Supplied", value=d.items, height=90)
        b1, b2 = st.columns(2)
        submitted = b1.form_submit_button("Update Supplier" if form.editing else "Add Supplier")
        cancelled = b2.form_submit_button("Cancel")
    if submitted:
        form.update(name=name, contact=contact, email=email, status=status, payment_terms=payment_terms,
                    rating=int(rating), address=address, items=items_supplied)
        result = form.submit()
        if result.ok:
            st.session_state["supplier_show_form"] = False
            bump_form_nonce("supplier_form")
            st.rerun()
        for err in result.errors:
            st.error(err)
    if cancelled:
        form.cancel()
        st.session_state["supplier_show_form"] = False
        bump_form_nonce("supplier_form")
        st.rerun()

# Status KPIs over the full list
stats = view.stats(suppliers)
col1, col2, col3, col4 = st.columns(4)
col1.metric("Total Suppliers", f"{stats.total:,}")
col2.metric("Active Suppliers", f"{stats.active:,}")
col3.metric("Inactive Suppliers", f"{stats.inactive:,}")
col4.metric("Pending Suppliers", f"{stats.pending:,}")

# Sort buttons
sort_cols = st.columns(len(SUPPLIER_SORT_FIELDS))
for col, field in zip(sort_cols, SUPPLIER_SORT_FIELDS):
    label = f"Sort by {field.capitalize()} {view.sort.indicator(field)}".strip()
    if col.button(label, key=f"sort_{field}", type="primary" if view.sort.field == field else "secondary"):
        view.toggle_sort(field)
        st.rerun()

show_delete_prompt(store, "supplier_pending_delete")

rows = view.rows(suppliers)
if not rows:
    st.info("No suppliers found")
else:
    df = suppliers_frame(rows)
    df["status"] = df["status"].fillna("").str.capitalize()
    df["rating"] = df["rating"].map(lambda r: "" if pd.isna(r) else "⭐" * int(r))
    st.dataframe(df.drop(columns=["id"]), hide_index=True, use_container_width=True)
    labels = {s.id: f"{s.name} <{s.email}>" for s in rows}
    picked = st.selectbox("Select a supplier", list(labels), format_func=labels.get)
    c_edit, c_del = st.columns(2)
    if c_edit.button("Edit", key="supplier_edit"):
        form.edit(store.get(picked))
        bump_form_nonce("supplier_form")
        st.rerun()
    if c_del.button("Delete", key="supplier_delete"):
        st.session_state["supplier_pending_delete"] = store.request_delete(picked)
        st.rerun()
