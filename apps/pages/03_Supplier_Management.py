import os, sys
import streamlit as st

_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.ui.session import (
    get_workspace, session_value, form_nonce, bump_form_nonce, show_delete_prompt,
)

st.set_page_config(page_title="Supplier Management", layout="wide")
st.title("Supplier Directory")

ws = get_workspace()
store = ws.suppliers
form = session_value("supplier_quick_form", lambda: ws.supplier_form(detailed=False))

nonce = form_nonce("supplier_quick_form")
d = form.draft
st.subheader("Edit Supplier" if form.editing else "Add New Supplier")
with st.form(key=f"supplier_quick_form_{nonce}"):
    c1, c2 = st.columns(2)
    name = c1.text_input("Name", value=d.name)
    contact = c2.text_input("Contact", value=d.contact)
    email = c1.text_input("Email", value=d.email)
    address = c2.text_input("Address", value=d.address)
    items_supplied = st.text_area("Items Supplied", value=d.items, height=90)
    submitted = st.form_submit_button("Update Supplier" if form.editing else "Add Supplier")
if submitted:
    form.update(name=name, contact=contact, email=email, address=address, items=items_supplied)
    result = form.submit()
    if result.ok:
        bump_form_nonce("supplier_quick_form")
        st.rerun()
    for err in result.errors:
        st.error(err)
if form.editing and st.button("Cancel"):
    form.cancel()
    bump_form_nonce("supplier_quick_form")
    st.rerun()

show_delete_prompt(store, "supplier_quick_pending_delete")

for s in store.records:
    with st.container(border=True):
        head, b_edit, b_del = st.columns([6, 1, 1])
        head.markdown(f"**{s.name}**")
        if b_edit.button("Edit", key=f"edit_{s.id}"):
            form.edit(s)
            bump_form_nonce("supplier_quick_form")
            st.rerun()
        if b_del.button("Delete", key=f"delete_{s.id}"):
            st.session_state["supplier_quick_pending_delete"] = store.request_delete(s.id)
            st.rerun()
        st.markdown(
            f"Contact: {s.contact}  \n"
            f"Email: {s.email}  \n"
            f"Address: {s.address}  \n"
            f"Items Supplied: {s.items}"
        )
