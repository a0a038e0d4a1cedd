import os
import sys
import streamlit as st

_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.ui.session import get_workspace

st.set_page_config(page_title="Inventory Tracker", layout="wide")

st.title("Inventory Tracker")
st.markdown(
    """
    Use the sidebar to navigate:
    - Inventory Dashboard
    - Supplier Info
    - Supplier Management
    """
)

ws = get_workspace()
col1, col2 = st.columns(2)
col1.metric("Inventory Items", f"{len(ws.items):,}")
col2.metric("Suppliers", f"{len(ws.suppliers):,}")

st.info(
    f"Storage backend: {ws.cfg.storage.backend}. "
    "Set INVENTORY_TRACKER_CONFIG to a JSON config (see configs/app.example.json) to change it."
)
