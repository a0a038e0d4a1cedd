"""Per-session state shared by the Streamlit pages."""

from typing import Any, Callable, Dict, Optional

import streamlit as st

from inventory_tracker.config import config_from_env, setup_logging
from inventory_tracker.models import whole_number
from inventory_tracker.workspace import Workspace, open_workspace


def get_workspace() -> Workspace:
    """Open the workspace once per browser session."""
    if "workspace" not in st.session_state:
        cfg = config_from_env()
        setup_logging(cfg)
        st.session_state["workspace"] = open_workspace(cfg)
    return st.session_state["workspace"]


def session_value(key: str, factory: Callable[[], Any]) -> Any:
    """Return ``st.session_state[key]``, creating it with ``factory`` on first use."""
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def form_nonce(name: str) -> int:
    """Counter mixed into widget keys so a form's widgets reset after submit/cancel."""
    return session_value(f"{name}_nonce", lambda: 0)


def bump_form_nonce(name: str):
    st.session_state[f"{name}_nonce"] = form_nonce(name) + 1


def number_input_bounds(current: Any, low: int, high: Optional[int] = None, default: int = 0) -> Dict[str, Any]:
    """Keyword arguments for ``st.number_input`` that always admit ``current``.

    A stored value outside ``low``..``high`` widens the bounds rather than
    tripping the widget's range check. Only a missing or non-numeric value
    falls back to ``default``; zero is kept.
    """
    try:
        value = whole_number(current)
    except ValueError:
        value = default
    return {
        "min_value": min(low, value),
        "max_value": None if high is None else max(high, value),
        "value": value,
    }


def show_delete_prompt(store, pending_key: str):
    """Render the confirmation for a pending deletion, if there is one."""
    request = st.session_state.get(pending_key)
    if request is None:
        return
    st.warning(f"{request.prompt} ({request.label})")
    yes, no = st.columns(2)
    if yes.button("Delete", key=f"{pending_key}_yes", type="primary"):
        store.confirm_delete(request)
        st.session_state[pending_key] = None
        st.rerun()
    if no.button("Keep", key=f"{pending_key}_no"):
        st.session_state[pending_key] = None
        st.rerun()
