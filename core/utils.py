"""Export status badge shown above the download buttons."""
from html import escape
from typing import Optional, Tuple

import streamlit as st

STATUS_COLOURS = {
    "ready": "#2e7d32",
    "empty": "#455a64",
    "blocked": "#f9a825",
    "failed": "#c62828",
}


def export_status(modules: int, invalid: Optional[str] = None, failure: Optional[str] = None) -> Tuple[str, str]:
    """Map the export panel state to a (level, message) pair."""
    if failure:
        return "failed", f"Export failed. {failure}"
    if invalid:
        return "blocked", f"Export blocked until the header is fixed. {invalid}"
    if not modules:
        return "empty", "Header only: add modules to build the source body."
    return "ready", f"Export ready: {modules} module(s)."


def status_html(level: str, text: str) -> str:
    col = STATUS_COLOURS.get(level, STATUS_COLOURS["empty"])
    return (
        f'<div class="sb-status sb-status-{escape(level)}" '
        f'style="background:{col};padding:10px;border-radius:8px;color:white;font-weight:600;">'
        f"{escape(text)}</div>"
    )


def status_box(modules: int, invalid: Optional[str] = None, failure: Optional[str] = None) -> str:
    level, text = export_status(modules, invalid, failure)
    st.markdown(status_html(level, text), unsafe_allow_html=True)
    return level
