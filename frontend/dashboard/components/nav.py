"""
Navigation helper — the current route lives in the ?page= query param.

    navigate("/dashboard")  → ?page=dashboard, then rerun
    current_path()          → "/dashboard"
"""

import streamlit as st


def current_path() -> str:
    page = st.query_params.get("page", "")
    return "/" + page.strip("/") if page else "/"


def set_path(path: str) -> None:
    """Write the query param without rerunning (used for redirects)."""
    page = path.strip("/")
    if page:
        st.query_params["page"] = page
    else:
        st.query_params.clear()


def navigate(path: str) -> None:
    set_path(path)
    st.rerun()
