"""
Top Bar — header rendered at the top of the dashboard page.

Layout (left → right):
    ## Refined Stack Co.                 ← app name
    {email} caption                      ← signed-in user
    [+ New Organization] [Sign Out]      ← actions

Sign out delegates to AuthContext; the auth.on_change listener wired in
app.py resets the dashboard, and the router sends the user to /auth on
the next rerun.

Called from dashboard_page.py via:
    from frontend.dashboard.components.top_bar import render_top_bar
    render_top_bar(controller)
"""

import streamlit as st

from frontend.config import APP_NAME
from frontend.dashboard.components.nav import navigate
from frontend.dashboard.controller import ORGANIZATION_MODAL, DashboardController


def render_top_bar(controller: DashboardController) -> None:
    user = controller.user or {}

    col_title, col_new, col_out = st.columns([6, 2, 1])

    with col_title:
        st.markdown(f"## {APP_NAME}")
        if user.get("email"):
            st.caption(f"Signed in as **{user['email']}**")

    with col_new:
        if st.button("+ New Organization", key="btn_new_org", use_container_width=True):
            controller.open_modal(ORGANIZATION_MODAL)
            st.rerun()

    with col_out:
        if st.button("Sign Out", key="btn_sign_out", use_container_width=True):
            controller.auth.sign_out()
            navigate("/auth")

    st.divider()
