"""
Auth Page — sign in / sign up form served at "/auth".

Both tabs delegate to AuthContext. Errors from the backend (bad
credentials, duplicate email, short password) are shown inline; on
success the user is sent to /dashboard.

Navigation: app.py router -> "/auth" (also the redirect target for
protected routes when signed out)
"""

import logging

import streamlit as st

from frontend.config import APP_NAME
from frontend.dashboard.components.nav import navigate
from frontend.saas_core.auth.context import AuthContext
from frontend.saas_core.client.backend_client import BackendClientError

logger = logging.getLogger(__name__)


def render_auth_page(auth: AuthContext) -> None:
    _, col_form, _ = st.columns([1, 2, 1])

    with col_form:
        st.title(APP_NAME)
        st.caption("Sign in to manage your organizations and projects.")

        tab_in, tab_up = st.tabs(["Sign In", "Sign Up"])

        # ── Sign in ────────────────────────────────────────────────────
        with tab_in:
            with st.form("sign_in_form"):
                email = st.text_input("Email", key="sign_in_email")
                password = st.text_input("Password", type="password", key="sign_in_password")
                submitted = st.form_submit_button("Sign In", type="primary", use_container_width=True)
            if submitted:
                if not email.strip() or not password:
                    st.warning("Enter your email and password.")
                else:
                    try:
                        auth.sign_in(email.strip(), password)
                    except BackendClientError as e:
                        logger.info("Sign in failed for %s: %s", email.strip(), e)
                        st.error(str(e))
                    else:
                        navigate("/dashboard")

        # ── Sign up ────────────────────────────────────────────────────
        with tab_up:
            with st.form("sign_up_form"):
                full_name = st.text_input("Full Name", key="sign_up_full_name")
                email = st.text_input("Email", key="sign_up_email")
                password = st.text_input("Password", type="password", key="sign_up_password")
                submitted = st.form_submit_button("Create Account", type="primary", use_container_width=True)
            if submitted:
                if not email.strip() or not password:
                    st.warning("Enter an email and password.")
                else:
                    try:
                        auth.sign_up(email.strip(), password, full_name.strip() or None)
                    except BackendClientError as e:
                        logger.info("Sign up failed for %s: %s", email.strip(), e)
                        st.error(str(e))
                    else:
                        navigate("/dashboard")

        if st.button("← Back to home", key="btn_auth_home"):
            navigate("/")
