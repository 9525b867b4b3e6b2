"""
Refined Stack Co. — Streamlit client (Router).

Pure UI layer. All data goes through the FastAPI backend:
    - BackendClient        -> HTTP + bearer session against /api/v1
    - AuthContext          -> current user + loading flag, session events
    - DashboardController  -> organizations / projects / documents state
    - resolve_route        -> path + auth state -> page

Usage:
    streamlit run frontend/dashboard/app.py
    (from the repository root; backend must be running, see README)
"""

import logging
import os
import sys

# Load .env before any module reads os.environ (e.g. DOCUMENT_ENC_KEY, REFINED_STACK_API_URL)
from dotenv import load_dotenv
load_dotenv()

import streamlit as st

# ---------------------------------------------------------------------------
# Path setup
# ---------------------------------------------------------------------------
_PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from frontend.config import APP_NAME, LOG_LEVEL
from frontend.dashboard.auth_page import render_auth_page
from frontend.dashboard.components.nav import current_path, set_path
from frontend.dashboard.controller import DashboardController
from frontend.dashboard.dashboard_page import render_dashboard_page
from frontend.dashboard.landing_page import render_landing_page
from frontend.dashboard.router import AUTH, DASHBOARD, LANDING, LOADING, resolve_route
from frontend.saas_core.auth.context import AuthContext
from frontend.saas_core.client.backend_client import BackendClient

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=APP_NAME,
    page_icon="\U0001f5c4",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ---------------------------------------------------------------------------
# Session bootstrap - one client / auth context / controller per browser tab
# ---------------------------------------------------------------------------
if "backend_client" not in st.session_state:
    _client = BackendClient()
    _auth = AuthContext(_client)
    _controller = DashboardController(_client, _auth)
    # Any user change (sign-in, sign-out, expired session) drops dashboard state
    _auth.on_change(lambda _user: _controller.reset())

    st.session_state["backend_client"] = _client
    st.session_state["auth"] = _auth
    st.session_state["dashboard"] = _controller
    logger.info("New browser session")

_auth: AuthContext = st.session_state["auth"]
_controller: DashboardController = st.session_state["dashboard"]

if not st.session_state.get("_session_restored"):
    with st.spinner("Loading..."):
        _auth.restore_session()
    st.session_state["_session_restored"] = True

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
_route = resolve_route(current_path(), _auth)
if _route.is_redirect:
    logger.debug("Redirect %s -> %s", _route.redirected_from, _route.path)
    set_path(_route.path)

if _route.page == LOADING:
    st.info("Loading...")
elif _route.page == AUTH:
    render_auth_page(_auth)
elif _route.page == DASHBOARD:
    render_dashboard_page(_controller)
elif _route.page == LANDING:
    render_landing_page()
