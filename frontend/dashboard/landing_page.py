"""
Landing Page — public marketing page served at "/".

Static content only: hero, feature grid, stats strip, and a single
"Get Started" call to action that routes to /auth.

Navigation: app.py router -> "/" (also the fallback for unknown paths)
"""

import streamlit as st

from frontend.config import APP_NAME
from frontend.dashboard.components.nav import navigate

HERO_TITLE = "Enterprise-Grade Database Solutions"
HERO_SUBTITLE = (
    "Secure, multi-tenant data infrastructure for growing teams. "
    "Organizations, projects, and documents with row-level access control "
    "built in."
)

FEATURES: list[dict[str, str]] = [
    {
        "icon": "🛡️",
        "title": "Advanced Security",
        "description": "Row-level security policies isolate every tenant's data.",
    },
    {
        "icon": "🗄️",
        "title": "Optimized Schema",
        "description": "A normalized schema for organizations, projects, and documents.",
    },
    {
        "icon": "💾",
        "title": "Automated Backups",
        "description": "Point-in-time recovery with automated daily backups.",
    },
    {
        "icon": "👥",
        "title": "Multi-Tenant",
        "description": "Organization-based membership with owner, admin, and member roles.",
    },
    {
        "icon": "🔒",
        "title": "Document Security",
        "description": "Optional client-side encryption for sensitive document content.",
    },
    {
        "icon": "⚡",
        "title": "Real-Time Ready",
        "description": "Session-aware client that reacts to sign-in and sign-out instantly.",
    },
]

STATS: list[tuple[str, str]] = [
    ("99.99%", "Uptime"),
    ("256-bit", "Encryption"),
    ("30 Days", "Backup Retention"),
    ("24/7", "Support"),
]

CTA_LABEL = "Get Started"
CTA_PATH = "/auth"


# ===========================================================================
# MAIN RENDER
# ===========================================================================

def render_landing_page() -> None:
    st.caption(APP_NAME)
    st.title(HERO_TITLE)
    st.markdown(HERO_SUBTITLE)

    if st.button(CTA_LABEL, key="btn_get_started", type="primary"):
        navigate(CTA_PATH)

    st.divider()

    # -----------------------------------------------------------------------
    # Features (3 per row)
    # -----------------------------------------------------------------------
    for start in range(0, len(FEATURES), 3):
        cols = st.columns(3)
        for col, feature in zip(cols, FEATURES[start:start + 3]):
            with col:
                with st.container(border=True):
                    st.markdown(f"### {feature['icon']} {feature['title']}")
                    st.caption(feature["description"])

    st.divider()

    # -----------------------------------------------------------------------
    # Stats
    # -----------------------------------------------------------------------
    for col, (value, label) in zip(st.columns(len(STATS)), STATS):
        col.metric(label, value)
