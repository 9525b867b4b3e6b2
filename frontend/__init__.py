"""
frontend — Browser-side client for Refined Stack.

Submodules:
    - saas_core: Backend client, auth context, document encryption
    - dashboard: Streamlit UI (router, pages, modals, dashboard controller)
    - config: Environment-driven settings
"""
