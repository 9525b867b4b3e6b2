"""
Dashboard Page — protected workspace served at "/dashboard".

Layout:
    top bar                              ← app name, New Organization, Sign Out
    sidebar: organization list           ← click to select (re-fetches projects)
    main:    selected org header
             [+ New Project]             ← only when an organization is selected
             project cards (3 per row)   ← each with [+ New Document]
    open creation modal, if any

All state lives on the DashboardController kept in st.session_state;
this module only draws it and forwards clicks.

Navigation: app.py router -> "/dashboard" (signed-in users only)
"""

import streamlit as st

from frontend.dashboard.components.top_bar import render_top_bar
from frontend.dashboard.controller import (
    DOCUMENT_MODAL,
    ORGANIZATION_MODAL,
    PROJECT_MODAL,
    DashboardController,
)
from frontend.dashboard.modals import NewDocumentModal, NewOrganizationModal, NewProjectModal


# ===========================================================================
# MAIN RENDER
# ===========================================================================

def render_dashboard_page(controller: DashboardController) -> None:
    controller.ensure_loaded()

    render_top_bar(controller)
    _render_organization_sidebar(controller)

    if controller.last_error:
        st.error(controller.last_error)
        if st.button("Dismiss", key="btn_dismiss_error"):
            controller.clear_error()
            st.rerun()

    _render_modals(controller)
    _render_projects(controller)


# ---------------------------------------------------------------------------
# PRIVATE - Sidebar
# ---------------------------------------------------------------------------

def _render_organization_sidebar(controller: DashboardController) -> None:
    with st.sidebar:
        st.subheader("Organizations")
        if not controller.organizations:
            st.caption("No organizations yet. Create one to get started.")
            return

        for org in controller.organizations:
            is_selected = org["id"] == controller.selected_org
            if st.button(
                org["name"],
                key=f"org_{org['id']}",
                type="primary" if is_selected else "secondary",
                use_container_width=True,
            ):
                controller.select_organization(org["id"])
                st.rerun()


# ---------------------------------------------------------------------------
# PRIVATE - Projects
# ---------------------------------------------------------------------------

def _render_projects(controller: DashboardController) -> None:
    org = controller.selected_organization
    if org is None:
        st.info("Select or create an organization to see its projects.")
        return

    col_name, col_new = st.columns([5, 1])
    with col_name:
        st.markdown(f"### {org['name']}")
    with col_new:
        if st.button("+ New Project", key="btn_new_project", use_container_width=True):
            controller.open_modal(PROJECT_MODAL)
            st.rerun()

    if not controller.projects:
        st.caption("No projects in this organization yet.")
        return

    for start in range(0, len(controller.projects), 3):
        cols = st.columns(3)
        for col, project in zip(cols, controller.projects[start:start + 3]):
            with col:
                with st.container(border=True):
                    st.markdown(f"#### {project['name']}")
                    if project.get("description"):
                        st.caption(project["description"])
                    st.caption(f"Status: {project.get('status') or 'active'}")
                    if st.button(
                        "+ New Document",
                        key=f"btn_new_doc_{project['id']}",
                        use_container_width=True,
                    ):
                        controller.open_document_modal(project["id"])
                        st.rerun()


# ---------------------------------------------------------------------------
# PRIVATE - Modals
# ---------------------------------------------------------------------------

def _render_modals(controller: DashboardController) -> None:
    if controller.is_modal_open(ORGANIZATION_MODAL):
        NewOrganizationModal(
            on_close=lambda: controller.close_modal(ORGANIZATION_MODAL),
            on_create=controller.create_organization,
        ).render()

    if controller.is_modal_open(PROJECT_MODAL) and controller.selected_org:
        NewProjectModal(
            on_close=lambda: controller.close_modal(PROJECT_MODAL),
            on_create=controller.create_project,
        ).render()

    if controller.is_modal_open(DOCUMENT_MODAL) and controller.document_project:
        project_id = controller.document_project
        project_name = next(
            (p["name"] for p in controller.projects if p["id"] == project_id),
            None,
        )
        NewDocumentModal(
            on_close=lambda: controller.close_modal(DOCUMENT_MODAL),
            on_create=lambda name, content, encrypt: controller.create_document(
                project_id, name, content, encrypt
            ),
            can_encrypt=controller.cipher.available,
        ).render(project_name=project_name)
