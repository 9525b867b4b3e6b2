"""
Creation Modals — New Organization / New Project / New Document.

Each modal is a controlled form: it trims the name, refuses to submit a
blank one, and hands the values to the parent's on_create callback. The
parent (the dashboard) owns persistence and decides when the modal closes.

submit() holds the form rule; render() draws the form with Streamlit and
routes the buttons to submit() / close().
"""
from typing import Callable

import streamlit as st


class NewOrganizationModal:
    title = "New Organization"

    def __init__(self, on_close: Callable[[], None], on_create: Callable[[str], None]):
        self.on_close = on_close
        self.on_create = on_create

    def submit(self, name: str) -> bool:
        """Returns False (and skips on_create) for a blank name."""
        name = (name or "").strip()
        if not name:
            return False
        self.on_create(name)
        return True

    def close(self) -> None:
        self.on_close()

    def render(self) -> None:
        with st.container(border=True):
            st.markdown(f"#### {self.title}")
            with st.form("new_org_form", clear_on_submit=False):
                name = st.text_input(
                    "Organization Name",
                    placeholder="Enter organization name",
                    key="new_org_name",
                )
                col_cancel, col_create = st.columns(2)
                with col_cancel:
                    cancelled = st.form_submit_button("Cancel", use_container_width=True)
                with col_create:
                    created = st.form_submit_button("Create", type="primary", use_container_width=True)
            if cancelled:
                self.close()
                st.rerun()
            if created:
                if self.submit(name):
                    st.rerun()
                else:
                    st.warning("Enter an organization name.")


class NewProjectModal:
    title = "New Project"

    def __init__(self, on_close: Callable[[], None], on_create: Callable[[str, str], None]):
        self.on_close = on_close
        self.on_create = on_create

    def submit(self, name: str, description: str = "") -> bool:
        name = (name or "").strip()
        if not name:
            return False
        self.on_create(name, (description or "").strip())
        return True

    def close(self) -> None:
        self.on_close()

    def render(self) -> None:
        with st.container(border=True):
            st.markdown(f"#### {self.title}")
            with st.form("new_project_form", clear_on_submit=False):
                name = st.text_input(
                    "Project Name",
                    placeholder="Enter project name",
                    key="new_project_name",
                )
                description = st.text_area(
                    "Description",
                    placeholder="Optional description",
                    key="new_project_description",
                )
                col_cancel, col_create = st.columns(2)
                with col_cancel:
                    cancelled = st.form_submit_button("Cancel", use_container_width=True)
                with col_create:
                    created = st.form_submit_button("Create", type="primary", use_container_width=True)
            if cancelled:
                self.close()
                st.rerun()
            if created:
                if self.submit(name, description):
                    st.rerun()
                else:
                    st.warning("Enter a project name.")


class NewDocumentModal:
    title = "New Document"

    def __init__(
        self,
        on_close: Callable[[], None],
        on_create: Callable[[str, str, bool], None],
        can_encrypt: bool = False,
    ):
        self.on_close = on_close
        self.on_create = on_create
        self.can_encrypt = can_encrypt

    def submit(self, name: str, content: str = "", encrypt: bool = False) -> bool:
        name = (name or "").strip()
        if not name:
            return False
        self.on_create(name, content or "", bool(encrypt) and self.can_encrypt)
        return True

    def close(self) -> None:
        self.on_close()

    def render(self, project_name: str | None = None) -> None:
        with st.container(border=True):
            heading = f"{self.title} — {project_name}" if project_name else self.title
            st.markdown(f"#### {heading}")
            with st.form("new_document_form", clear_on_submit=False):
                name = st.text_input(
                    "Document Name",
                    placeholder="Enter document name",
                    key="new_document_name",
                )
                content = st.text_area("Content", key="new_document_content", height=200)
                encrypt = st.checkbox(
                    "Encrypt content",
                    value=False,
                    disabled=not self.can_encrypt,
                    help=None if self.can_encrypt else "Set DOCUMENT_ENC_KEY to enable encryption.",
                    key="new_document_encrypt",
                )
                col_cancel, col_create = st.columns(2)
                with col_cancel:
                    cancelled = st.form_submit_button("Cancel", use_container_width=True)
                with col_create:
                    created = st.form_submit_button("Create", type="primary", use_container_width=True)
            if cancelled:
                self.close()
                st.rerun()
            if created:
                if self.submit(name, content, encrypt):
                    st.rerun()
                else:
                    st.warning("Enter a document name.")
