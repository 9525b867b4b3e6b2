"""
Dashboard Controller — state and operations behind the dashboard page.

State:
    organizations   list of organization rows (ordered by name)
    selected_org    id of the current organization, or None
    projects        project rows of the selected organization
    modals          open/closed flag per creation modal

Every fetch and create follows one failure policy: log the error, abort,
leave prior state intact. The message is also kept in last_error so the
page can show it.

Selecting a different organization re-fetches its projects; fetched
projects are never cached per organization.
"""
import logging

from frontend.saas_core.auth.context import AuthContext
from frontend.saas_core.auth.security import DocumentCipher, EncryptionError
from frontend.saas_core.client.backend_client import BackendClient, BackendClientError

logger = logging.getLogger(__name__)

ORGANIZATION_MODAL = "organization"
PROJECT_MODAL = "project"
DOCUMENT_MODAL = "document"
MODALS = (ORGANIZATION_MODAL, PROJECT_MODAL, DOCUMENT_MODAL)


class DashboardController:
    """Owns dashboard state; all reads and writes go through the backend client."""

    def __init__(
        self,
        client: BackendClient,
        auth: AuthContext,
        cipher: DocumentCipher | None = None,
    ):
        self.client = client
        self.auth = auth
        self.cipher = cipher or DocumentCipher()
        self.organizations: list[dict] = []
        self.selected_org: str | None = None
        self.projects: list[dict] = []
        self.modals: dict[str, bool] = {name: False for name in MODALS}
        self.document_project: str | None = None
        self.last_error: str | None = None
        self._loaded_for: str | None = None

    # ══════════════════════════════════════════════════════════════════
    #  STATE
    # ══════════════════════════════════════════════════════════════════

    @property
    def user(self) -> dict | None:
        return self.auth.user

    @property
    def selected_organization(self) -> dict | None:
        for org in self.organizations:
            if org["id"] == self.selected_org:
                return org
        return None

    def ensure_loaded(self) -> None:
        """Fetch organizations once per signed-in user."""
        user_id = self.user.get("id") if self.user else None
        if user_id is None or user_id == self._loaded_for:
            return
        self.reset()
        self._loaded_for = user_id
        self.fetch_organizations()

    def reset(self) -> None:
        """Forget everything (sign-out or user switch)."""
        self.organizations = []
        self.selected_org = None
        self.projects = []
        self.modals = {name: False for name in MODALS}
        self.document_project = None
        self.last_error = None
        self._loaded_for = None

    def select_organization(self, org_id: str) -> None:
        """Make org_id current; a change re-fetches projects."""
        if org_id == self.selected_org:
            return
        self.selected_org = org_id
        self.fetch_projects(org_id)

    def open_modal(self, name: str) -> None:
        self.modals[name] = True

    def open_document_modal(self, project_id: str) -> None:
        """The document modal always targets one project."""
        self.document_project = project_id
        self.open_modal(DOCUMENT_MODAL)

    def close_modal(self, name: str) -> None:
        self.modals[name] = False

    def is_modal_open(self, name: str) -> bool:
        return self.modals.get(name, False)

    def clear_error(self) -> None:
        self.last_error = None

    def _fail(self, message: str, error: Exception) -> None:
        logger.error("%s: %s", message, error)
        self.last_error = f"{message}: {error}"

    # ══════════════════════════════════════════════════════════════════
    #  FETCH
    # ══════════════════════════════════════════════════════════════════

    def fetch_organizations(self) -> None:
        try:
            data = self.client.list_organizations()
        except BackendClientError as e:
            self._fail("Error fetching organizations", e)
            return

        self.organizations = data
        if data and not self.selected_org:
            self.select_organization(data[0]["id"])

    def fetch_projects(self, org_id: str) -> None:
        try:
            data = self.client.list_projects(organization_id=org_id)
        except BackendClientError as e:
            self._fail("Error fetching projects", e)
            return

        self.projects = data

    # ══════════════════════════════════════════════════════════════════
    #  CREATE
    # ══════════════════════════════════════════════════════════════════

    def create_organization(self, name: str) -> bool:
        try:
            self.client.insert_organization(name)
        except BackendClientError as e:
            self._fail("Error creating organization", e)
            return False

        self.fetch_organizations()
        self.close_modal(ORGANIZATION_MODAL)
        return True

    def create_project(self, name: str, description: str) -> bool:
        """No effect (no insert) without a selected organization."""
        if not self.selected_org:
            return False

        org_id = self.selected_org
        try:
            self.client.insert_project(
                name=name,
                description=description,
                organization_id=org_id,
            )
        except BackendClientError as e:
            self._fail("Error creating project", e)
            return False

        self.fetch_projects(org_id)
        self.close_modal(PROJECT_MODAL)
        return True

    def create_document(
        self,
        project_id: str,
        name: str,
        content: str,
        encrypt: bool = False,
    ) -> bool:
        """
        Insert a document created by the current user. With encrypt=True the
        body goes to encrypted_content and content stays empty. No document
        list is refreshed.
        """
        if self.user is None:
            logger.error("Error creating document: no authenticated user")
            self.last_error = "Error creating document: no authenticated user"
            return False

        plaintext: str | None = content
        ciphertext: str | None = None
        if encrypt:
            try:
                ciphertext = self.cipher.encrypt(content or "")
            except EncryptionError as e:
                self._fail("Error encrypting document", e)
                return False
            plaintext = None

        try:
            self.client.insert_document(
                name=name,
                project_id=project_id,
                created_by=self.user["id"],
                content=plaintext,
                encrypted_content=ciphertext,
            )
        except BackendClientError as e:
            self._fail("Error creating document", e)
            return False

        self.close_modal(DOCUMENT_MODAL)
        return True
