import pytest

from conftest import PASSWORD
from frontend.dashboard.controller import (
    DOCUMENT_MODAL,
    ORGANIZATION_MODAL,
    PROJECT_MODAL,
    DashboardController,
)
from frontend.saas_core.auth.context import AuthContext
from frontend.saas_core.auth.security import DocumentCipher, generate_key
from frontend.saas_core.client.backend_client import BackendClientError


@pytest.fixture
def key():
    return generate_key()


@pytest.fixture
def dashboard(make_client, key):
    client = make_client()
    auth = AuthContext(client)
    auth.sign_up("owner@example.com", PASSWORD, "Olive Owner")
    controller = DashboardController(client, auth, cipher=DocumentCipher(key))
    controller.ensure_loaded()
    return controller


# =============================================================================
# HAPPY PATH
# =============================================================================


def test_first_organization_and_project(dashboard):
    assert dashboard.organizations == []
    assert dashboard.selected_org is None

    dashboard.open_modal(ORGANIZATION_MODAL)
    assert dashboard.create_organization("Acme")

    assert [o["name"] for o in dashboard.organizations] == ["Acme"]
    assert dashboard.selected_org == dashboard.organizations[0]["id"]
    assert dashboard.selected_organization["name"] == "Acme"
    assert dashboard.projects == []
    assert not dashboard.is_modal_open(ORGANIZATION_MODAL)

    dashboard.open_modal(PROJECT_MODAL)
    assert dashboard.create_project("Site", "v1")

    assert [(p["name"], p["description"], p["status"]) for p in dashboard.projects] == [
        ("Site", "v1", "active")
    ]
    assert not dashboard.is_modal_open(PROJECT_MODAL)
    assert dashboard.last_error is None


def test_selection_switches_projects(dashboard):
    dashboard.create_organization("Acme")
    acme = dashboard.selected_org
    dashboard.create_project("Site", "")
    dashboard.create_organization("Beta")

    # adding an organization keeps the current selection
    assert dashboard.selected_org == acme
    beta = next(o["id"] for o in dashboard.organizations if o["name"] == "Beta")

    dashboard.select_organization(beta)
    assert dashboard.projects == []

    dashboard.select_organization(acme)
    assert [p["name"] for p in dashboard.projects] == ["Site"]


def test_create_document_plain(dashboard):
    dashboard.create_organization("Acme")
    dashboard.create_project("Site", "")
    project_id = dashboard.projects[0]["id"]

    dashboard.open_document_modal(project_id)
    assert dashboard.document_project == project_id
    assert dashboard.create_document(project_id, "Readme", "hello")
    assert not dashboard.is_modal_open(DOCUMENT_MODAL)

    docs = dashboard.client.list_documents(project_id=project_id)
    assert docs[0]["content"] == "hello"
    assert docs[0]["created_by"] == dashboard.user["id"]


def test_create_document_encrypted(dashboard, key):
    dashboard.create_organization("Acme")
    dashboard.create_project("Site", "")
    project_id = dashboard.projects[0]["id"]

    assert dashboard.create_document(project_id, "Secrets", "launch codes", encrypt=True)

    doc = dashboard.client.list_documents(project_id=project_id)[0]
    assert doc["content"] is None
    assert doc["encrypted_content"] != "launch codes"
    assert DocumentCipher(key).decrypt(doc["encrypted_content"]) == "launch codes"


def test_reset_on_user_change(dashboard):
    dashboard.create_organization("Acme")
    dashboard.auth.on_change(lambda user: dashboard.reset())

    dashboard.auth.sign_out()

    assert dashboard.organizations == []
    assert dashboard.selected_org is None
    assert dashboard.projects == []


# =============================================================================
# FAILURE POLICY
# =============================================================================


class _RecordingClient:
    """Fake client: records inserts, fails on demand."""

    def __init__(self, fail=False):
        self.fail = fail
        self.inserts = []
        self.organizations = [{"id": "org-1", "name": "Acme"}]
        self.projects = [{"id": "proj-1", "name": "Site"}]

    def on_auth_state_change(self, listener):
        return lambda: None

    def _maybe_fail(self):
        if self.fail:
            raise BackendClientError("boom", status_code=500)

    def list_organizations(self):
        self._maybe_fail()
        return list(self.organizations)

    def list_projects(self, organization_id=None):
        self._maybe_fail()
        return list(self.projects)

    def insert_organization(self, name, settings=None):
        self._maybe_fail()
        self.inserts.append(("organization", name))

    def insert_project(self, **kwargs):
        self._maybe_fail()
        self.inserts.append(("project", kwargs))

    def insert_document(self, **kwargs):
        self._maybe_fail()
        self.inserts.append(("document", kwargs))


def _controller(client, user=None, cipher=None):
    auth = AuthContext(client)
    auth.user = user
    return DashboardController(client, auth, cipher=cipher or DocumentCipher(""))


def test_no_project_insert_without_organization():
    client = _RecordingClient()
    controller = _controller(client, user={"id": "u-1"})

    assert controller.create_project("Site", "v1") is False
    assert client.inserts == []


def test_fetch_failure_keeps_prior_state():
    client = _RecordingClient()
    controller = _controller(client, user={"id": "u-1"})
    controller.fetch_organizations()
    assert controller.selected_org == "org-1"
    assert controller.projects == client.projects

    client.fail = True
    controller.fetch_organizations()
    controller.fetch_projects("org-1")

    assert [o["id"] for o in controller.organizations] == ["org-1"]
    assert [p["id"] for p in controller.projects] == ["proj-1"]
    assert controller.last_error.startswith("Error fetching projects")


def test_create_failure_leaves_modal_open():
    client = _RecordingClient(fail=True)
    controller = _controller(client, user={"id": "u-1"})
    controller.open_modal(ORGANIZATION_MODAL)

    assert controller.create_organization("Acme") is False
    assert controller.is_modal_open(ORGANIZATION_MODAL)
    assert controller.organizations == []
    assert "Error creating organization" in controller.last_error

    controller.clear_error()
    assert controller.last_error is None


def test_document_requires_user():
    client = _RecordingClient()
    controller = _controller(client, user=None)

    assert controller.create_document("proj-1", "Readme", "hello") is False
    assert client.inserts == []


def test_encrypt_without_key_inserts_nothing():
    client = _RecordingClient()
    controller = _controller(client, user={"id": "u-1"})

    assert controller.create_document("proj-1", "Secrets", "x", encrypt=True) is False
    assert client.inserts == []
    assert "Error encrypting document" in controller.last_error


def test_reselecting_same_organization_does_not_refetch():
    client = _RecordingClient()
    controller = _controller(client, user={"id": "u-1"})
    controller.fetch_organizations()

    client.fail = True
    controller.select_organization("org-1")
    assert controller.last_error is None
