import httpx
import pytest

from conftest import PASSWORD
from frontend.saas_core.client.backend_client import (
    INITIAL_SESSION,
    SIGNED_IN,
    SIGNED_OUT,
    BackendClient,
    BackendClientError,
)


def _record(client):
    events = []
    client.on_auth_state_change(lambda event, session: events.append((event, session)))
    return events


def test_sign_up_emits_signed_in(make_client):
    client = make_client()
    events = _record(client)

    session = client.sign_up("owner@example.com", PASSWORD, "Olive Owner")

    assert session["user"]["email"] == "owner@example.com"
    assert client.access_token == session["access_token"]
    assert [e for e, _ in events] == [SIGNED_IN]


def test_sign_in_error_surfaces_detail(make_client):
    client = make_client()
    client.sign_up("owner@example.com", PASSWORD)

    other = make_client()
    with pytest.raises(BackendClientError) as exc:
        other.sign_in("owner@example.com", "wrong-password")
    assert exc.value.status_code == 400
    assert "Invalid login credentials" in str(exc.value)
    assert other.session is None


def test_validation_errors_are_readable(make_client):
    client = make_client()
    with pytest.raises(BackendClientError) as exc:
        client.sign_up("not-an-email", PASSWORD)
    assert exc.value.status_code == 422
    assert str(exc.value)


def test_sign_out_clears_session(make_client):
    client = make_client()
    client.sign_up("owner@example.com", PASSWORD)
    events = _record(client)

    client.sign_out()

    assert client.session is None
    assert events == [(SIGNED_OUT, None)]


def test_get_session_resumes_token(make_client):
    token = make_client().sign_up("owner@example.com", PASSWORD)["access_token"]

    resumed = make_client(access_token=token)
    events = _record(resumed)
    session = resumed.get_session()

    assert session["user"]["email"] == "owner@example.com"
    assert events[0][0] == INITIAL_SESSION


def test_get_session_without_token(make_client):
    client = make_client()
    events = _record(client)
    assert client.get_session() is None
    assert events == [(INITIAL_SESSION, None)]


def test_get_session_drops_rejected_token(make_client):
    client = make_client(access_token="stale-token")
    with pytest.raises(BackendClientError) as exc:
        client.get_session()
    assert exc.value.status_code == 401
    assert client.session is None


def test_unsubscribe_stops_events(make_client):
    client = make_client()
    events = []
    unsubscribe = client.on_auth_state_change(lambda event, session: events.append(event))
    unsubscribe()
    client.sign_up("owner@example.com", PASSWORD)
    assert events == []


def test_table_round_trip(make_client):
    client = make_client()
    client.sign_up("owner@example.com", PASSWORD)

    org = client.insert_organization("Acme")
    project = client.insert_project("Site", organization_id=org["id"], description="v1")
    me = client.get_current_user()
    doc = client.insert_document("Readme", project_id=project["id"], created_by=me["id"], content="hi")

    assert [o["name"] for o in client.list_organizations()] == ["Acme"]
    assert [p["id"] for p in client.list_projects(organization_id=org["id"])] == [project["id"]]
    assert [d["id"] for d in client.list_documents(project_id=project["id"])] == [doc["id"]]
    assert client.list_members(org["id"])[0]["role"] == "owner"


def test_transport_error_wrapped():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://backend.invalid", transport=httpx.MockTransport(refuse))
    client = BackendClient(http_client=http)
    with pytest.raises(BackendClientError) as exc:
        client.list_organizations()
    assert exc.value.status_code is None
    assert "Request failed" in str(exc.value)
    http.close()


def _html_client():
    def portal(request):
        return httpx.Response(200, text="<html><body>Sign in to Wi-Fi</body></html>")

    return httpx.Client(base_url="http://backend.invalid", transport=httpx.MockTransport(portal))


def test_non_json_body_wrapped():
    http = _html_client()
    client = BackendClient(http_client=http)
    with pytest.raises(BackendClientError) as exc:
        client.list_organizations()
    assert exc.value.status_code == 200
    assert "Invalid response" in str(exc.value)
    http.close()
