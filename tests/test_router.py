import pytest

from frontend.dashboard.router import AUTH, DASHBOARD, LANDING, LOADING, resolve_route


class _Auth:
    def __init__(self, user=None, loading=False):
        self.user = user
        self.loading = loading

    @property
    def is_authenticated(self):
        return self.user is not None


SIGNED_OUT = _Auth()
SIGNED_IN = _Auth(user={"id": "u-1", "email": "owner@example.com"})
RESTORING = _Auth(loading=True)


@pytest.mark.parametrize("auth", [SIGNED_OUT, SIGNED_IN, RESTORING])
def test_landing_is_public(auth):
    route = resolve_route("/", auth)
    assert route.page == LANDING
    assert not route.is_redirect


def test_dashboard_requires_user():
    route = resolve_route("/dashboard", SIGNED_OUT)
    assert route.page == AUTH
    assert route.path == "/auth"
    assert route.redirected_from == "/dashboard"


def test_dashboard_waits_for_session_restore():
    route = resolve_route("/dashboard", RESTORING)
    assert route.page == LOADING
    assert route.path == "/dashboard"


def test_dashboard_for_signed_in_user():
    assert resolve_route("/dashboard/", SIGNED_IN).page == DASHBOARD


def test_auth_page():
    assert resolve_route("/auth", SIGNED_OUT).page == AUTH
    route = resolve_route("/auth", SIGNED_IN)
    assert route.page == DASHBOARD
    assert route.redirected_from == "/auth"


@pytest.mark.parametrize("path", ["/pricing", "nowhere", "/dashboard/settings"])
def test_unknown_paths_fall_back_to_landing(path):
    route = resolve_route(path, SIGNED_IN)
    assert route.page == LANDING
    assert route.path == "/"


def test_empty_path_is_landing():
    assert resolve_route(None, SIGNED_OUT).page == LANDING
    assert resolve_route("", SIGNED_OUT).page == LANDING
