"""
Router — maps a path plus auth state to the page to render.

    /           landing
    /auth       auth form      (signed-in users are sent to /dashboard)
    /dashboard  dashboard      (protected: loading placeholder while the
                                session is restored, else redirect to /auth)

Unknown paths fall back to the landing page.
"""
from dataclasses import dataclass

from frontend.saas_core.auth.context import AuthContext

LANDING = "landing"
AUTH = "auth"
DASHBOARD = "dashboard"
LOADING = "loading"

ROUTES: dict[str, str] = {
    "/": LANDING,
    "/auth": AUTH,
    "/dashboard": DASHBOARD,
}
PROTECTED_PATHS = {"/dashboard"}


@dataclass(frozen=True)
class Route:
    page: str
    path: str
    redirected_from: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirected_from is not None


def normalize_path(path: str | None) -> str:
    path = (path or "/").strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def resolve_route(path: str | None, auth: AuthContext) -> Route:
    path = normalize_path(path)

    if path not in ROUTES:
        return Route(LANDING, "/", redirected_from=path)

    if path in PROTECTED_PATHS:
        if auth.loading:
            return Route(LOADING, path)
        if not auth.is_authenticated:
            return Route(AUTH, "/auth", redirected_from=path)

    if path == "/auth" and not auth.loading and auth.is_authenticated:
        return Route(DASHBOARD, "/dashboard", redirected_from=path)

    return Route(ROUTES[path], path)
