"""
SaaS Core — Backend Service Client

Typed handle to the Refined Stack data service. Covers the password auth
flow and the read/insert table API for organizations, organization_members,
projects, documents and users. Row-level security is enforced server-side;
rows the user may not see are simply absent from list results.

Usage:
    from frontend.saas_core.client import BackendClient
    client = BackendClient("http://localhost:8000")
    client.sign_in("owner@example.com", "secret123")
    orgs = client.list_organizations()

Every failure (transport error or non-2xx response) surfaces as
BackendClientError. Session changes are broadcast to listeners registered
with on_auth_state_change().
"""
import logging
from typing import Any, Callable

import httpx

from frontend.config import API_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

# Session-change events
INITIAL_SESSION = "INITIAL_SESSION"
SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"

AuthListener = Callable[[str, "dict | None"], None]


class BackendClientError(Exception):
    """Raised for any failed backend call"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def _error_detail(response: httpx.Response) -> str:
    """Pull the service's error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("message") or body.get("error")
        if isinstance(detail, list):
            # FastAPI validation errors: [{"loc": [...], "msg": "..."}]
            return "; ".join(str(d.get("msg", d)) for d in detail if isinstance(d, dict)) or str(detail)
        if detail:
            return str(detail)
    return f"HTTP {response.status_code}"


class BackendClient:
    """Synchronous client for the data service API."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
        access_token: str | None = None,
    ):
        """
        Args:
            base_url:     Service root, defaults to REFINED_STACK_API_URL.
            http_client:  Pre-built httpx.Client (carries its own base_url).
            timeout:      Request timeout in seconds.
            access_token: Previously issued bearer token to resume.
        """
        self.base_url = (base_url or API_URL).rstrip("/")
        self._http = http_client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout or REQUEST_TIMEOUT,
        )
        self._owns_http = http_client is None
        self.session: dict | None = (
            {"access_token": access_token, "user": None} if access_token else None
        )
        self._listeners: list[AuthListener] = []

    # ══════════════════════════════════════════════════════════════════
    #  TRANSPORT
    # ══════════════════════════════════════════════════════════════════

    @property
    def access_token(self) -> str | None:
        return self.session["access_token"] if self.session else None

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.API_PREFIX}{path}"
        try:
            response = self._http.request(method, url, headers=self.headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise BackendClientError(f"Request failed: {e}") from e

        if response.is_error:
            raise BackendClientError(_error_detail(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body: %s", method, url, e)
            raise BackendClientError(f"Invalid response: {e}", status_code=response.status_code) from e

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # ══════════════════════════════════════════════════════════════════
    #  AUTH
    # ══════════════════════════════════════════════════════════════════

    def on_auth_state_change(self, listener: AuthListener) -> Callable[[], None]:
        """
        Register a session-change listener.
        Returns a callable that removes it again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event, self.session)

    def sign_up(self, email: str, password: str, full_name: str | None = None) -> dict:
        """Create an account; the new session becomes current."""
        payload = {"email": email, "password": password}
        if full_name:
            payload["full_name"] = full_name
        self.session = self._request("POST", "/auth/signup", json=payload)
        self._emit(SIGNED_IN)
        return self.session

    def sign_in(self, email: str, password: str) -> dict:
        """Password sign-in; the new session becomes current."""
        self.session = self._request(
            "POST", "/auth/signin", json={"email": email, "password": password}
        )
        self._emit(SIGNED_IN)
        return self.session

    def sign_out(self) -> None:
        """
        Revoke the session server-side and forget it locally.
        The local session is dropped even if the revoke call fails.
        """
        if self.session is None:
            return
        try:
            self._request("POST", "/auth/signout")
        except BackendClientError as e:
            logger.warning("Sign-out revoke failed: %s", e)
        self.session = None
        self._emit(SIGNED_OUT)

    def get_session(self) -> dict | None:
        """
        Resolve the held token to its user.
        Returns None without a token; a rejected token (401) is dropped.
        """
        if self.access_token is None:
            self._emit(INITIAL_SESSION)
            return None
        try:
            user = self._request("GET", "/auth/session")
        except BackendClientError as e:
            if e.status_code == 401:
                self.session = None
            raise
        self.session = {**self.session, "user": user}
        self._emit(INITIAL_SESSION)
        return self.session

    # ══════════════════════════════════════════════════════════════════
    #  TABLES
    # ══════════════════════════════════════════════════════════════════

    # -- organizations --

    def list_organizations(self) -> list[dict]:
        """All visible organizations ordered by name."""
        return self._request("GET", "/organizations/")

    def insert_organization(self, name: str, settings: dict | None = None) -> dict:
        payload: dict[str, Any] = {"name": name}
        if settings is not None:
            payload["settings"] = settings
        return self._request("POST", "/organizations/", json=payload)

    # -- organization_members --

    def list_members(self, organization_id: str) -> list[dict]:
        return self._request("GET", f"/organizations/{organization_id}/members")

    def insert_member(self, organization_id: str, user_id: str, role: str = "member") -> dict:
        return self._request(
            "POST",
            f"/organizations/{organization_id}/members",
            json={"user_id": user_id, "role": role},
        )

    # -- projects --

    def list_projects(self, organization_id: str | None = None) -> list[dict]:
        """Visible projects ordered by name, optionally for one organization."""
        params = {"organization_id": organization_id} if organization_id else None
        return self._request("GET", "/projects/", params=params)

    def insert_project(
        self,
        name: str,
        organization_id: str,
        description: str | None = None,
        status: str | None = None,
    ) -> dict:
        payload: dict[str, Any] = {
            "name": name,
            "description": description,
            "organization_id": organization_id,
        }
        if status:
            payload["status"] = status
        return self._request("POST", "/projects/", json=payload)

    # -- documents --

    def list_documents(self, project_id: str | None = None) -> list[dict]:
        params = {"project_id": project_id} if project_id else None
        return self._request("GET", "/documents/", params=params)

    def insert_document(
        self,
        name: str,
        project_id: str,
        created_by: str,
        content: str | None = None,
        encrypted_content: str | None = None,
    ) -> dict:
        return self._request(
            "POST",
            "/documents/",
            json={
                "name": name,
                "content": content,
                "encrypted_content": encrypted_content,
                "project_id": project_id,
                "created_by": created_by,
            },
        )

    # -- users --

    def get_current_user(self) -> dict:
        return self._request("GET", "/users/me")
