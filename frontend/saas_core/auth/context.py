"""
SaaS Core — Auth Context

Holds the current user and a loading flag for one browser session.
Subscribes to the backend client's session-change notifications on
construction and keeps the subscription until close().

Streamlit keeps one AuthContext per browser session in st.session_state;
pages receive it as an argument.
"""
import logging
from typing import Callable

from frontend.saas_core.client.backend_client import BackendClient, BackendClientError

logger = logging.getLogger(__name__)

UserListener = Callable[["dict | None"], None]


class AuthContext:
    """Current-user state backed by a BackendClient."""

    def __init__(self, client: BackendClient):
        self.client = client
        self.user: dict | None = None
        self.loading = True
        self._listeners: list[UserListener] = []
        self._unsubscribe = client.on_auth_state_change(self._handle_auth_event)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    # ── Session events ─────────────────────────────────────────────────

    def _handle_auth_event(self, event: str, session: dict | None) -> None:
        logger.debug("Auth event: %s", event)
        self._set_user(session.get("user") if session else None)

    def _set_user(self, user: dict | None) -> None:
        previous_id = self.user.get("id") if self.user else None
        self.user = user
        current_id = user.get("id") if user else None
        if previous_id != current_id:
            for listener in list(self._listeners):
                listener(user)

    def on_change(self, listener: UserListener) -> Callable[[], None]:
        """Observe user changes (sign-in, sign-out, restored session)."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Operations ─────────────────────────────────────────────────────

    def restore_session(self) -> dict | None:
        """
        Check the held session with the backend.
        Any backend error leaves the user unauthenticated.
        """
        self.loading = True
        try:
            self.client.get_session()
        except BackendClientError as e:
            logger.error("Error restoring session: %s", e)
            self._set_user(None)
        finally:
            self.loading = False
        return self.user

    def sign_in(self, email: str, password: str) -> None:
        """Errors propagate so the auth form can show them."""
        self.client.sign_in(email, password)

    def sign_up(self, email: str, password: str, full_name: str | None = None) -> None:
        self.client.sign_up(email, password, full_name)

    def sign_out(self) -> None:
        self.client.sign_out()

    def close(self) -> None:
        """Release the session-change subscription."""
        self._unsubscribe()
