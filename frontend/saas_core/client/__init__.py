"""SaaS Core — Backend service client."""
from .backend_client import (
    BackendClient,
    BackendClientError,
    INITIAL_SESSION,
    SIGNED_IN,
    SIGNED_OUT,
)

__all__ = [
    "BackendClient",
    "BackendClientError",
    "INITIAL_SESSION",
    "SIGNED_IN",
    "SIGNED_OUT",
]
