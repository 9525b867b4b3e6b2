"""
Root conftest.py for Refined Stack tests.

This file provides:
1. Test environment (in-memory SQLite, cheap password hashing)
2. A fresh schema per test
3. API fixtures (TestClient, signed-up users, backend clients)

Environment variables are set before the app is imported so the settings
object and the engine pick them up.
"""

import os
import uuid

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ.pop("DOCUMENT_ENC_KEY", None)

import pytest
from fastapi.testclient import TestClient

from app.core.database import engine
from app.core.database_utils import create_all_tables
from app.main import app
from app.models import Base
from frontend.saas_core.client.backend_client import BackendClient

PASSWORD = "secret123"


def drop_all_tables():
    Base.metadata.drop_all(bind=engine)


# =============================================================================
# DATABASE / API FIXTURES
# =============================================================================


@pytest.fixture
def api():
    """TestClient over a freshly created schema (startup hooks run)."""
    drop_all_tables()
    create_all_tables()
    with TestClient(app) as client:
        yield client
    drop_all_tables()


@pytest.fixture
def signup(api):
    """
    Factory: register a user and return (headers, user dict).

        headers, user = signup("owner")
    """

    def _signup(name: str | None = None, full_name: str | None = None):
        email = f"{name or uuid.uuid4().hex[:8]}@example.com"
        response = api.post(
            "/api/v1/auth/signup",
            json={"email": email, "password": PASSWORD, "full_name": full_name},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['access_token']}"}, body["user"]

    return _signup


@pytest.fixture
def make_client(api):
    """Factory: a BackendClient talking to the in-process app."""
    clients: list[BackendClient] = []

    def _make(**kwargs) -> BackendClient:
        client = BackendClient(base_url="http://testserver", http_client=api, **kwargs)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
