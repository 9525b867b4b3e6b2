from conftest import PASSWORD


def test_signup_returns_session_and_user(api):
    response = api.post(
        "/api/v1/auth/signup",
        json={"email": "Owner@Example.com", "password": PASSWORD, "full_name": "Olive Owner"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "owner@example.com"
    assert body["user"]["full_name"] == "Olive Owner"
    assert body["user"]["role"] == "user"
    assert "password_hash" not in body["user"]


def test_signup_duplicate_email(api, signup):
    signup("dup")
    response = api.post("/api/v1/auth/signup", json={"email": "dup@example.com", "password": PASSWORD})
    assert response.status_code == 409


def test_signup_short_password(api):
    response = api.post("/api/v1/auth/signup", json={"email": "short@example.com", "password": "abc"})
    assert response.status_code == 422


def test_signin_and_session(api, signup):
    signup("member")
    response = api.post("/api/v1/auth/signin", json={"email": "member@example.com", "password": PASSWORD})
    assert response.status_code == 200
    token = response.json()["access_token"]

    session = api.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"})
    assert session.status_code == 200
    assert session.json()["email"] == "member@example.com"


def test_signin_wrong_password(api, signup):
    signup("member")
    response = api.post("/api/v1/auth/signin", json={"email": "member@example.com", "password": "nope-nope"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid login credentials"


def test_session_requires_token(api):
    assert api.get("/api/v1/auth/session").status_code == 401
    bad = api.get("/api/v1/auth/session", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401


def test_signout_revokes_session(api, signup):
    headers, _ = signup("leaver")
    response = api.post("/api/v1/auth/signout", headers=headers)
    assert response.json() == {"success": True, "revoked": True}

    assert api.get("/api/v1/auth/session", headers=headers).status_code == 401
    again = api.post("/api/v1/auth/signout", headers=headers)
    assert again.json()["revoked"] is False


def test_users_me(api, signup):
    headers, user = signup("me", full_name="Me Myself")
    response = api.get("/api/v1/users/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == user["id"]


def test_health_endpoints(api):
    assert api.get("/health").json()["status"] == "healthy"
    assert api.get("/api/v1/auth/health").status_code == 200
    db_health = api.get("/api/v1/database/health")
    assert db_health.status_code == 200
    assert db_health.json()["status"] == "healthy"


def test_signup_accepts_apostrophe_and_unicode_domain(api):
    for email in ("o'brien@example.com", "user@bücher.de"):
        response = api.post("/api/v1/auth/signup", json={"email": email, "password": PASSWORD})
        assert response.status_code == 201, response.text
        stored = response.json()["user"]["email"]
        assert stored == stored.lower()
        assert stored.split("@")[0] == email.split("@")[0]


def test_signup_invalid_email(api):
    response = api.post("/api/v1/auth/signup", json={"email": "not-an-email", "password": PASSWORD})
    assert response.status_code == 422
