from __future__ import annotations


def test_register_returns_user_and_token(client, register) -> None:
    user, headers = register(username="ada", email="ada@example.edu")
    assert user["username"] == "ada"
    assert user["is_admin"] is False
    assert "password" not in user and "password_hash" not in user

    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["id"] == user["id"]


def test_duplicate_username_or_email_conflicts(client, register) -> None:
    register(username="grace", email="grace@example.edu")
    body = {
        "username": "grace",
        "password": "another-pass",
        "name": "Grace Two",
        "email": "other@example.edu",
        "department": "Math",
        "designation": "Lecturer",
    }
    assert client.post("/api/auth/register", json=body).status_code == 409

    body.update(username="grace2", email="grace@example.edu")
    resp = client.post("/api/auth/register", json=body)
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "conflict"


def test_register_validates_payload(client) -> None:
    resp = client.post("/api/auth/register", json={"username": "x", "password": "1"})
    assert resp.status_code == 422
    body = resp.get_json()
    assert body["error"] == "unprocessable_entity"
    assert {tuple(d["loc"]) for d in body["details"]} >= {("username",), ("email",)}


def test_login(client, register) -> None:
    register(username="linus", email="linus@example.edu", password="kernel-pass")

    ok_resp = client.post("/api/auth/login", json={"username": "linus", "password": "kernel-pass"})
    assert ok_resp.status_code == 200
    assert ok_resp.get_json()["data"]["token"]

    bad = client.post("/api/auth/login", json={"username": "linus", "password": "wrong-pass"})
    assert bad.status_code == 401
    assert bad.get_json()["error"] == "unauthorized"


def test_me_requires_bearer(client) -> None:
    assert client.get("/api/auth/me").status_code == 401
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_admin_register_checks_secret(client, admin_headers) -> None:
    me = client.get("/api/auth/me", headers=admin_headers).get_json()["data"]
    assert me["is_admin"] is True

    resp = client.post(
        "/api/admin/register",
        json={
            "username": "intruder",
            "password": "intruder-pass",
            "name": "Intruder",
            "email": "intruder@example.edu",
            "department": "None",
            "designation": "None",
            "admin_secret": "guess",
        },
    )
    assert resp.status_code == 401
