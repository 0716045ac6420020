from __future__ import annotations


def test_list_and_get_users(client, register) -> None:
    alice, _ = register()
    bob, _ = register()

    ids = {u["id"] for u in client.get("/api/users/").get_json()["data"]}
    assert {alice["id"], bob["id"]} <= ids

    resp = client.get(f"/api/users/{bob['id']}")
    assert resp.get_json()["data"]["name"] == bob["name"]
    assert client.get("/api/users/does-not-exist").status_code == 404


def test_update_own_profile(client, register) -> None:
    user, headers = register()
    resp = client.put(
        f"/api/users/{user['id']}",
        json={"bio": "Works on graphs.", "office_location": "Room 101", "name": None},
        headers=headers,
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["bio"] == "Works on graphs."
    assert data["office_location"] == "Room 101"
    assert data["name"] == user["name"]


def test_password_change_takes_effect(client, register) -> None:
    user, headers = register(password="first-pass")
    client.put(f"/api/users/{user['id']}", json={"password": "second-pass"}, headers=headers)

    old = client.post("/api/auth/login", json={"username": user["username"], "password": "first-pass"})
    new = client.post("/api/auth/login", json={"username": user["username"], "password": "second-pass"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_cannot_edit_or_delete_someone_else(client, register) -> None:
    alice, _ = register()
    _, mallory_headers = register()

    assert client.put(f"/api/users/{alice['id']}", json={"bio": "x"}, headers=mallory_headers).status_code == 403
    assert client.delete(f"/api/users/{alice['id']}", headers=mallory_headers).status_code == 403


def test_username_taken_on_update(client, register) -> None:
    register(username="taken-name")
    user, headers = register()
    resp = client.put(f"/api/users/{user['id']}", json={"username": "taken-name"}, headers=headers)
    assert resp.status_code == 409


def test_admin_can_delete_any_user(client, register, admin_headers, make_publication) -> None:
    user, headers = register()
    make_publication(headers)

    resp = client.delete(f"/api/users/{user['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert client.get(f"/api/users/{user['id']}").status_code == 404
    assert client.get(f"/api/publications/user/{user['id']}").get_json()["data"] == []
    assert client.delete(f"/api/users/{user['id']}", headers=admin_headers).status_code == 404


def test_follow_graph(client, register) -> None:
    alice, alice_headers = register()
    bob, _ = register()

    assert client.post(f"/api/users/{bob['id']}/follow", headers=alice_headers).status_code == 200
    # following twice is a no-op
    assert client.post(f"/api/users/{bob['id']}/follow", headers=alice_headers).status_code == 200

    followers = client.get(f"/api/users/{bob['id']}/followers").get_json()["data"]
    following = client.get(f"/api/users/{alice['id']}/following").get_json()["data"]
    assert [u["id"] for u in followers] == [alice["id"]]
    assert [u["id"] for u in following] == [bob["id"]]

    check = client.get(f"/api/users/{bob['id']}/is-following", headers=alice_headers)
    assert check.get_json()["data"] == {"following": True}

    client.post(f"/api/users/{bob['id']}/unfollow", headers=alice_headers)
    check = client.get(f"/api/users/{bob['id']}/is-following", headers=alice_headers)
    assert check.get_json()["data"] == {"following": False}


def test_follow_rejects_self_and_unknown(client, register) -> None:
    alice, headers = register()
    assert client.post(f"/api/users/{alice['id']}/follow", headers=headers).status_code == 400
    assert client.post("/api/users/nobody/follow", headers=headers).status_code == 404
