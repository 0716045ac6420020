from __future__ import annotations


def test_friend_request_lifecycle(client, register) -> None:
    alice, alice_headers = register()
    bob, bob_headers = register()

    sent = client.post(f"/api/friend-requests/send/{bob['id']}", headers=alice_headers)
    assert sent.status_code == 201
    req = sent.get_json()["data"]
    assert req["status"] == "pending"
    assert (req["sender_id"], req["receiver_id"]) == (alice["id"], bob["id"])

    inbox = client.get("/api/friend-requests/", headers=bob_headers).get_json()["data"]
    assert inbox["sent"] == []
    assert [r["sender"]["id"] for r in inbox["received"]] == [alice["id"]]

    outbox = client.get("/api/friend-requests/", headers=alice_headers).get_json()["data"]
    assert [r["receiver"]["id"] for r in outbox["sent"]] == [bob["id"]]

    accepted = client.post(f"/api/friend-requests/{req['id']}/accept", headers=bob_headers)
    assert accepted.status_code == 200
    assert accepted.get_json()["data"]["status"] == "accepted"

    again = client.post(f"/api/friend-requests/{req['id']}/reject", headers=bob_headers)
    assert again.status_code == 409


def test_duplicate_pending_request_conflicts_either_direction(client, register) -> None:
    alice, alice_headers = register()
    bob, bob_headers = register()
    client.post(f"/api/friend-requests/send/{bob['id']}", headers=alice_headers)

    assert client.post(f"/api/friend-requests/send/{bob['id']}", headers=alice_headers).status_code == 409
    assert client.post(f"/api/friend-requests/send/{alice['id']}", headers=bob_headers).status_code == 409


def test_only_receiver_may_answer(client, register) -> None:
    _, alice_headers = register()
    bob, _ = register()
    _, carol_headers = register()
    req = client.post(f"/api/friend-requests/send/{bob['id']}", headers=alice_headers).get_json()["data"]

    assert client.post(f"/api/friend-requests/{req['id']}/accept", headers=alice_headers).status_code == 403
    assert client.post(f"/api/friend-requests/{req['id']}/reject", headers=carol_headers).status_code == 403
    assert client.post("/api/friend-requests/missing/accept", headers=carol_headers).status_code == 404


def test_rejected_request_can_be_resent(client, register) -> None:
    _, alice_headers = register()
    bob, bob_headers = register()
    req = client.post(f"/api/friend-requests/send/{bob['id']}", headers=alice_headers).get_json()["data"]

    rejected = client.post(f"/api/friend-requests/{req['id']}/reject", headers=bob_headers)
    assert rejected.get_json()["data"]["status"] == "rejected"
    assert client.post(f"/api/friend-requests/send/{bob['id']}", headers=alice_headers).status_code == 201


def test_request_to_self_or_unknown_user(client, register) -> None:
    alice, headers = register()
    assert client.post(f"/api/friend-requests/send/{alice['id']}", headers=headers).status_code == 400
    assert client.post("/api/friend-requests/send/ghost", headers=headers).status_code == 404
