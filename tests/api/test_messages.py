"""
Test suite for message API endpoints.

Runs the full application against a temporary database file per test.

System role: Verification of message HTTP API
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient


def post_message(client: TestClient, chat_id, role: str = "user", content: str = "hi"):
    return client.post("/messages", json={"chatId": chat_id, "role": role, "content": content})


def test_post_message_should_create_session_and_message(client: TestClient) -> None:
    response = post_message(client, "abc")

    assert response.status_code == 200
    assert response.json() == {"message_id": 1, "session_id": 1}


def test_post_message_should_reuse_session_for_same_chat(client: TestClient) -> None:
    first = post_message(client, "abc").json()
    second = post_message(client, "abc", role="assistant", content="hello").json()
    other = post_message(client, "xyz").json()

    assert first["session_id"] == second["session_id"]
    assert other["session_id"] != first["session_id"]


def test_post_message_should_accept_numeric_chat_id(client: TestClient) -> None:
    first = post_message(client, 12345).json()
    second = post_message(client, "12345").json()

    assert first["session_id"] == second["session_id"]
    assert len(client.get("/chats/12345").json()["messages"]) == 2


@pytest.mark.parametrize(
    "body",
    [
        {"chatId": "abc", "role": "narrator", "content": "hi"},
        {"chatId": "abc", "role": "user"},
        {"role": "user", "content": "hi"},
        {"chatId": ["abc"], "role": "user", "content": "hi"},
    ],
)
def test_post_message_should_reject_malformed_body_without_storing(
    client: TestClient, body: dict
) -> None:
    response = client.post("/messages", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"
    assert client.get("/messages/1").status_code == 404
    assert client.get("/chats/abc").json()["messages"] == []


def test_get_message_should_return_posted_values(client: TestClient) -> None:
    created = post_message(client, "abc", role="assistant", content="hello there").json()

    response = client.get(f"/messages/{created['message_id']}")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"id", "role", "content", "created_at"}
    assert body["id"] == created["message_id"]
    assert body["role"] == "assistant"
    assert body["content"] == "hello there"


def test_get_message_should_return_404_when_missing(client: TestClient) -> None:
    response = client.get("/messages/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Message not found"}


def test_get_message_should_reject_non_integer_id(client: TestClient) -> None:
    response = client.get("/messages/not-a-number")

    assert response.status_code == 400


def test_put_message_should_return_updated_message(client: TestClient) -> None:
    created = post_message(client, "abc", content="draft").json()

    response = client.put(
        f"/messages/{created['message_id']}",
        json={"role": "system", "content": "final"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "system"
    assert body["content"] == "final"
    assert client.get(f"/messages/{created['message_id']}").json()["content"] == "final"


def test_put_message_should_return_404_and_leave_messages_unchanged(client: TestClient) -> None:
    created = post_message(client, "abc", content="keep").json()
    before = client.get(f"/sessions/{created['session_id']}").json()["messages"]

    response = client.put("/messages/999", json={"role": "user", "content": "x"})

    assert response.status_code == 404
    assert response.json() == {"error": "Message not found"}
    assert client.get(f"/sessions/{created['session_id']}").json()["messages"] == before


def test_put_message_should_reject_invalid_role(client: TestClient) -> None:
    created = post_message(client, "abc").json()

    response = client.put(
        f"/messages/{created['message_id']}",
        json={"role": "narrator", "content": "x"},
    )

    assert response.status_code == 400
    assert client.get(f"/messages/{created['message_id']}").json()["role"] == "user"


def test_delete_message_should_report_success(client: TestClient) -> None:
    created = post_message(client, "abc").json()

    first = client.delete(f"/messages/{created['message_id']}")
    second = client.delete(f"/messages/{created['message_id']}")

    assert first.status_code == 200
    assert first.json() == {"success": True}
    assert second.status_code == 200
    assert second.json() == {"success": False}
    assert client.get(f"/messages/{created['message_id']}").status_code == 404


@pytest.mark.parametrize("message_id", ["0", "-1", "99999999999999999999"])
def test_message_routes_should_reject_out_of_range_id(client: TestClient, message_id: str) -> None:
    responses = [
        client.get(f"/messages/{message_id}"),
        client.put(f"/messages/{message_id}", json={"role": "user", "content": "x"}),
        client.delete(f"/messages/{message_id}"),
    ]

    for response in responses:
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"


def test_get_message_should_return_utc_timestamp(client: TestClient) -> None:
    created = post_message(client, "abc").json()

    created_at = client.get(f"/messages/{created['message_id']}").json()["created_at"]

    assert datetime.fromisoformat(created_at.replace("Z", "+00:00")).utcoffset() == timedelta(0)
