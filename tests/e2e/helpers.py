"""Shared steps for end-to-end tests."""

from dishka import Provider
from fastapi.testclient import TestClient

from stackit.interface.api.app import create_app
from tests.di import build_test_container


def make_client(*overrides: Provider) -> TestClient:
    """Test client backed by the in-memory container."""
    return TestClient(create_app(container=build_test_container(overrides=overrides)))


def signup(client: TestClient, username: str, password: str = "secret123") -> str:
    """Register a user; the client keeps their session cookie."""
    response = client.post(
        "/auth/signup", json={"username": username, "password": password}
    )
    assert response.status_code == 201
    return response.json()["token"]


def act_as(client: TestClient, token: str) -> None:
    """Switch the client's session cookie to another user."""
    client.cookies.clear()
    client.cookies.set("auth_token", token)


def ask(client: TestClient, title: str = "How do I sort a list?") -> str:
    """Ask a question as the current user and return its ID."""
    response = client.post(
        "/questions",
        json={"title": title, "body": "Numbers, ascending.", "tags": ["python"]},
    )
    assert response.status_code == 201
    return response.json()["question_id"]


def answer(client: TestClient, question_id: str, body: str) -> str:
    """Answer a question as the current user and return the answer ID."""
    response = client.post(f"/questions/{question_id}/answers", json={"body": body})
    assert response.status_code == 201
    return response.json()["answer_id"]
