"""Request helpers shared by end-to-end tests."""

from fastapi.testclient import TestClient


def register(client: TestClient, username: str, password: str = "hunter22") -> str:
    """Register a user and return the bearer header value."""
    response = client.post(
        "/api/register", json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return f"Bearer {response.json()['token']}"


def create_text_post(client: TestClient, auth: str, **overrides) -> dict:
    """Publish a post, a text one unless overridden, and return its JSON."""
    body = {
        "type": "text",
        "title": "Hello",
        "category": "music",
        "text": "first post",
    }
    body.update(overrides)
    response = client.post("/api/posts", json=body, headers={"Authorization": auth})
    assert response.status_code == 200, response.text
    return response.json()
