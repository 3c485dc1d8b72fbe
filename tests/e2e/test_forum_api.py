"""End-to-end tests for the forum HTTP API."""

import pytest
from fastapi.testclient import TestClient

from vibeforum.interface.api.app import create_app
from tests.di import build_test_container

MISSING_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(container=build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


def _create_post(client, **fields) -> dict:
    payload = {
        "title": "What are you vibecoding?",
        "content": "Share your projects",
        "author_name": "Ada",
        "author_email": "ada@example.com",
        **fields,
    }
    response = client.post("/posts", json=payload)
    assert response.status_code == 201
    return response.json()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostEndpoints:
    """End-to-end tests for post endpoints."""

    def test_create_and_get_post(self, client):
        created = _create_post(client)

        response = client.get(f"/posts/{created['post_id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["post"]["title"] == "What are you vibecoding?"
        assert body["post"]["is_guest"] is False
        assert "author_email" not in body["post"]
        assert body["comments"] == []
        assert body["total_comments"] == 0

    def test_views_are_counted(self, client):
        created = _create_post(client)

        client.get(f"/posts/{created['post_id']}")
        response = client.get(f"/posts/{created['post_id']}")

        assert response.json()["post"]["views_count"] == 1

    def test_guest_post_uses_forwarded_address(self, client):
        response = client.post(
            "/posts",
            json={"title": "Anonymous", "content": "Hi"},
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
        )

        assert response.status_code == 201
        assert response.json()["author_name"] == "Guest8757"
        assert response.json()["is_guest"] is True

    def test_blank_title_is_bad_request(self, client):
        response = client.post("/posts", json={"title": " ", "content": "Body"})

        assert response.status_code == 400

    def test_unknown_post_is_not_found(self, client):
        response = client.get(f"/posts/{MISSING_ID}")

        assert response.status_code == 404

    def test_invalid_post_id_is_rejected(self, client):
        response = client.get("/posts/not-a-uuid")

        assert response.status_code == 422

    def test_list_posts(self, client):
        _create_post(client, title="First", category_id="general")
        _create_post(client, title="Second", category_id="help")

        response = client.get("/posts", params={"category_id": "help"})

        assert response.status_code == 200
        body = response.json()
        assert [p["title"] for p in body["posts"]] == ["Second"]
        assert body["total"] == 1
        assert body["limit"] == 20

    def test_list_posts_limit_is_bounded(self, client):
        response = client.get("/posts", params={"limit": 1000})

        assert response.status_code == 400

    def test_author_edits_post(self, client):
        created = _create_post(client)

        response = client.patch(
            f"/posts/{created['post_id']}",
            json={
                "title": "Edited title",
                "content": "Edited body",
                "author_email": "ADA@example.com",
            },
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Edited title"
        assert response.json()["excerpt"] == "Edited title..."

    def test_other_address_cannot_edit_post(self, client):
        created = _create_post(client)

        response = client.patch(
            f"/posts/{created['post_id']}",
            json={
                "title": "Hijacked",
                "content": "Body",
                "author_email": "eve@example.com",
            },
        )

        assert response.status_code == 403
        assert response.json()["detail"] == (
            "You can only edit your own posts. Please use the same email "
            "address you used when creating the post."
        )

    def test_edit_unknown_post(self, client):
        response = client.patch(
            f"/posts/{MISSING_ID}",
            json={"title": "T", "content": "C", "author_email": "ada@example.com"},
        )

        assert response.status_code == 404


class TestCommentEndpoints:
    """End-to-end tests for comment endpoints."""

    def test_comment_thread(self, client):
        post_id = _create_post(client)["post_id"]
        headers = {"X-Real-IP": "198.51.100.23"}

        c1 = client.post(
            f"/posts/{post_id}/comments", json={"content": "c1"}, headers=headers
        ).json()
        c2 = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "c2", "parent_id": c1["comment_id"]},
            headers=headers,
        ).json()
        client.post(f"/posts/{post_id}/comments", json={"content": "c3"}, headers=headers)
        client.post(
            f"/posts/{post_id}/comments",
            json={"content": "c4", "parent_id": c2["comment_id"]},
            headers=headers,
        )

        response = client.get(f"/posts/{post_id}")

        body = response.json()
        assert body["total_comments"] == 4
        assert body["post"]["comments_count"] == 4
        roots = body["comments"]
        assert [c["content"] for c in roots] == ["c1", "c3"]
        assert [c["content"] for c in roots[0]["replies"]] == ["c2"]
        assert [c["content"] for c in roots[0]["replies"][0]["replies"]] == ["c4"]
        assert roots[0]["author_name"] == "Guest8610"

    def test_comments_with_max_level(self, client):
        post_id = _create_post(client)["post_id"]
        parent = client.post(f"/posts/{post_id}/comments", json={"content": "top"}).json()
        client.post(
            f"/posts/{post_id}/comments",
            json={"content": "reply", "parent_id": parent["comment_id"]},
        )

        response = client.get(f"/posts/{post_id}/comments", params={"max_level": 0})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["comments"][0]["replies"] == []

    def test_empty_comment_is_bad_request(self, client):
        post_id = _create_post(client)["post_id"]

        response = client.post(f"/posts/{post_id}/comments", json={"content": "  "})

        assert response.status_code == 400

    def test_comment_on_unknown_post(self, client):
        response = client.post(f"/posts/{MISSING_ID}/comments", json={"content": "Hi"})

        assert response.status_code == 404

    def test_reply_to_unknown_parent(self, client):
        post_id = _create_post(client)["post_id"]

        response = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "Hi", "parent_id": MISSING_ID},
        )

        assert response.status_code == 400

    def test_guest_edits_own_comment(self, client):
        post_id = _create_post(client)["post_id"]
        comment = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "Original"},
            headers={"X-Forwarded-For": "10.0.0.1"},
        ).json()
        assert comment["author_name"] == "Guest2166"

        response = client.patch(
            f"/posts/{post_id}/comments/{comment['comment_id']}",
            json={"content": "Edited", "author_email": "guest2166@guest.local"},
        )

        assert response.status_code == 200
        assert response.json()["content"] == "Edited"

    def test_other_guest_cannot_edit_comment(self, client):
        post_id = _create_post(client)["post_id"]
        comment = client.post(
            f"/posts/{post_id}/comments",
            json={"content": "Original"},
            headers={"X-Forwarded-For": "10.0.0.1"},
        ).json()

        response = client.patch(
            f"/posts/{post_id}/comments/{comment['comment_id']}",
            json={"content": "Edited", "author_email": "guest8757@guest.local"},
        )

        assert response.status_code == 403
        assert "your own comments" in response.json()["detail"]

    def test_comments_default_to_configured_depth(self, client):
        """Without max_level, replies below level 5 are not rendered."""
        post_id = _create_post(client)["post_id"]
        parent_id = None
        for i in range(8):
            payload = {"content": f"level {i}"}
            if parent_id:
                payload["parent_id"] = parent_id
            parent_id = client.post(f"/posts/{post_id}/comments", json=payload).json()[
                "comment_id"
            ]

        body = client.get(f"/posts/{post_id}/comments").json()

        depth = 0
        node = body["comments"][0]
        while node["replies"]:
            node = node["replies"][0]
            depth += 1
        assert depth == 5
        assert body["total"] == 8
