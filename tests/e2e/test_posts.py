"""End-to-end tests for posts, comments and votes."""

from tests.e2e.helpers import create_text_post, register


class TestPosts:
    """Tests for post creation, viewing and listings."""

    def test_create_text_post(self, client):
        # Arrange
        auth = register(client, "alice")

        # Act
        post = create_text_post(client, auth)

        # Assert
        assert len(post["id"]) == 24
        assert post["score"] == 1
        assert post["views"] == 0
        assert post["upvotePercentage"] == 100
        assert post["author"]["username"] == "alice"
        assert post["votes"] == [{"user": post["author"]["id"], "vote": 1}]
        assert post["comments"] == []
        assert "url" not in post

    def test_create_link_post(self, client):
        auth = register(client, "alice")

        post = create_text_post(
            client, auth, type="link", text=None, url="http://example.com"
        )

        assert post["url"] == "http://example.com"
        assert "text" not in post

    def test_text_post_without_text(self, client):
        auth = register(client, "alice")

        response = client.post(
            "/api/posts",
            json={"type": "text", "title": "t", "category": "music"},
            headers={"Authorization": auth},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_json_payload(self, client):
        auth = register(client, "alice")

        response = client.post(
            "/api/posts",
            content="{not json",
            headers={"Authorization": auth, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid JSON payload"}

    def test_get_counts_views(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        first = client.get(f"/api/post/{post['id']}")
        second = client.get(f"/api/post/{post['id']}")

        assert first.status_code == 200
        assert first.json()["views"] == 1
        assert second.json()["views"] == 2

    def test_get_bad_id(self, client):
        response = client.get("/api/post/short")

        assert response.status_code == 400
        assert response.json() == {"message": "invalid post id"}

    def test_get_unknown(self, client):
        response = client.get(f"/api/post/{'0' * 24}")

        assert response.status_code == 404
        assert response.json() == {"message": "post not found"}

    def test_listings(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        create_text_post(client, alice, title="a", category="music")
        bobs = create_text_post(client, bob, title="b", category="news")
        client.get(f"/api/post/{bobs['id']}/upvote", headers={"Authorization": alice})

        # Act
        everything = client.get("/api/posts/").json()
        news = client.get("/api/posts/news").json()
        by_alice = client.get("/api/user/alice").json()
        by_carol = client.get("/api/user/carol").json()

        # Assert
        assert [p["title"] for p in everything] == ["b", "a"]
        assert [p["title"] for p in news] == ["b"]
        assert [p["title"] for p in by_alice] == ["a"]
        assert by_carol == []

    def test_unknown_category(self, client):
        response = client.get("/api/posts/sports")

        assert response.status_code == 400
        assert response.json() == {"message": "invalid category"}

    def test_delete(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.delete(
            f"/api/post/{post['id']}", headers={"Authorization": auth}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "success"}
        assert client.get(f"/api/post/{post['id']}").status_code == 404

    def test_delete_requires_identity(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.delete(f"/api/post/{post['id']}")

        assert response.status_code == 401


class TestComments:
    """Tests for adding and removing comments."""

    def test_add_and_remove(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        post = create_text_post(client, alice)

        # Act
        added = client.post(
            f"/api/post/{post['id']}",
            json={"comment": "nice"},
            headers={"Authorization": bob},
        )
        comment = added.json()["comments"][0]
        removed = client.delete(
            f"/api/post/{post['id']}/{comment['id']}",
            headers={"Authorization": alice},
        )

        # Assert
        assert added.status_code == 200
        assert comment["body"] == "nice"
        assert comment["author"]["username"] == "bob"
        assert removed.status_code == 200
        assert removed.json()["comments"] == []

    def test_empty_comment(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.post(
            f"/api/post/{post['id']}",
            json={"comment": ""},
            headers={"Authorization": auth},
        )

        assert response.status_code == 400

    def test_comment_on_unknown_post(self, client):
        auth = register(client, "alice")

        response = client.post(
            f"/api/post/{'0' * 24}",
            json={"comment": "hello"},
            headers={"Authorization": auth},
        )

        assert response.status_code == 404
        assert response.json() == {"error": "post not found"}

    def test_bad_comment_id(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.delete(
            f"/api/post/{post['id']}/short", headers={"Authorization": auth}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "invalid comment id"}


class TestVotes:
    """Tests for GET /api/post/{id}/{action}."""

    def test_downvote_unvote(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        post = create_text_post(client, alice)
        url = f"/api/post/{post['id']}"

        # Act
        down = client.get(f"{url}/downvote", headers={"Authorization": bob}).json()
        again = client.get(f"{url}/downvote", headers={"Authorization": bob}).json()
        undone = client.get(f"{url}/unvote", headers={"Authorization": bob}).json()

        # Assert
        assert down["score"] == 0
        assert down["upvotePercentage"] == 50
        assert again["score"] == 0
        assert len(again["votes"]) == 2
        assert undone["score"] == 1
        assert undone["upvotePercentage"] == 100

    def test_author_flips_vote(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.get(
            f"/api/post/{post['id']}/downvote", headers={"Authorization": auth}
        )

        assert response.json()["score"] == -1
        assert response.json()["upvotePercentage"] == 0

    def test_unknown_action(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.get(
            f"/api/post/{post['id']}/sidevote", headers={"Authorization": auth}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid action"}

    def test_unvote_without_vote(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        post = create_text_post(client, alice)

        response = client.get(
            f"/api/post/{post['id']}/unvote", headers={"Authorization": bob}
        )

        assert response.status_code == 404

    def test_vote_requires_identity(self, client):
        auth = register(client, "alice")
        post = create_text_post(client, auth)

        response = client.get(f"/api/post/{post['id']}/upvote")

        assert response.status_code == 401
