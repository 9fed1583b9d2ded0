"""End-to-end tests for topics, posts and comments over HTTP."""

from uuid import uuid4

from tests.conftest import sign_in

TOPIC = {"name": "python", "description": "Everything about Python"}
POST = {"title": "Async generators", "content": "How do they compose?"}


def _create_post(client) -> str:
    client.post("/topics", json=TOPIC)
    response = client.post("/topics/python/posts", json=POST)
    assert response.status_code == 201
    return response.json()["redirect_to"].rsplit("/", 1)[-1]


class TestTopics:
    """Topic creation and listing."""

    def test_anonymous_create_is_unauthorized(self, client):
        response = client.post("/topics", json=TOPIC)

        assert response.status_code == 401
        assert response.json()["errors"] == {"formError": ["You have to login first!"]}

    def test_invalid_form_is_unprocessable(self, client):
        sign_in(client)

        response = client.post("/topics", json={"name": "Bad Name"})

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert errors["name"] == ["Must be lowercase letter without spaces"]
        assert "description" in errors

    def test_create_then_list(self, client):
        sign_in(client)
        # Render and cache the home page first
        assert client.get("/topics").json()["total"] == 0

        response = client.post("/topics", json=TOPIC)

        assert response.status_code == 201
        assert response.json()["redirect_to"] == "/topic/python"
        # The cached home page was invalidated
        topics = client.get("/topics").json()["topics"]
        assert [t["slug"] for t in topics] == ["python"]

    def test_duplicate_topic(self, client):
        sign_in(client)
        client.post("/topics", json=TOPIC)

        response = client.post("/topics", json=TOPIC)

        assert response.status_code == 400
        assert response.json()["failure"] == "storage"

    def test_unknown_topic_is_404(self, client):
        assert client.get("/topics/missing").status_code == 404


class TestPosts:
    """Post lifecycle."""

    def test_create_post_shows_on_topic_page(self, client):
        sign_in(client)
        client.post("/topics", json=TOPIC)
        assert client.get("/topics/python").json()["posts"] == []

        post_id = _create_post(client)

        posts = client.get("/topics/python").json()["posts"]
        assert [p["post_id"] for p in posts] == [post_id]
        assert client.get(f"/posts/{post_id}").json()["title"] == POST["title"]

    def test_edit_by_author(self, client):
        sign_in(client)
        post_id = _create_post(client)

        response = client.patch(
            f"/posts/{post_id}",
            json={"title": "Edited title", "content": "Edited content body"},
        )

        assert response.status_code == 200
        assert response.json()["redirect_to"] == f"/topic/python/posts/{post_id}"
        assert client.get(f"/posts/{post_id}").json()["title"] == "Edited title"

    def test_edit_by_other_user_is_forbidden(self, client):
        sign_in(client, "alice")
        post_id = _create_post(client)
        sign_in(client, "mallory")

        response = client.patch(f"/posts/{post_id}", json=POST)

        assert response.status_code == 403

    def test_delete_removes_post(self, client):
        sign_in(client)
        post_id = _create_post(client)
        client.post(f"/posts/{post_id}/comments", json={"content": "First!"})

        response = client.delete(f"/posts/{post_id}")

        assert response.status_code == 200
        assert response.json()["redirect_to"] == "/topic/python"
        assert client.get(f"/posts/{post_id}").status_code == 404
        assert client.get("/topics/python").json()["posts"] == []

    def test_delete_missing_post(self, client):
        sign_in(client)
        assert client.delete(f"/posts/{uuid4()}").status_code == 404

    def test_my_posts(self, client):
        sign_in(client, "alice")
        post_id = _create_post(client)
        client.post(f"/posts/{post_id}/comments", json={"content": "First!"})
        sign_in(client, "bob")
        client.post("/topics/python/posts", json=POST)
        sign_in(client, "alice")

        response = client.get("/auth/me/posts")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["posts"][0]["post_id"] == post_id
        assert data["posts"][0]["comment_count"] == 1

    def test_my_posts_requires_session(self, client):
        assert client.get("/auth/me/posts").status_code == 401

    def test_top_and_search(self, client):
        sign_in(client)
        post_id = _create_post(client)

        top = client.get("/posts/top").json()
        assert [p["post_id"] for p in top["posts"]] == [post_id]

        found = client.get("/posts/search", params={"term": "generators"}).json()
        assert found["total"] == 1
        assert client.get("/posts/search").json()["total"] == 0


class TestComments:
    """Threaded comments."""

    def test_reply_builds_thread(self, client):
        sign_in(client)
        post_id = _create_post(client)

        created = client.post(f"/posts/{post_id}/comments", json={"content": "Root"})
        assert created.status_code == 201
        root_id = client.get(f"/posts/{post_id}/comments").json()["comments"][0][
            "comment_id"
        ]
        client.post(
            f"/posts/{post_id}/comments",
            json={"content": "Reply", "parent_id": root_id},
        )

        data = client.get(f"/posts/{post_id}/comments").json()
        assert data["total"] == 2
        assert [(c["content"], c["depth"]) for c in data["comments"]] == [
            ("Root", 0),
            ("Reply", 1),
        ]

        thread = client.get(f"/posts/{post_id}/comments/{root_id}").json()
        assert thread["total"] == 2
        assert client.get(f"/posts/{post_id}").json()["comment_count"] == 2

    def test_anonymous_comment_is_unauthorized(self, client):
        sign_in(client)
        post_id = _create_post(client)
        client.post("/auth/logout")

        response = client.post(f"/posts/{post_id}/comments", json={"content": "Hi there"})

        assert response.status_code == 401

    def test_comments_of_missing_post(self, client):
        assert client.get(f"/posts/{uuid4()}/comments").status_code == 404

    def test_comment_refreshes_topic_page_count(self, client):
        sign_in(client)
        post_id = _create_post(client)
        # Render and cache the topic page first
        assert client.get("/topics/python").json()["posts"][0]["comment_count"] == 0

        client.post(f"/posts/{post_id}/comments", json={"content": "First!"})

        posts = client.get("/topics/python").json()["posts"]
        assert [p["comment_count"] for p in posts] == [1]

    def test_rejected_comment_keeps_cached_pages(self, client):
        sign_in(client)
        post_id = _create_post(client)
        before = client.get("/topics/python").json()

        response = client.post(f"/posts/{post_id}/comments", json={"content": "no"})

        assert response.status_code == 422
        assert client.get("/topics/python").json() == before
