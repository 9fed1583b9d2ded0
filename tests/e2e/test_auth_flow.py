"""End-to-end tests for authentication flow."""

from tests.conftest import sign_in


class TestAuthFlow:
    """End-to-end tests for GitHub OAuth authentication flow."""

    def test_login_redirects_to_github(self, client):
        response = client.get("/auth/login/github", follow_redirects=False)

        assert response.status_code == 302
        location = response.headers["location"]
        assert location.startswith("https://github.com/login/oauth/authorize")
        assert "state=" in location

    def test_callback_sets_cookie_and_redirects_to_frontend(self, client):
        response = client.get(
            "/auth/callback/github",
            params={"code": "alice", "state": "state"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "http://localhost:3000"
        set_cookie = response.headers["set-cookie"]
        assert "auth_token=" in set_cookie
        assert "HttpOnly" in set_cookie

    def test_me_without_cookie(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_me_after_login(self, client):
        sign_in(client, "alice")

        response = client.get("/auth/me")

        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["name"] == "Mock alice"

    def test_logout_clears_cookie(self, client):
        sign_in(client, "alice")

        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
