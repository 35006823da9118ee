"""End-to-end tests for registration and login."""

from tests.harness import create_client_fixture

client = create_client_fixture()


def register(client, username="alice", password="hunter22"):
    return client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
        },
    )


class TestAuthFlow:
    """End-to-end tests for password authentication."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_register_login_and_me(self, client):
        """A registered user can log in and read their own profile."""
        # Act
        registered = register(client)
        login = client.post(
            "/auth/login", json={"email": "ALICE@example.com", "password": "hunter22"}
        )
        token = login.json()["token"]
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert registered.status_code == 201
        assert login.status_code == 200
        assert me.status_code == 200
        assert me.json()["username"] == "alice"
        assert me.json()["email"] == "alice@example.com"

    def test_duplicate_username_conflicts(self, client):
        register(client)

        response = client.post(
            "/auth/register",
            json={"username": "alice", "email": "other@example.com", "password": "hunter22"},
        )

        assert response.status_code == 409

    def test_short_password_is_bad_request(self, client):
        response = register(client, password="123")

        assert response.status_code == 400

    def test_wrong_password_is_unauthorized(self, client):
        register(client)

        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "wrong-one"}
        )

        assert response.status_code == 401

    def test_me_requires_token(self, client):
        assert client.get("/auth/me").status_code == 401
        assert (
            client.get(
                "/auth/me", headers={"Authorization": "Bearer not-a-token"}
            ).status_code
            == 401
        )

    def test_change_password(self, client):
        token = register(client).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = client.put(
            "/auth/change-password",
            json={"current_password": "hunter22", "new_password": "correct-horse"},
            headers=headers,
        )
        old = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "hunter22"}
        )
        new = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "correct-horse"},
        )

        assert response.status_code == 200
        assert old.status_code == 401
        assert new.status_code == 200
