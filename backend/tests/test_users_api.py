"""HTTP surface of /api/users (cookie-protected)."""

from fastapi.testclient import TestClient

GRACE = {
    "name": "Grace",
    "last_name": "Hopper",
    "phone": "555-0199",
    "email": "grace@example.com",
    "password": "cobol1959",
}


def _create(client: TestClient, **overrides) -> dict:
    response = client.post("/api/users", json={**GRACE, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestUsersApi:
    def test_create_never_exposes_password(self, auth_client: TestClient):
        user = _create(auth_client)
        assert user["email"] == "grace@example.com"
        assert "password" not in user

    def test_list_includes_registered_user(self, auth_client: TestClient):
        _create(auth_client)
        emails = [u["email"] for u in auth_client.get("/api/users").json()["data"]]
        assert emails == ["ada@example.com", "grace@example.com"]
        assert all("password" not in u for u in auth_client.get("/api/users").json()["data"])

    def test_get_by_email(self, auth_client: TestClient):
        _create(auth_client)
        response = auth_client.get("/api/users/email/grace@example.com")
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Grace"

    def test_get_by_unknown_email(self, auth_client: TestClient):
        response = auth_client.get("/api/users/email/nobody@example.com")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_duplicate_email(self, auth_client: TestClient):
        response = auth_client.post("/api/users", json={**GRACE, "email": "ada@example.com"})
        assert response.status_code == 400
        assert response.json()["message"] == "Error creating user: Email already exists"

    def test_invalid_email(self, auth_client: TestClient):
        response = auth_client.post("/api/users", json={**GRACE, "email": "grace"})
        assert response.status_code == 400
        assert response.json()["message"] == "Error creating user: Invalid email format"

    def test_update_phone_only(self, auth_client: TestClient):
        user = _create(auth_client)
        response = auth_client.put(f"/api/users/{user['id_user']}", json={"phone": "555-0000"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["phone"] == "555-0000"
        assert data["email"] == "grace@example.com"

    def test_updated_password_works_for_login(self, auth_client: TestClient):
        user = _create(auth_client)
        auth_client.put(f"/api/users/{user['id_user']}", json={"password": "flowmatic"})

        response = auth_client.post("/api/auth/login", json={"email": "grace@example.com", "password": "flowmatic"})
        assert response.status_code == 200

    def test_update_unknown(self, auth_client: TestClient):
        assert auth_client.put("/api/users/999", json={"phone": "1"}).status_code == 404

    def test_soft_and_hard_delete(self, auth_client: TestClient):
        soft = _create(auth_client)
        hard = _create(auth_client, email="hard@example.com")

        assert auth_client.delete(f"/api/users/{soft['id_user']}").status_code == 200
        assert auth_client.get(f"/api/users/{soft['id_user']}").status_code == 404

        response = auth_client.delete(f"/api/users/{hard['id_user']}/hard")
        assert response.status_code == 200
        assert response.json()["data"]["email"] == "hard@example.com"
        assert auth_client.delete(f"/api/users/{hard['id_user']}/hard").status_code == 404
