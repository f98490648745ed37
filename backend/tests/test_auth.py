"""Password hashing, access tokens, AuthService and the /api/auth routes."""

from datetime import timedelta

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from storefront.config import JWT_ALGORITHM
from storefront.repositories.users import UserRepository
from storefront.security import create_access_token, decode_access_token, hash_password, verify_password
from storefront.services.auth_service import AuthService
from storefront.services.errors import AuthenticationError, ConflictError, ValidationError

ADA = ("Ada", "Lovelace", "555-0100", "ada@example.com", "secret123")


class TestPasswords:
    def test_hash_verifies(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_hashes_are_salted(self):
        assert hash_password("secret123") != hash_password("secret123")

    def test_garbage_hash_does_not_verify(self):
        assert not verify_password("secret123", "plaintext")
        assert not verify_password("secret123", None)
        assert not verify_password("", hash_password("secret123"))


class TestTokens:
    def test_round_trip(self):
        claims = decode_access_token(create_access_token({"id": 3, "email": "a@b.co"}))
        assert claims["id"] == 3
        assert claims["email"] == "a@b.co"
        assert "exp" in claims

    def test_missing(self):
        with pytest.raises(AuthenticationError, match="Token not provided"):
            decode_access_token(None)

    def test_expired(self):
        token = create_access_token({"id": 1}, expires_delta=timedelta(seconds=-5))
        with pytest.raises(AuthenticationError, match="Token has expired"):
            decode_access_token(token)

    def test_wrong_signature(self):
        forged = jwt.encode({"id": 1}, "another-secret-of-reasonable-length-000", algorithm=JWT_ALGORITHM)
        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(forged)

    def test_malformed(self):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token("not.a.jwt")


class TestAuthService:
    @pytest.fixture
    def service(self, session: Session) -> AuthService:
        return AuthService(UserRepository(session))

    def test_register_returns_profile_and_token(self, service: AuthService):
        result = service.register(*ADA)

        assert set(result) == {"id", "name", "last_name", "phone", "email", "token"}
        assert decode_access_token(result["token"])["id"] == result["id"]

    def test_register_stores_hash(self, service: AuthService, session: Session):
        result = service.register(*ADA)
        stored = UserRepository(session).find_by_id(result["id"])
        assert stored.password != "secret123"
        assert verify_password("secret123", stored.password)

    def test_register_duplicate(self, service: AuthService):
        service.register(*ADA)
        with pytest.raises(ConflictError, match="^Error registering user: Email is already registered$"):
            service.register(*ADA)

    def test_register_validates(self, service: AuthService):
        with pytest.raises(ValidationError, match="Invalid email format"):
            service.register("Ada", "Lovelace", None, "ada-at-example", "secret123")
        with pytest.raises(ValidationError, match="at least 6 characters"):
            service.register("Ada", "Lovelace", None, "ada@example.com", "abc")
        with pytest.raises(ValidationError, match="are required fields"):
            service.register("Ada", "", None, "ada@example.com", "secret123")

    def test_login(self, service: AuthService):
        registered = service.register(*ADA)
        user, token = service.login("ada@example.com", "secret123")

        assert user.id_user == registered["id"]
        assert decode_access_token(token)["email"] == "ada@example.com"

    def test_login_unknown_user(self, service: AuthService):
        with pytest.raises(AuthenticationError, match="^Error logging in: User not found$"):
            service.login("ghost@example.com", "secret123")

    def test_login_wrong_password(self, service: AuthService):
        service.register(*ADA)
        with pytest.raises(AuthenticationError, match="^Error logging in: Incorrect password$"):
            service.login("ada@example.com", "wrong-password")

    def test_verify_token(self, service: AuthService):
        token = service.register(*ADA)["token"]
        assert service.verify_token(token)["email"] == "ada@example.com"


REGISTER_BODY = {
    "name": "Ada",
    "last_name": "Lovelace",
    "phone": "555-0100",
    "email": "ada@example.com",
    "password": "secret123",
}


class TestAuthRoutes:
    def test_register(self, client: TestClient):
        response = client.post("/api/auth/register", json=REGISTER_BODY)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["user"]["email"] == "ada@example.com"
        assert "password" not in body["user"]
        assert body["token"]

    def test_register_duplicate(self, client: TestClient):
        client.post("/api/auth/register", json=REGISTER_BODY)
        response = client.post("/api/auth/register", json=REGISTER_BODY)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Error registering user: Email is already registered",
        }

    def test_login_sets_cookie_and_hides_password(self, client: TestClient):
        client.post("/api/auth/register", json=REGISTER_BODY)
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == "ada@example.com"
        assert "password" not in body["user"]
        assert response.cookies["token"] == body["token"]
        assert "httponly" in response.headers["set-cookie"].lower()

    def test_login_wrong_password(self, client: TestClient):
        client.post("/api/auth/register", json=REGISTER_BODY)
        response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "nope-nope"})

        assert response.status_code == 401
        assert response.json()["message"] == "Error logging in: Incorrect password"

    def test_login_unknown_user(self, client: TestClient):
        response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
        assert response.status_code == 401
        assert response.json()["message"] == "Error logging in: User not found"

    def test_check_with_cookie(self, auth_client: TestClient):
        response = auth_client.get("/api/auth/check")
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "ada@example.com"

    def test_check_without_cookie(self, client: TestClient):
        response = client.get("/api/auth/check")
        assert response.status_code == 401
        assert response.json()["message"] == "Not authenticated"

    def test_check_with_bad_cookie(self, client: TestClient):
        client.cookies.set("token", "garbage")
        response = client.get("/api/auth/check")
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_logout_clears_cookie(self, auth_client: TestClient):
        response = auth_client.post("/api/auth/logout")
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "max-age=0" in response.headers["set-cookie"].lower()


class TestProtectedRouters:
    @pytest.mark.parametrize("path", ["/api/users", "/api/orders", "/api/payments"])
    def test_missing_cookie_is_forbidden(self, client: TestClient, path):
        response = client.get(path)
        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Token not provided"}

    @pytest.mark.parametrize("path", ["/api/users", "/api/orders", "/api/payments"])
    def test_invalid_cookie_is_unauthorized(self, client: TestClient, path):
        client.cookies.set("token", "not-a-token")
        response = client.get(path)
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_expired_cookie_is_unauthorized(self, client: TestClient):
        client.cookies.set("token", create_access_token({"id": 1}, expires_delta=timedelta(seconds=-5)))
        assert client.get("/api/orders").status_code == 401

    def test_products_are_public(self, client: TestClient):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json()["data"] == []
