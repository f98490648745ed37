import os

# Settings are read at import time: point the app at a throwaway database and
# cheap bcrypt rounds before anything from storefront is imported.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from storefront.database import get_session  # noqa: E402
from storefront.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share the same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. Tables are created per test and dropped afterwards, so uniqueness checks
#    (product name, user email) never see rows from another test
# 4. App dependency overridden to use test_engine (see client_fixture)
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session with freshly created tables"""
    from storefront.models.order_header import OrderHeader  # noqa: F401
    from storefront.models.payment import Payment  # noqa: F401
    from storefront.models.product import Product  # noqa: F401
    from storefront.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine, expire_on_commit=False) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session

    Override MUST be set BEFORE TestClient() and stay in place for the
    entire duration, so the app never uses its own engine.
    """
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="auth_client")
def auth_client_fixture(client: TestClient):
    """Test client carrying a valid token cookie"""
    response = client.post(
        "/api/auth/register",
        json={
            "name": "Ada",
            "last_name": "Lovelace",
            "phone": "555-0100",
            "email": "ada@example.com",
            "password": "secret123",
        },
    )
    assert response.status_code == 201
    response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert response.status_code == 200
    assert "token" in client.cookies
    return client
