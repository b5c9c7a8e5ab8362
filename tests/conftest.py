import os
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("RATE_LIMITING_ENABLED", "false")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")
os.environ.setdefault("LOG_DIR", "./test-logs")

from observatory.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from observatory.app import app  # noqa: E402
from observatory.controllers import UserController  # noqa: E402
from observatory.database import Base, SessionLocal, engine  # noqa: E402
from observatory.models import RoleEnum, UserStatus  # noqa: E402
from observatory.stores import SqlUserStore  # noqa: E402

PASSWORD = "Passw0rd!"


@pytest.fixture(autouse=True, scope="function")
def _create_test_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Generator:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session) -> Callable[..., dict]:
    """Create an account directly, bypassing the guest-only registration route."""

    users = UserController(SqlUserStore(db_session))

    def factory(email: str, role: RoleEnum = RoleEnum.MEMBER, status: UserStatus = UserStatus.ACTIVE) -> dict:
        return users.create_user(
            {
                "name": email.split("@")[0].title(),
                "email": email,
                "password": PASSWORD,
                "role": role.value,
                "status": status.value,
            }
        )

    return factory


@pytest.fixture()
def login(client) -> Callable[[str], dict]:
    def auth_header(email: str, password: str = PASSWORD) -> dict:
        response = client.post(
            "/auth/login",
            data={"username": email, "password": password},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return auth_header
