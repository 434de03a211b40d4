import pytest
from fastapi.testclient import TestClient

from app.http_handler import app
from tests.helpers.utils import generate_jwt_token


@pytest.fixture
def test_client(initialize_tables) -> TestClient:
    return TestClient(app, raise_server_exceptions=True)


@pytest.fixture
def admin_headers(user_dict: dict) -> dict[str, str]:
    jwt_token, _ = generate_jwt_token(pytest.jwt_secret, user_dict)
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def user_headers(user_dict_without_roles: dict) -> dict[str, str]:
    jwt_token, _ = generate_jwt_token(pytest.jwt_secret, user_dict_without_roles)
    return {"Authorization": f"Bearer {jwt_token}"}
