import uuid

import pendulum
import pytest

from app.jwt_bearer import JWTBearer
from app.models.auth import JWTToken
from app.repositories.author_repository import AuthorRepository
from app.repositories.post_repository import PostRepository
from app.repositories.sequence_repository import SequenceRepository
from app.services.author_service import AuthorService
from app.services.post_service import PostService


@pytest.fixture
def author_repository(initialize_tables) -> AuthorRepository:
    return AuthorRepository()


@pytest.fixture
def author_service() -> AuthorService:
    return AuthorService()


@pytest.fixture
def jwt_bearer() -> JWTBearer:
    return JWTBearer()


@pytest.fixture
def jwt_token(user_dict: dict) -> JWTToken:
    now = pendulum.now()
    return JWTToken(
        exp=now.add(years=1).int_timestamp,
        iat=now.int_timestamp,
        iss="https://localhost",
        jti=str(uuid.uuid4()),
        sub=user_dict["id"],
        user=user_dict,
    )


@pytest.fixture
def post_repository(initialize_tables) -> PostRepository:
    return PostRepository()


@pytest.fixture
def post_service() -> PostService:
    return PostService()


@pytest.fixture
def sequence_repository(sequences_table) -> SequenceRepository:
    return SequenceRepository()
