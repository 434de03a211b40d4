import os
import random

import boto3
import pendulum
import pytest
from moto import mock_aws

from app.models.author import Author
from app.models.post import Post, PostStatus
from app.settings import Settings


def pytest_configure():
    os.environ.setdefault("APP_NAME", "post-api")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_DEFAULT_REGION", "eu-central-1")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    os.environ.setdefault("DEFAULT_TIMEZONE", "UTC")
    os.environ.setdefault("JWT_SECRET_SSM_PARAM_NAME", "/test/jwt-secret")
    os.environ.setdefault("STAGE", "test")
    pytest.jwt_secret = "6fl3AkTFmG2rVveLglUW8DOmp8J4Bvi3"


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def aws(settings: Settings):
    with mock_aws():
        boto3.client("ssm").put_parameter(
            Name=settings.jwt_secret_ssm_param_name,
            Value=pytest.jwt_secret,
            Type="SecureString",
        )
        yield


@pytest.fixture
def dynamodb_resource(aws):
    return boto3.resource("dynamodb")


def _create_table(dynamodb_resource, name: str, key: str, key_type: str):
    return dynamodb_resource.create_table(
        TableName=name,
        AttributeDefinitions=[{"AttributeName": key, "AttributeType": key_type}],
        KeySchema=[{"AttributeName": key, "KeyType": "HASH"}],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def authors_table(dynamodb_resource, settings: Settings):
    return _create_table(dynamodb_resource, f"{settings.stage}-authors", "id", "N")


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return _create_table(dynamodb_resource, f"{settings.stage}-posts", "id", "N")


@pytest.fixture
def sequences_table(dynamodb_resource, settings: Settings):
    return _create_table(dynamodb_resource, f"{settings.stage}-sequences", "name", "S")


@pytest.fixture
def authors(faker) -> list[Author]:
    return [Author(id=author_id, name=faker.name()) for author_id in (1, 2)]


@pytest.fixture
def make_post(faker, authors: list[Author]):
    def make(post_id: int | None = None, status: PostStatus = PostStatus.PUBLISHED) -> Post:
        return Post(
            id=post_id,
            title=faker.sentence(),
            content=faker.text(),
            published_at=None if status == PostStatus.DELETED else pendulum.now("UTC"),
            status=status,
            author=random.choice(authors).id,
        )

    return make


@pytest.fixture
def posts(make_post) -> list[Post]:
    statuses = [PostStatus.PUBLISHED, PostStatus.DRAFT, PostStatus.DELETED]
    return [make_post(post_id, statuses[post_id % 3]) for post_id in range(1, 13)]


@pytest.fixture
def initialize_tables(
    authors: list[Author],
    authors_table,
    posts: list[Post],
    posts_table,
    sequences_table,
):
    with authors_table.batch_writer() as batch:
        for author in authors:
            batch.put_item(Item=author.model_dump())
    with posts_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item=post.model_dump(mode="json"))
    sequences_table.put_item(Item={"name": "posts", "value": len(posts)})


@pytest.fixture
def user_dict(faker) -> dict:
    return {"id": faker.uuid4(), "name": faker.name(), "roles": ["ROLE_ADMIN"]}


@pytest.fixture
def user_dict_without_roles(user_dict: dict) -> dict:
    return {**user_dict, "roles": []}
