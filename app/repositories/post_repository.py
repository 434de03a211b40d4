from typing import Any

import boto3
import pendulum
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, ConditionBase

from app.models.post import Post
from app.repositories.sequence_repository import SequenceRepository
from app.settings import Settings

POSTS_SEQUENCE = "posts"


class PostRepository:
    def __init__(self):
        self._logger = Logger(utc=True)
        settings = Settings()
        self._table = boto3.resource("dynamodb").Table(f"{settings.stage}-posts")
        self._sequence_repository = SequenceRepository()

    def _flush(self, post: Post) -> dict[str, Any]:
        post.manage_published_at(pendulum.now("UTC"))
        return post.model_dump(mode="json")

    def create_post(self, post: Post) -> Post:
        post.id = self._sequence_repository.next_value(POSTS_SEQUENCE)
        self._table.put_item(
            Item=self._flush(post),
            ConditionExpression=Attr("id").not_exists(),
        )
        self._logger.info(f"Post created {post.id=}")
        return post

    def update_post(self, post: Post) -> Post:
        data = self._flush(post)
        post_id = data.pop("id")
        attr_names = {f"#{k}": k for k in data}
        attr_values = {f":{k}": v for k, v in data.items()}
        update_expr = ", ".join(f"#{k}=:{k}" for k in data)
        self._table.update_item(
            Key={"id": post_id},
            ConditionExpression=Attr("id").exists(),
            UpdateExpression=f"SET {update_expr}",
            ExpressionAttributeNames=attr_names,
            ExpressionAttributeValues=attr_values,
        )
        self._logger.info(f"Post updated {post_id=}")
        return post

    def delete_post(self, post_id: int):
        self._table.delete_item(Key={"id": post_id})
        self._logger.info(f"Post deleted {post_id=}")

    def get_post_by_id(self, post_id: int) -> dict | None:
        response = self._table.get_item(Key={"id": post_id})
        return response.get("Item")

    def get_all_posts(
        self, filter_expression: ConditionBase | None = None
    ) -> list[dict[str, Any]]:
        kwargs = {"FilterExpression": filter_expression}
        kwargs = {k: v for k, v in kwargs.items() if v is not None}
        response = self._table.scan(**kwargs)
        items = response["Items"]
        while "LastEvaluatedKey" in response:
            response = self._table.scan(
                ExclusiveStartKey=response["LastEvaluatedKey"], **kwargs
            )
            items.extend(response["Items"])
        return items

    def get_posts_by_author(self, author_id: int) -> list[dict[str, Any]]:
        return self.get_all_posts(Attr("author").eq(author_id))
