import boto3
from aws_lambda_powertools import Logger

from app.settings import Settings


class AuthorRepository:
    def __init__(self):
        self._logger = Logger(utc=True)
        settings = Settings()
        self._table = boto3.resource("dynamodb").Table(f"{settings.stage}-authors")

    def get_author_by_id(self, author_id: int) -> dict | None:
        response = self._table.get_item(Key={"id": author_id})
        return response.get("Item")
