import boto3
from aws_lambda_powertools import Logger

from app.settings import Settings


class SequenceRepository:
    def __init__(self):
        self._logger = Logger(utc=True)
        settings = Settings()
        self._table = boto3.resource("dynamodb").Table(f"{settings.stage}-sequences")

    def next_value(self, name: str) -> int:
        response = self._table.update_item(
            Key={"name": name},
            UpdateExpression="ADD #value :increment",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":increment": 1},
            ReturnValues="UPDATED_NEW",
        )
        value = int(response["Attributes"]["value"])
        self._logger.debug(f"Sequence advanced {name=}, {value=}")
        return value
