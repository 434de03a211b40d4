from datetime import datetime
from typing import Any

import pendulum
from pydantic import ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from app.models.camel_model import CamelModel
from app.models.post import PostStatus
from app.settings import Settings

TITLE_MAX_LENGTH = 128


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class PostWrite(CamelModel):
    """Fields a client may write. Only supplied fields are validated."""

    title: str | None = None
    content: str | None = None
    published_at: datetime | None = None
    status: PostStatus | None = None
    author: int | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("title")
    @classmethod
    def validate_title(cls, title: str | None) -> str:
        if _is_blank(title):
            raise PydanticCustomError("not_blank", "The title cannot be blank")
        if len(title) > TITLE_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long",
                "The title of the post must be less than 128 characters",
            )
        return title

    @field_validator("content")
    @classmethod
    def validate_content(cls, content: str | None) -> str:
        if _is_blank(content):
            raise PydanticCustomError("not_blank", "The content cannot be blank")
        return content

    @field_validator("published_at")
    @classmethod
    def validate_published_at(cls, published_at: datetime | None) -> datetime | None:
        if published_at is None:
            return None
        timezone = Settings().default_timezone
        today = pendulum.today(timezone)
        if pendulum.instance(published_at, tz=timezone) < today:
            raise PydanticCustomError(
                "greater_than_equal",
                "This value should be greater than or equal to {compared_value}.",
                {"compared_value": today.to_iso8601_string()},
            )
        return published_at

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, status: Any) -> Any:
        if _is_blank(status):
            raise PydanticCustomError("not_blank", "The status cannot be blank")
        if status not in tuple(choice.value for choice in PostStatus):
            raise PydanticCustomError(
                "choice", "The value you selected is not a valid choice."
            )
        return status

    @field_validator("author")
    @classmethod
    def validate_author(cls, author: int | None) -> int:
        if author is None:
            raise PydanticCustomError("not_null", "The author cannot be null")
        return author


class CreatePost(PostWrite):
    model_config = ConfigDict(extra="ignore", validate_default=True)


class UpdatePost(PostWrite):
    pass
