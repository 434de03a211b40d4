from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class PostStatus(str, Enum):
    PUBLISHED = "published"
    DRAFT = "draft"
    DELETED = "deleted"


class Post(BaseModel):
    id: int | None = None
    title: str
    content: str
    published_at: datetime | None = None
    status: PostStatus
    author: int

    model_config = ConfigDict(validate_assignment=True)

    def set_title(self, title: str) -> "Post":
        self.title = title
        return self

    def set_content(self, content: str) -> "Post":
        self.content = content
        return self

    def set_published_at(self, published_at: datetime | None) -> "Post":
        self.published_at = published_at
        return self

    def set_status(self, status: PostStatus) -> "Post":
        self.status = status
        return self

    def set_author(self, author: int) -> "Post":
        self.author = author
        return self

    def manage_published_at(self, now: datetime):
        """Derive ``published_at`` from ``status``.

        Called by the repository right before the post is written, never on
        plain attribute assignment.
        """
        if self.status == PostStatus.PUBLISHED:
            self.published_at = now
        elif self.status == PostStatus.DRAFT:
            if self.published_at is None:
                self.published_at = now
        elif self.status == PostStatus.DELETED:
            self.published_at = None
