from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr

from app.exceptions import PostNotFoundException, PostValidationException
from app.models.post import Post
from app.models.response import Page, PostCollectionView, PostItemView
from app.repositories.author_repository import AuthorRepository
from app.repositories.post_repository import PostRepository

ITEMS_PER_PAGE = 5


class PostService:
    ERROR_AUTHOR_NULL = "The author cannot be null"
    ERROR_POST_NOT_FOUND = "The requested post was not found"

    def __init__(self):
        self._logger = Logger(utc=True)
        self._author_repo = AuthorRepository()
        self._repo = PostRepository()

    def _ensure_author_exists(self, author_id: int):
        if not self._author_repo.get_author_by_id(author_id):
            self._logger.warning(f"Author not found: {author_id=}")
            raise PostValidationException(
                "author", "not_null", self.ERROR_AUTHOR_NULL, author_id
            )

    def get_post_by_id(self, post_id: int) -> Post:
        item = self._repo.get_post_by_id(post_id)
        if not item:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return Post(**item)

    def create_post(self, data: dict[str, Any]) -> PostItemView:
        self._ensure_author_exists(data["author"])
        post = self._repo.create_post(Post(**data))
        return PostItemView.model_validate(post)

    def delete_post(self, post_id: int):
        self.get_post_by_id(post_id)
        self._repo.delete_post(post_id)

    def get_post(self, post_id: int) -> PostItemView:
        return PostItemView.model_validate(self.get_post_by_id(post_id))

    def get_posts(self, page: int = 1, status: str | None = None) -> Page:
        items = self._repo.get_all_posts(
            Attr("status").eq(status) if status is not None else None
        )
        items.sort(key=lambda item: item["id"])
        offset = (page - 1) * ITEMS_PER_PAGE
        return Page(
            posts=[
                PostCollectionView.model_validate(item)
                for item in items[offset : offset + ITEMS_PER_PAGE]
            ],
            page=page,
            items_per_page=ITEMS_PER_PAGE,
            total_items=len(items),
        )

    def update_post(self, post_id: int, data: dict[str, Any]) -> PostItemView:
        post = self.get_post_by_id(post_id)
        if "author" in data:
            self._ensure_author_exists(data["author"])
        post = self._repo.update_post(post.model_copy(update=data))
        return PostItemView.model_validate(post)
