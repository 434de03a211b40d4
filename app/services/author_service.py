from aws_lambda_powertools import Logger

from app.exceptions import AuthorNotFoundException
from app.models.author import Author
from app.models.response import AuthorPost, AuthorView
from app.repositories.author_repository import AuthorRepository
from app.repositories.post_repository import PostRepository


class AuthorService:
    ERROR_AUTHOR_NOT_FOUND = "The requested author was not found"

    def __init__(self):
        self._logger = Logger(utc=True)
        self._author_repo = AuthorRepository()
        self._post_repo = PostRepository()

    def get_author(self, author_id: int) -> AuthorView:
        item = self._author_repo.get_author_by_id(author_id)
        if not item:
            self._logger.warning(f"Author not found: {author_id=}")
            raise AuthorNotFoundException(self.ERROR_AUTHOR_NOT_FOUND)
        author = Author(**item)
        posts = sorted(
            self._post_repo.get_posts_by_author(author.id), key=lambda p: p["id"]
        )
        return AuthorView(
            id=author.id,
            name=author.name,
            posts=[AuthorPost(id=post["id"], title=post["title"]) for post in posts],
        )
