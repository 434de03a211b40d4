from app.services.author_service import AuthorService
from app.services.post_service import PostService


def author_service() -> AuthorService:
    return AuthorService()


def post_service() -> PostService:
    return PostService()
