from datetime import datetime

from app.models.camel_model import CamelModel
from app.models.post import PostStatus


class PostCollectionView(CamelModel):
    id: int
    title: str
    published_at: datetime | None = None
    status: PostStatus
    author: int


class PostItemView(PostCollectionView):
    content: str


class Page(CamelModel):
    posts: list[PostCollectionView]
    page: int
    items_per_page: int
    total_items: int


class AuthorPost(CamelModel):
    id: int
    title: str


class AuthorView(CamelModel):
    id: int
    name: str
    posts: list[AuthorPost]
