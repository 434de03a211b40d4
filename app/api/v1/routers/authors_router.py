from fastapi import APIRouter, Depends, status

from app import deps
from app.models.response import AuthorView
from app.services.author_service import AuthorService

router = APIRouter()


@router.get("/{author_id}", status_code=status.HTTP_200_OK)
def get_author(
    author_id: int, author_service: AuthorService = Depends(deps.author_service)
) -> AuthorView:
    return author_service.get_author(author_id)
