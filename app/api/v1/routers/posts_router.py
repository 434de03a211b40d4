from json import JSONDecodeError

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app import deps
from app.api.authorization import authorize
from app.models.auth import Role, User
from app.models.response import Page, PostItemView
from app.schemas.post_schema import CreatePost, UpdatePost
from app.services.post_service import PostService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(
    page: int = Query(default=1, ge=1),
    post_status: str | None = Query(default=None, alias="status"),
    post_service: PostService = Depends(deps.post_service),
) -> Page:
    return post_service.get_posts(page, post_status)


async def create_post_body(
    request: Request, user: User = Depends(authorize(roles=[Role.ADMIN]))
) -> CreatePost:
    """Parse the create payload only after the caller is authorized."""
    try:
        return CreatePost.model_validate(await request.json())
    except JSONDecodeError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", exc.pos),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": exc.msg},
                }
            ]
        )
    except ValidationError as exc:
        raise RequestValidationError(
            [
                {**error, "loc": ("body", *error["loc"])}
                for error in exc.errors(include_url=False)
            ]
        )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    response: Response,
    create_model: CreatePost = Depends(create_post_body),
    post_service: PostService = Depends(deps.post_service),
) -> PostItemView:
    post = post_service.create_post(create_model.model_dump())
    response.headers["Location"] = f"/api/v1/posts/{post.id}"
    return post


@router.get("/{post_id}", status_code=status.HTTP_200_OK)
def get_post(
    post_id: int, post_service: PostService = Depends(deps.post_service)
) -> PostItemView:
    return post_service.get_post(post_id)


@router.put("/{post_id}", status_code=status.HTTP_200_OK)
def update_post(
    post_id: int,
    update_model: UpdatePost,
    post_service: PostService = Depends(deps.post_service),
) -> PostItemView:
    return post_service.update_post(
        post_id, update_model.model_dump(exclude_unset=True)
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int, post_service: PostService = Depends(deps.post_service)
) -> None:
    post_service.delete_post(post_id)
