from typing import Any

from fastapi import HTTPException, status
from fastapi.exceptions import RequestValidationError


class AuthorNotFoundException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class NotAuthorizedException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_403_FORBIDDEN, detail=detail)


class PostNotFoundException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class PostValidationException(RequestValidationError):
    """Constraint violation detected after the request body was parsed."""

    def __init__(self, field: str, error_type: str, message: str, value: Any = None):
        super().__init__(
            [{"type": error_type, "loc": ("body", field), "msg": message, "input": value}]
        )
