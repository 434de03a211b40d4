from typing import Any

from pydantic import BaseModel


class Role:
    ADMIN = "ROLE_ADMIN"


class JWTToken(BaseModel):
    exp: int
    iat: int
    iss: str | None = None
    jti: str
    sub: Any
    user: dict[str, Any] | None = None


class User(BaseModel):
    id: str
    name: str | None = None
    roles: list[str] = []
