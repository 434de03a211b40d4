from aws_lambda_powertools import Logger
from fastapi import Depends

from app.exceptions import NotAuthorizedException
from app.jwt_bearer import JWTBearer
from app.models.auth import JWTToken, User

ERROR_MESSAGE_NOT_AUTHORIZED = "Not authorized"

logger = Logger(utc=True)

jwt_bearer = JWTBearer()


def authorize(roles: list[str]):
    """Build a dependency that admits only tokens whose user holds all ``roles``.

    Declared as a route dependency so it runs before the request body is
    validated.
    """

    def dependency(token: JWTToken = Depends(jwt_bearer)) -> User:
        user = User(**(token.user or {"id": str(token.sub)}))
        if not all(role in user.roles for role in roles):
            logger.warning(f"The {user=} does not have the appropriate {roles=}")
            raise NotAuthorizedException(ERROR_MESSAGE_NOT_AUTHORIZED)
        return user

    return dependency
