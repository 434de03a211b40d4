import jwt
from aws_lambda_powertools import Logger
from fastapi import HTTPException, Request, status
from fastapi.security.http import HTTPAuthorizationCredentials
from fastapi.security.http import HTTPBearer as FastAPIHTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from jwt import ExpiredSignatureError, InvalidTokenError

from app.models.auth import JWTToken
from app.settings import Settings

logger = Logger(utc=True)

ERROR_MESSAGE_NOT_AUTHENTICATED = "Not authenticated"


class HTTPBearer(FastAPIHTTPBearer):
    def __init__(self, auto_error: bool = True):
        super().__init__(auto_error=auto_error)
        self._auto_error = auto_error

    def __call__(self, request: Request) -> HTTPAuthorizationCredentials | None:
        authorization = request.headers.get("Authorization")
        if not authorization:
            logger.info("Missing authentication header")
            return self._fail(ERROR_MESSAGE_NOT_AUTHENTICATED)
        scheme, credentials = get_authorization_scheme_param(authorization)
        if not (scheme and credentials):
            logger.warning(f"Missing {scheme=} or {credentials=}")
            return self._fail(ERROR_MESSAGE_NOT_AUTHENTICATED)
        if scheme.lower() != "bearer":
            logger.warning(f"Invalid {scheme=}")
            return self._fail("Invalid authentication credentials")
        return HTTPAuthorizationCredentials(scheme=scheme, credentials=credentials)

    def _fail(self, detail: str) -> None:
        if self._auto_error:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
        return None


class JWTBearer:
    def __init__(self, auto_error: bool = True):
        self._auto_error = auto_error

    def __call__(self, request: Request) -> JWTToken | None:
        credentials = HTTPBearer(self._auto_error).__call__(request)
        if not credentials:
            return None
        decoded_token = self._decode_token(credentials.credentials)
        if decoded_token is None and self._auto_error:
            logger.warning(f"Invalid authentication token {credentials=}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=ERROR_MESSAGE_NOT_AUTHENTICATED,
            )
        return decoded_token

    def _decode_token(self, token: str) -> JWTToken | None:
        try:
            return JWTToken(
                **jwt.decode(token, Settings().jwt_secret, algorithms=["HS256"])
            )
        except ExpiredSignatureError:
            logger.exception("Expired signature")
        except InvalidTokenError:
            logger.exception("Error occurred during token decoding")
        return None
