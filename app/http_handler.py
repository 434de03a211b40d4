import uuid
from typing import Any, Sequence

import uvicorn
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.logger import set_package_logger
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import UJSONResponse
from mangum import Mangum

from app.api.v1.api import router as api_v1_router
from app.middlewares import CorrelationIdMiddleware
from app.models.camel_model import CamelModel
from app.settings import Settings

settings = Settings()

if settings.debug:
    set_package_logger()

logger = Logger(utc=True)

ERROR_MESSAGE_VALIDATION = "Validation error"

app = FastAPI(debug=settings.debug, title="PostApiApplication", version="1.0.0")
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(GZipMiddleware)
app.include_router(api_v1_router)

handler = Mangum(app)
handler = logger.inject_lambda_context(handler, clear_state=True, log_event=True)


class ErrorResponse(CamelModel):
    status: int
    id: uuid.UUID
    message: str


class ValidationErrorResponse(ErrorResponse):
    errors: Sequence[Any]


def _error_response(
    status_code: int, message: str, errors: Sequence[Any] | None = None
) -> UJSONResponse:
    error_id = uuid.uuid4()
    if errors is None:
        body = ErrorResponse(status=status_code, id=error_id, message=message)
    else:
        body = ValidationErrorResponse(
            status=status_code, id=error_id, message=message, errors=errors
        )
    logger.exception(f"Responding with error {status_code=}, {error_id=}")
    return UJSONResponse(content=jsonable_encoder(body), status_code=status_code)


@app.exception_handler(BotoCoreError)
@app.exception_handler(ClientError)
async def botocore_error_handler(
    request: Request, error: BotoCoreError
) -> UJSONResponse:
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(error) if settings.debug else "Internal Server Error",
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(
    request: Request, error: HTTPException
) -> UJSONResponse:
    return _error_response(error.status_code, error.detail)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> UJSONResponse:
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, ERROR_MESSAGE_VALIDATION, error.errors()
    )


if __name__ == "__main__":
    uvicorn.run("app.http_handler:app", host="localhost", port=8080, reload=True)
