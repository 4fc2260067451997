"""API error contract

Every error response has the shape:

    {"error": {"code": "...", "message": "...", "details": {...}}}

details is present only for validation errors. Error.reason is logged and
never returned to the client.
"""

import logging
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Error

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "STORE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Request locations FastAPI puts first in a validation error's loc
_LOCATIONS = {"body", "query", "path", "header", "cookie"}
# Tags of discriminated unions that pydantic inserts into loc
_UNION_TAGS = {"rate", "touch"}


class ClientError(Exception):
    """
    Raised by routes to return a use case Error to the client

    Args:
        error: Error returned by the use case
        status_code: HTTP status; derived from the error code when omitted
    """

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST)


def error_body(error: Error) -> dict:
    body = {"code": error.code, "message": error.message}
    if error.details:
        body["details"] = error.details
    return {"error": body}


def _field_name(loc) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOCATIONS:
        parts = parts[1:]
    if parts and parts[0] in _UNION_TAGS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or "body"


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.error.reason:
        logger.warning(
            f"{request.method} {request.url.path} failed with {exc.error.code}: {exc.error.reason}"
        )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = {}
    for err in exc.errors():
        fields.setdefault(_field_name(err.get("loc", ())), err.get("msg", "is invalid"))
    error = Error(
        code="VALIDATION_ERROR",
        message="Invalid input: " + ", ".join(sorted(fields)),
        details={"fields": fields},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(error))


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    error = Error(code="STORE_ERROR", message="The request could not be completed")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(error))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
