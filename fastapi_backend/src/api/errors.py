"""
Error taxonomy for the API and the FastAPI handlers that turn it into responses.

Every error body has the shape ``{"detail": <message>, "code": <CODE>}``.
Database driver errors are logged with their traceback and answered with a
generic 500 so that driver messages never reach the caller.
"""
import logging
from typing import Any, Dict

import psycopg2
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

GENERIC_INTERNAL_MESSAGE = "Internal server error"


class APIError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "API_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "code": self.code}


class ValidationError(APIError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class NotFoundError(APIError):
    """No row matched the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")


class AuthenticationError(APIError):
    """Unknown user or wrong password. Both cases share one message."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InternalError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"

    def __init__(self, message: str = GENERIC_INTERNAL_MESSAGE):
        super().__init__(message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def database_error_handler(request: Request, exc: psycopg2.Error) -> JSONResponse:
    logger.error(
        "Database error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures on body/query/path are reported as 400 with the offending fields."""
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        fields.append(".".join(loc) or "request")
    message = "Invalid or missing fields: " + ", ".join(dict.fromkeys(fields)) if fields else "Invalid request"
    error = ValidationError(message)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unexpected error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# PUBLIC_INTERFACE
def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler of this module to the app."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(psycopg2.Error, database_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
