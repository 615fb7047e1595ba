# app/exceptions.py
"""
Domain errors raised by the services and their translation to HTTP.

Services raise these; the handler registered in ``app.main`` is the only place
that turns them into status codes.
"""
import logging
from http import HTTPStatus
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the domain services."""
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details if details else message


class BadRequest(ServiceError):
    """Malformed or invalid identifier or field."""
    status_code = HTTPStatus.BAD_REQUEST


class NotFound(ServiceError):
    """No record matches the lookup."""
    status_code = HTTPStatus.NOT_FOUND


class Conflict(ServiceError):
    """A uniqueness constraint would be violated."""
    status_code = HTTPStatus.CONFLICT


class DependencyUnavailable(ServiceError):
    """A remote service could not answer."""
    status_code = HTTPStatus.SERVICE_UNAVAILABLE


def create_error_response(status_code: int, message: str, details: Optional[str], path: str) -> ErrorResponse:
    """Create a detailed error response"""
    status = HTTPStatus(status_code)
    return ErrorResponse(
        status=status.value,
        error=status.phrase,
        message=message,
        details=details if details else message,
        path=path,
    )


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    body = create_error_response(exc.status_code, exc.message, exc.details, request.url.path)
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, body.status, exc.details)
    return JSONResponse(status_code=body.status, content=body.model_dump())
