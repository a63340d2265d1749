"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.errors import (
    NOT_FOUND,
    VALIDATION_ERROR,
    DomainValidationError,
    NotFoundError,
)
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` pairs."""
    messages = []
    for error in exc.errors():
        # Drop the leading "body"/"path" location segment
        location = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        VALIDATION_ERROR,
    )


def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = _describe_validation_errors(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, detail)
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        detail,
        VALIDATION_ERROR,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def register_exception_handlers(app):
    """Register domain and request validation exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
