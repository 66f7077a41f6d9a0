"""
Error handling middleware and exception handlers.

Every failure leaving a route ends up in ``normalize_exception``, which
turns it into one of two payloads:

- a ``{field: message}`` map (status 400) for validation failures, whether
  they come from request binding or from the service-level validators;
- an ``ErrorResponseSchema`` for domain errors and unexpected faults.

Specific kinds are registered as FastAPI exception handlers; anything
else is caught by ``UnhandledErrorMiddleware`` and reported as a 500.
"""

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.core.metrics import record_error_response
from src.domain.exceptions import (
    AlreadyExistsException,
    DomainException,
    ResourceNotFoundException,
    ValidationFailedException,
)
from src.presentation.schemas import ErrorResponseSchema
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

_LOCATION_KINDS = {"body", "query", "path", "header", "cookie"}


def request_validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Collapse binding errors into a field -> message map (last write wins)."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        kind = loc.pop(0) if loc and loc[0] in _LOCATION_KINDS else None
        # Malformed JSON is located by character offset, not by field.
        if error.get("type") == "json_invalid" or all(isinstance(part, int) for part in loc):
            loc = []
        field = ".".join(str(part) for part in loc) or kind or "request"
        errors[field] = error.get("msg", "Invalid value")
    return errors


def error_response(
    request: Request,
    error_status: HTTPStatus,
    message: str,
) -> JSONResponse:
    """Build the error payload for the current request."""
    payload = ErrorResponseSchema(
        api_path=f"uri={request.url.path}",
        error_code=error_status.name,
        error_message=message,
        error_time=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=error_status.value,
        content=payload.model_dump(mode="json", by_alias=True),
    )


def normalize_exception(request: Request, exc: Exception) -> JSONResponse:
    """
    Map any exception raised while serving a request to a response.

    More specific kinds are checked first; the 500 branch only runs
    when nothing else matches.
    """
    if isinstance(exc, RequestValidationError):
        errors = request_validation_errors(exc)
        logger.info("request_validation_failed", request_id=get_request_id(), fields=sorted(errors))
        record_error_response("validation", HTTPStatus.BAD_REQUEST.value)
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST.value, content=errors)

    if isinstance(exc, ValidationFailedException):
        errors = exc.to_field_map()
        logger.info("field_validation_failed", request_id=get_request_id(), fields=sorted(errors))
        record_error_response("validation", HTTPStatus.BAD_REQUEST.value)
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST.value, content=errors)

    if isinstance(exc, ResourceNotFoundException):
        logger.warning("resource_not_found", request_id=get_request_id(), message=exc.message)
        record_error_response("not_found", HTTPStatus.NOT_FOUND.value)
        return error_response(request, HTTPStatus.NOT_FOUND, exc.message)

    if isinstance(exc, AlreadyExistsException):
        logger.warning("resource_already_exists", request_id=get_request_id(), message=exc.message)
        record_error_response("already_exists", HTTPStatus.BAD_REQUEST.value)
        return error_response(request, HTTPStatus.BAD_REQUEST, exc.message)

    if isinstance(exc, DomainException):
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        record_error_response("domain", HTTPStatus.BAD_REQUEST.value)
        return error_response(request, HTTPStatus.BAD_REQUEST, exc.message)

    logger.exception(
        "unhandled_exception",
        request_id=get_request_id(),
        error=str(exc),
        error_type=type(exc).__name__,
    )
    record_error_response("unhandled", HTTPStatus.INTERNAL_SERVER_ERROR.value)
    return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, str(exc))


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns exceptions no handler claimed into the 500 error payload."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return normalize_exception(request, exc)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Call before adding the logging and request-context middleware so
    the fallback sits innermost and they see its 500 responses.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request binding errors."""
        return normalize_exception(request, exc)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle validation, not-found and already-exists errors."""
        return normalize_exception(request, exc)

    app.add_middleware(UnhandledErrorMiddleware)
