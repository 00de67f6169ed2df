"""Exception handlers translating failures into the error envelope.

This is the only place where an error kind is mapped to an HTTP status.
Every service registers the same handlers, so the mapping is identical
across accounts, loans and cards:

- ValidationFailedException / request parsing errors -> 400 with violations
- ResourceNotFoundException -> 404
- ResourceAlreadyExistsException -> 409
- any other DomainException -> 400
- storage errors and anything unclassified -> 500 with a generic message
"""

from datetime import datetime, timezone
from typing import Iterable

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.domain.exceptions import (
    DomainException,
    FieldViolation,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationFailedException,
)
from src.presentation.schemas import ErrorResponseSchema, ViolationSchema
from .request_context import RequestContextMiddleware, request_id_for

logger = structlog.get_logger(__name__)

ERROR_STATUS: dict[type[DomainException], int] = {
    ValidationFailedException: 400,
    ResourceNotFoundException: 404,
    ResourceAlreadyExistsException: 409,
}

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."

_REQUEST_SECTIONS = {"body", "query", "path", "header", "cookie"}


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception."""
    for exc_type, status_code in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return status_code
    return 400


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    violations: Iterable[FieldViolation] | None = None,
) -> JSONResponse:
    """Build the uniform error envelope."""
    request_id = request_id_for(request)
    body = ErrorResponseSchema(
        error=code,
        message=message,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
        request_id=request_id,
        violations=(
            [ViolationSchema(field=v.field, reason=v.reason) for v in violations]
            if violations is not None
            else None
        ),
    )
    headers = {RequestContextMiddleware.HEADER_NAME: request_id} if request_id else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def violations_from_request_errors(errors: Iterable[dict]) -> list[FieldViolation]:
    """Turn framework parsing errors into field violations."""
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _REQUEST_SECTIONS:
            loc = loc[1:]
        violations.append(
            FieldViolation(field=".".join(loc) or "body", reason=error.get("msg", "invalid"))
        )
    return violations


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(ValidationFailedException)
    async def validation_failed_handler(
        request: Request,
        exc: ValidationFailedException,
    ) -> JSONResponse:
        """Handle rule violations raised by the validation gate."""
        logger.info(
            "validation_failed",
            request_id=request_id_for(request),
            fields=[v.field for v in exc.violations],
        )
        return error_response(request, 400, exc.code, exc.message, exc.violations)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request bodies and parameters that fail to parse."""
        violations = violations_from_request_errors(exc.errors())
        logger.info(
            "request_parsing_failed",
            request_id=request_id_for(request),
            fields=[v.field for v in violations],
        )
        failure = ValidationFailedException(violations)
        return error_response(request, 400, failure.code, failure.message, violations)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle not-found, conflict and other domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=request_id_for(request),
            code=exc.code,
            message=exc.message,
        )
        return error_response(request, status_for(exc), exc.code, exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Handle storage failures without exposing their detail."""
        logger.error(
            "storage_error",
            request_id=request_id_for(request),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(request, 500, INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=request_id_for(request),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(request, 500, INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE)
