"""Exception handlers mapping errors to HTTP responses.

Every error body has the shape ``{"kind": ..., "message": ...}`` where
``kind`` is stable and machine-checkable.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portal.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DependencyError,
    DomainError,
    EventFullError,
    NotFoundError,
    PendingApprovalError,
    PollError,
    ValidationError,
)

# Most specific class first
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (PollError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (EventFullError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PendingApprovalError, status.HTTP_403_FORBIDDEN),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DependencyError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_code_for(error: DomainError) -> int:
    for error_type, code in STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"kind": kind, "message": message}
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_code_for(exc)
    if code >= 500:
        logfire.error("Request failed", kind=exc.kind, path=request.url.path)
    else:
        logfire.info("Request rejected", kind=exc.kind, path=request.url.path)
    return error_response(code, exc.kind, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/query/path schema failures become 400 validation errors.

    Only field locations and messages are echoed, never submitted values.
    """
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        ValidationError.kind,
        "; ".join(problems) or "Invalid request",
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler. Storage failures surface as dependency errors."""
    if isinstance(exc, SQLAlchemyError):
        logfire.error("Storage failure", path=request.url.path, error=type(exc).__name__)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            DependencyError.kind,
            "A storage error occurred",
        )
    logfire.error("Unhandled error", path=request.url.path, error=type(exc).__name__)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Handlers for ``Exception`` run outside the request container, so the
    request's session has already been rolled back when they respond.
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
