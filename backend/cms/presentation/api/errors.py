"""Exception handlers — translate every failure into the JSON envelope.

All error responses share the shape ``{"success": false, "message": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cms.domain.exceptions import (
    AuthenticationError,
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "Invalid request: " + "; ".join(problems) if problems else "Invalid request"


async def _validation_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))


async def _auth_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        headers={"WWW-Authenticate": "ApiKey"},
    )


async def _not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.entity_type} not found")


async def _conflict_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    return error_response(status.HTTP_409_CONFLICT, f"{exc.field.capitalize()} already exists")


async def _persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc.cause)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to {exc.operation}")


async def _http_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(exc.status_code, "API Endpoint not found")
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def _unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope handlers for every error kind to ``app``."""
    app.add_exception_handler(DomainValidationError, _validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(AuthenticationError, _auth_handler)
    app.add_exception_handler(EntityNotFoundError, _not_found_handler)
    app.add_exception_handler(DuplicateEntityError, _conflict_handler)
    app.add_exception_handler(PersistenceError, _persistence_handler)
    app.add_exception_handler(StarletteHTTPException, _http_handler)
    app.add_exception_handler(Exception, _unhandled_handler)
