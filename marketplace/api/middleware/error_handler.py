"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace.config.logging import get_logger
from marketplace.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def _error_response(
    status_code: int, error: str, message, error_type: str, headers: dict = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "type": error_type},
        headers=headers,
    )


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return _error_response(400, "Validation Error", str(exc), "validation_error")

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.warning(
            "Request validation error", errors=exc.errors(), path=request.url.path
        )
        return _error_response(
            400,
            "Validation Error",
            "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            ),
            "validation_error",
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.warning("Not found", error=str(exc), path=request.url.path)
        return _error_response(404, "Not Found", str(exc), "not_found")

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.warning("Authentication failed", error=str(exc), path=request.url.path)
        return _error_response(
            401,
            "Unauthorized",
            str(exc),
            "authentication_error",
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationError)
    async def authorization_error_handler(request: Request, exc: AuthorizationError):
        logger.warning("Authorization denied", error=str(exc), path=request.url.path)
        return _error_response(403, "Forbidden", str(exc), "authorization_error")

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        logger.warning("Conflict", error=str(exc), path=request.url.path)
        return _error_response(409, "Conflict", str(exc), "conflict_error")

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        return _error_response(
            500, "Database Error", "A database error occurred", "database_error"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(
            exc.status_code, "HTTP Error", exc.detail, "http_error", headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return _error_response(
            500, "Internal Server Error", "An unexpected error occurred", "internal_error"
        )
