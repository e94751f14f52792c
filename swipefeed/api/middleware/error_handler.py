"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Listing with id 'abc-123' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. SwipeFeedException subclasses → Use their status_code and to_dict()
2. Request body / Pydantic validation errors → 400 with validation details
3. Other exceptions → 500 with generic message (details hidden)

A PartialWriteError renders as 207: the listing exists, its genre tagging
does not, and details.listing_id names the stored listing.

Usage:
======
    from swipefeed.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from swipefeed.shared.core.exceptions import SwipeFeedException
from swipefeed.shared.core.logging import logger
from swipefeed.shared.schemas.common import ErrorDetail, ErrorResponse


def _error_response(status_code: int, error: ErrorDetail) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error).model_dump(exclude_none=True),
    )


def _validation_response(errors: list) -> JSONResponse:
    return _error_response(
        400,
        ErrorDetail(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details={"errors": jsonable_encoder(errors)},
        ),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SwipeFeedException)
    async def swipefeed_exception_handler(
        request: Request,
        exc: SwipeFeedException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from SwipeFeedException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle request bodies and parameters that do not match their schema."""
        logger.warning(
            "Request validation error",
            error_count=len(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside handlers."""
        logger.warning(
            "Validation error",
            error_count=exc.error_count(),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return _error_response(
            500,
            ErrorDetail(code="INTERNAL_ERROR", message="An unexpected error occurred"),
        )
