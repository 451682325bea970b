"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
Fault detail is exposed to clients only in the development environment.
All error responses use the StatusEnvelope schema.
"""

import logging

from fastapi import FastAPI, Request
from starlette.responses import Response

from healthmock.core.config import Settings
from healthmock.domain.health.errors import (
    InvalidStatusCodeError,
    StatusCodeOutOfRangeError,
)
from healthmock.domain.health.status_codes import status_text
from healthmock.interfaces.health.schemas import StatusCodeExample, StatusEnvelope

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

FAULT_MESSAGE = "Something went wrong!"
GENERIC_FAULT_DETAIL = "Internal server error"


def _bad_request(message: str, example: StatusCodeExample | None = None) -> Response:
    """Build a 400 envelope."""
    return StatusEnvelope(
        status=status_text(HTTP_400),
        status_code=HTTP_400,
        message=message,
        example=example,
    ).to_response()


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        settings: Settings deciding whether fault detail is exposed.
    """

    @app.exception_handler(InvalidStatusCodeError)
    async def handle_invalid_status_code(
        _request: Request, exc: InvalidStatusCodeError
    ) -> Response:
        """Handle a missing or non-numeric statusCode."""
        logger.info("Invalid statusCode of type %s", type(exc.value).__name__)
        return _bad_request(exc.message, example=StatusCodeExample())

    @app.exception_handler(StatusCodeOutOfRangeError)
    async def handle_status_code_out_of_range(
        _request: Request, exc: StatusCodeOutOfRangeError
    ) -> Response:
        """Handle a statusCode outside the valid range."""
        return _bad_request(exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors."""
        logger.exception(
            "Unexpected error on %s %s", request.method, request.url.path
        )
        detail = str(exc) if settings.is_development else GENERIC_FAULT_DETAIL
        return StatusEnvelope(
            status=status_text(HTTP_500),
            status_code=HTTP_500,
            message=FAULT_MESSAGE,
            error=detail,
        ).to_response()
