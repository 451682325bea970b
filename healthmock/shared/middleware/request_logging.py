"""
Request logging middleware.

Logs the method and path of every inbound request before it is routed.
No business logic. Pure cross-cutting concern.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that writes one log line per request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Log the request line, then hand the request on."""
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)
