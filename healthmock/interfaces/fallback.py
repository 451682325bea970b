"""
Catch-all route.

Answers every request no other route fully matched, whatever its method,
including a known path requested with the wrong method. Registered as a
plain Starlette route without a method list, and must be added last.
"""

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from healthmock.domain.health.catalog import AVAILABLE_ENDPOINTS
from healthmock.domain.health.status_codes import status_text
from healthmock.interfaces.health.schemas import StatusEnvelope

HTTP_404 = 404


def original_url(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def route_not_found(request: Request) -> Response:
    """Respond 404 with the list of available endpoints."""
    return StatusEnvelope(
        status=status_text(HTTP_404),
        status_code=HTTP_404,
        message=f"Route {request.method} {original_url(request)} not found",
        available_endpoints=list(AVAILABLE_ENDPOINTS),
    ).to_response()


# No ``methods``: Starlette then matches every verb, custom ones included.
catch_all = Route("/{path:path}", route_not_found, include_in_schema=False)
