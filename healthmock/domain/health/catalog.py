"""
Static response catalogs for the health bounded context.

Defines the canned payload behind each fixed-status endpoint and the
list of endpoints advertised to callers. Everything here is immutable.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from healthmock.domain.health.status_codes import status_text


@dataclass(frozen=True)
class FixedStatus:
    """Canned response for a ``GET /health/<code>`` endpoint.

    Attributes:
        status_code: HTTP status returned by the endpoint.
        message: Human-readable message in the envelope.
        error_type: Name of the simulated error, if the status is a failure.
        error_details: Description of the simulated error.
        data: Component states reported by the success endpoint.
    """

    status_code: int
    message: str
    error_type: str | None = None
    error_details: str | None = None
    data: Mapping[str, str] | None = None

    @property
    def status(self) -> str:
        """Canonical status text for this entry's code."""
        return status_text(self.status_code)


HEALTHY_COMPONENTS: Mapping[str, str] = MappingProxyType(
    {"server": "healthy", "database": "connected", "cache": "operational"}
)

FIXED_STATUSES: Mapping[int, FixedStatus] = MappingProxyType(
    {
        200: FixedStatus(
            status_code=200,
            message="Everything is working perfectly!",
            data=HEALTHY_COMPONENTS,
        ),
        400: FixedStatus(
            status_code=400,
            message="Invalid request parameters",
            error_type="ValidationError",
            error_details="Missing required parameters or invalid format",
        ),
        401: FixedStatus(
            status_code=401,
            message="Authentication required",
            error_type="AuthenticationError",
            error_details="Valid authentication token required",
        ),
        403: FixedStatus(
            status_code=403,
            message="Access denied",
            error_type="AuthorizationError",
            error_details="Insufficient permissions to access this resource",
        ),
        404: FixedStatus(
            status_code=404,
            message="Resource not found",
            error_type="NotFoundError",
            error_details="The requested resource could not be found",
        ),
        500: FixedStatus(
            status_code=500,
            message="Something went wrong on the server",
            error_type="InternalServerError",
            error_details="An unexpected error occurred while processing the request",
        ),
        503: FixedStatus(
            status_code=503,
            message="Service is temporarily unavailable",
            error_type="ServiceUnavailableError",
            error_details="Service is down for maintenance or overloaded",
        ),
    }
)

# Insertion order is the order endpoints are advertised in.
ENDPOINT_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "GET /": "Root endpoint",
        "GET /health": "Health check (200 OK)",
        "GET /health/200": "Success response",
        "GET /health/400": "Bad request response",
        "GET /health/401": "Unauthorized response",
        "GET /health/403": "Forbidden response",
        "GET /health/404": "Not found response",
        "GET /health/500": "Internal server error response",
        "GET /health/503": "Service unavailable response",
        "POST /health/custom": (
            'Custom status code (send {"statusCode": number} in body)'
        ),
    }
)

AVAILABLE_ENDPOINTS: tuple[str, ...] = tuple(ENDPOINT_DESCRIPTIONS)
