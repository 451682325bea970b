"""
StatusText table.

Maps the supported subset of HTTP status codes to their canonical short
text. The table is read-only and shared by every request.
"""

from collections.abc import Mapping
from types import MappingProxyType

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599
UNKNOWN_STATUS_TEXT = "Unknown Status"

STATUS_TEXTS: Mapping[int, str] = MappingProxyType(
    {
        200: "OK",
        201: "Created",
        202: "Accepted",
        204: "No Content",
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        409: "Conflict",
        422: "Unprocessable Entity",
        429: "Too Many Requests",
        500: "Internal Server Error",
        502: "Bad Gateway",
        503: "Service Unavailable",
        504: "Gateway Timeout",
    }
)

# Responses with these codes cannot carry a body on the wire.
BODYLESS_STATUS_CODES = frozenset({204, 304})


def status_text(code: int) -> str:
    """Return the canonical text for ``code``, or ``"Unknown Status"``."""
    return STATUS_TEXTS.get(code, UNKNOWN_STATUS_TEXT)


def is_in_range(code: int) -> bool:
    """Return True when ``code`` lies within the inclusive [100, 599] range."""
    return MIN_STATUS_CODE <= code <= MAX_STATUS_CODE


def allows_body(code: int) -> bool:
    """Return False for informational, 204 and 304 responses."""
    return code >= 200 and code not in BODYLESS_STATUS_CODES
