"""
Data Transfer Objects for the health application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolveCustomStatusCommand:
    """Input DTO for the custom-status endpoint.

    Attributes:
        status_code: The raw ``statusCode`` value taken from the request
            body, or None when the field is absent. Not yet validated.
    """

    status_code: object = None


@dataclass(frozen=True)
class CustomStatusResult:
    """Output DTO for a resolved custom status.

    Attributes:
        status_code: Validated HTTP status code to respond with.
        status: Canonical text for the code, or "Unknown Status".
        message: Message echoing the code.
    """

    status_code: int
    status: str
    message: str


@dataclass(frozen=True)
class HealthReport:
    """Output DTO for the default health check.

    Attributes:
        uptime: Seconds since process start.
        environment: Name of the running environment.
    """

    uptime: float
    environment: str
