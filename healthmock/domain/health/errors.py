"""
Domain-specific errors for the health bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from healthmock.domain.health.status_codes import MAX_STATUS_CODE, MIN_STATUS_CODE


class HealthMockDomainError(Exception):
    """Base error for all health domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidStatusCodeError(HealthMockDomainError):
    """Raised when the requested status code is missing or not a usable number."""

    def __init__(self, value: object = None) -> None:
        super().__init__(
            "Please provide a valid statusCode number in the request body"
        )
        self.value = value


class StatusCodeOutOfRangeError(HealthMockDomainError):
    """Raised when the requested status code is outside [100, 599]."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Status code must be between {MIN_STATUS_CODE} and {MAX_STATUS_CODE}"
        )
        self.status_code = status_code
