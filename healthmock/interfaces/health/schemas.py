"""
Pydantic schemas for the JSON envelopes returned by every endpoint.

Field names are snake_case in Python and camelCase on the wire.
Optional envelope fields that are not set are left out of the body.
No business logic belongs here.
"""

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from starlette.responses import Response

from healthmock.domain.health.status_codes import allows_body
from healthmock.shared.clock import iso_timestamp


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(CamelModel):
    """Simulated error attached to a fixed failure response."""

    type: str
    details: str


class ComponentStatus(CamelModel):
    """Component states reported by GET /health/200."""

    server: str
    database: str
    cache: str


class StatusCodeExample(CamelModel):
    """Example request body returned alongside an invalid statusCode."""

    status_code: int = 201


class StatusEnvelope(CamelModel):
    """Standard envelope returned by the status endpoints and error handlers.

    Attributes:
        status: Canonical status text.
        status_code: HTTP status code echoed in the body.
        message: Human-readable message.
        timestamp: UTC ISO-8601 time the envelope was built.
        data: Component states (success endpoint only).
        error: Simulated error, or fault text from the 500 handler.
        example: Example of a valid custom-status request body.
        custom: Marks responses produced by POST /health/custom.
        available_endpoints: Endpoints listed by the not-found responder.
    """

    status: str
    status_code: int
    message: str
    timestamp: str = Field(default_factory=iso_timestamp)
    data: ComponentStatus | None = None
    error: ErrorDetail | str | None = None
    example: StatusCodeExample | None = None
    custom: bool | None = None
    available_endpoints: list[str] | None = None

    def to_response(self) -> Response:
        """Render as a response whose HTTP status matches ``status_code``."""
        if not allows_body(self.status_code):
            return Response(status_code=self.status_code)
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(by_alias=True, exclude_none=True),
        )


class RootResponse(CamelModel):
    """Response schema for GET /."""

    message: str
    timestamp: str = Field(default_factory=iso_timestamp)
    endpoints: dict[str, str]


class HealthResponse(CamelModel):
    """Response schema for the default health check."""

    status: str
    message: str
    timestamp: str = Field(default_factory=iso_timestamp)
    uptime: float
    environment: str
