"""
FastAPI router for the health bounded context.

Serves the default health check, one canned endpoint per entry of the
fixed-status catalog, and the custom-status endpoint.
Error mapping is handled by centralized error handlers.
"""

import logging

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from healthmock.application.health.dtos import ResolveCustomStatusCommand
from healthmock.application.health.get_health_report import GetHealthReportUseCase
from healthmock.application.health.resolve_custom_status import (
    ResolveCustomStatusUseCase,
)
from healthmock.domain.health.catalog import FIXED_STATUSES, FixedStatus
from healthmock.interfaces.health.dependencies import (
    get_health_report_use_case,
    get_resolve_custom_status_use_case,
)
from healthmock.interfaces.health.schemas import (
    ComponentStatus,
    ErrorDetail,
    HealthResponse,
    StatusEnvelope,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_model=HealthResponse,
    summary="Health check",
    description="Returns 200 with process uptime and environment name.",
)
def health_check(
    use_case: GetHealthReportUseCase = Depends(get_health_report_use_case),
) -> HealthResponse:
    """Return current service health."""
    report = use_case.execute()
    return HealthResponse(
        status="OK",
        message="Service is healthy",
        uptime=report.uptime,
        environment=report.environment,
    )


@router.post(
    "/custom",
    response_model=None,
    summary="Custom status code",
    description='Responds with the status sent as {"statusCode": number}.',
)
async def custom_status(
    request: Request,
    use_case: ResolveCustomStatusUseCase = Depends(
        get_resolve_custom_status_use_case
    ),
) -> Response:
    """Respond with the caller-chosen status code."""
    command = ResolveCustomStatusCommand(
        status_code=await _read_status_code(request)
    )
    result = use_case.execute(command)
    return StatusEnvelope(
        status=result.status,
        status_code=result.status_code,
        message=result.message,
        custom=True,
    ).to_response()


async def _read_status_code(request: Request) -> object:
    """Extract ``statusCode`` from a JSON object body, or None."""
    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Custom status request body is not valid JSON")
        return None
    if not isinstance(payload, dict):
        return None
    return payload.get("statusCode")


def fixed_status_envelope(entry: FixedStatus) -> StatusEnvelope:
    """Build the canned envelope for a fixed-status catalog entry."""
    error = None
    if entry.error_type is not None:
        error = ErrorDetail(type=entry.error_type, details=entry.error_details)
    data = ComponentStatus(**entry.data) if entry.data is not None else None
    return StatusEnvelope(
        status=entry.status,
        status_code=entry.status_code,
        message=entry.message,
        data=data,
        error=error,
    )


def _fixed_status_endpoint(entry: FixedStatus):
    def endpoint() -> Response:
        return fixed_status_envelope(entry).to_response()

    endpoint.__name__ = f"health_{entry.status_code}"
    endpoint.__doc__ = f"Always respond {entry.status_code} {entry.status}."
    return endpoint


for _entry in FIXED_STATUSES.values():
    router.add_api_route(
        f"/{_entry.status_code}",
        _fixed_status_endpoint(_entry),
        methods=["GET", "HEAD"],
        response_model=None,
        summary=f"{_entry.status_code} {_entry.status}",
        description=_entry.message,
    )
