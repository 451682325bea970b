"""
Root router.

Greets the caller and lists every endpoint the service exposes.
"""

from fastapi import APIRouter

from healthmock.domain.health.catalog import ENDPOINT_DESCRIPTIONS
from healthmock.interfaces.health.schemas import RootResponse

ROOT_MESSAGE = "Hello MJ! API is running"

router = APIRouter(tags=["root"])


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_model=RootResponse,
    summary="API index",
    description="Returns a greeting and the map of available endpoints.",
)
def root() -> RootResponse:
    """Return the greeting and endpoint map."""
    return RootResponse(message=ROOT_MESSAGE, endpoints=dict(ENDPOINT_DESCRIPTIONS))
