"""
Dependency injection for the health bounded context.

Provides FastAPI dependency functions that wire settings into use cases.
The settings live on ``app.state`` so each app instance carries its own.
"""

from fastapi import Depends, Request

from healthmock.application.health.get_health_report import GetHealthReportUseCase
from healthmock.application.health.resolve_custom_status import (
    ResolveCustomStatusUseCase,
)
from healthmock.core.config import Settings


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings


def get_health_report_use_case(
    settings: Settings = Depends(get_settings),
) -> GetHealthReportUseCase:
    return GetHealthReportUseCase(environment=settings.environment)


def get_resolve_custom_status_use_case() -> ResolveCustomStatusUseCase:
    return ResolveCustomStatusUseCase()
