"""
Use case: Report process health for GET /health.

Input: none
Output: HealthReport
Side effects: None.
Failure cases: None.
"""

from collections.abc import Callable

from healthmock.application.health.dtos import HealthReport
from healthmock.shared.clock import uptime_seconds


class GetHealthReportUseCase:
    """Reports process uptime and the configured environment name."""

    def __init__(
        self, environment: str, uptime: Callable[[], float] = uptime_seconds
    ) -> None:
        self._environment = environment
        self._uptime = uptime

    def execute(self) -> HealthReport:
        """Build the current health report."""
        return HealthReport(uptime=self._uptime(), environment=self._environment)
