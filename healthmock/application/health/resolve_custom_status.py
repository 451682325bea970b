"""
Use case: Resolve the status code requested through POST /health/custom.

Input: ResolveCustomStatusCommand (raw statusCode value)
Output: CustomStatusResult
Side effects: None.
Failure cases: InvalidStatusCodeError, StatusCodeOutOfRangeError.
"""

import logging
import math

from healthmock.application.health.dtos import (
    CustomStatusResult,
    ResolveCustomStatusCommand,
)
from healthmock.domain.health.errors import (
    InvalidStatusCodeError,
    StatusCodeOutOfRangeError,
)
from healthmock.domain.health.status_codes import is_in_range, status_text

logger = logging.getLogger(__name__)


class ResolveCustomStatusUseCase:
    """Validates a caller-supplied status code and resolves its text.

    Validation runs in a fixed order: the value must be a non-zero JSON
    number usable as a status line, then it must fall within the
    inclusive [100, 599] range.
    """

    def execute(self, command: ResolveCustomStatusCommand) -> CustomStatusResult:
        """Run the custom-status resolution use case.

        Args:
            command: The command carrying the raw ``statusCode`` value.

        Returns:
            The resolved status, its text and the response message.

        Raises:
            InvalidStatusCodeError: The value is absent, zero or not a number.
            StatusCodeOutOfRangeError: The value is outside [100, 599].
        """
        code = self._coerce(command.status_code)
        if not is_in_range(code):
            logger.info("Rejected out-of-range status code %d", code)
            raise StatusCodeOutOfRangeError(code)

        logger.debug("Resolved custom status code %d", code)
        return CustomStatusResult(
            status_code=code,
            status=status_text(code),
            message=f"Custom response with status code {code}",
        )

    @staticmethod
    def _coerce(value: object) -> int:
        # bool is an int subclass but never a JSON number.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidStatusCodeError(value)
        if isinstance(value, float):
            if not math.isfinite(value) or not value.is_integer():
                raise InvalidStatusCodeError(value)
            value = int(value)
        if value == 0:
            raise InvalidStatusCodeError(value)
        return value
