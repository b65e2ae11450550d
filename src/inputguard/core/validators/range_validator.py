"""
RangeValidator - validates numeric values are within a specified range.
"""

from collections.abc import Iterable
from typing import Any

from ...errors import ConfigurationError
from ..models import RuleResult
from .base_validator import BaseValidator


class RangeValidator(BaseValidator):
    """
    Validates that a numeric value is within a specified range.

    Parameters:
    - min: Minimum value (inclusive)
    - max: Maximum value (inclusive)
    - min_exclusive: Minimum value (exclusive)
    - max_exclusive: Maximum value (exclusive)

    Without an explicit message, each bound reports its own failure text.
    """

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        super().__init__(parameters, message, groups)
        self.custom_message = message or self.parameters.get("message")

        self.min_value = self.parameters.get("min")
        self.max_value = self.parameters.get("max")
        self.min_exclusive = self.parameters.get("min_exclusive")
        self.max_exclusive = self.parameters.get("max_exclusive")

        if all(v is None for v in [self.min_value, self.max_value, self.min_exclusive, self.max_exclusive]):
            raise ConfigurationError(
                "RangeValidator requires at least one of: min, max, min_exclusive, max_exclusive"
            )

    def evaluate(self, value: Any) -> RuleResult:
        # Skip None (handled by the required field validator)
        if value is None:
            return RuleResult.success()

        if isinstance(value, bool) or not isinstance(value, int | float):
            return self._fail(value, f"Value must be numeric, got {type(value).__name__}")

        if self.min_value is not None and value < self.min_value:
            return self._fail(value, f"Value {value} is less than minimum {self.min_value}")

        if self.min_exclusive is not None and value <= self.min_exclusive:
            return self._fail(value, f"Value {value} must be greater than {self.min_exclusive}")

        if self.max_value is not None and value > self.max_value:
            return self._fail(value, f"Value {value} exceeds maximum {self.max_value}")

        if self.max_exclusive is not None and value >= self.max_exclusive:
            return self._fail(value, f"Value {value} must be less than {self.max_exclusive}")

        return RuleResult.success()

    def _fail(self, value: Any, detail: str) -> RuleResult:
        return self.fail(value, self.custom_message or detail)

    @property
    def rule_type(self) -> str:
        return "range"
