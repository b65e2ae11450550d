"""
LengthValidator - validates the length of strings and collections.
"""

from collections.abc import Iterable, Sized
from typing import Any

from ...errors import ConfigurationError
from ..models import RuleResult
from .base_validator import BaseValidator


class LengthValidator(BaseValidator):
    """
    Validates that a value's length is within bounds.

    Parameters:
    - min: Minimum length (inclusive)
    - max: Maximum length (inclusive)
    - message: Replaces both per-bound messages
    - min_message / max_message: Override one bound's message

    Values that are not sized (numbers, etc.) are measured as strings.
    """

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        super().__init__(parameters, message, groups)

        self.min_length = self.parameters.get("min")
        self.max_length = self.parameters.get("max")
        if self.min_length is None and self.max_length is None:
            raise ConfigurationError("LengthValidator requires at least one of: min, max")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ConfigurationError(
                f"LengthValidator min ({self.min_length}) is greater than max ({self.max_length})"
            )

        custom_message = message or self.parameters.get("message")
        self.min_message = self.parameters.get(
            "min_message", custom_message or f"Minimum {self.min_length} characters are required"
        )
        self.max_message = self.parameters.get(
            "max_message", custom_message or f"Maximum {self.max_length} characters exceeded"
        )

    def evaluate(self, value: Any) -> RuleResult:
        # Skip None (handled by the required field validator)
        if value is None:
            return RuleResult.success()

        length = len(value) if isinstance(value, Sized) else len(str(value))

        if self.min_length is not None and length < self.min_length:
            return self.fail(value, self.min_message)

        if self.max_length is not None and length > self.max_length:
            return self.fail(value, self.max_message)

        return RuleResult.success()

    @property
    def rule_type(self) -> str:
        return "length"
