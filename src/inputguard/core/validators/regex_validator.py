"""
RegexValidator - validates values against a regular expression pattern.
"""

import re
from collections.abc import Iterable
from re import Pattern
from typing import Any

from ...errors import ConfigurationError
from ..models import RuleResult
from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Validates that a value matches a regular expression pattern.

    The pattern is searched anywhere in the value, so anchor it with ^ and $
    to require a full match.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    - match: Fail when the pattern does NOT match (default True); set to
             False to fail when it does
    """

    default_message = "Invalid value"

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        super().__init__(parameters, message, groups)

        pattern = self.parameters.get("pattern")
        if not pattern:
            raise ConfigurationError("RegexValidator requires 'pattern' parameter")

        flags = self.parameters.get("flags", 0)
        self.match = self.parameters.get("match", True)

        if isinstance(pattern, str):
            try:
                self.pattern: Pattern = re.compile(pattern, flags)
            except re.error as e:
                raise ConfigurationError(f"Invalid regex pattern: {e}") from e
        elif isinstance(pattern, Pattern):
            self.pattern = pattern
        else:
            raise ConfigurationError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")

    def evaluate(self, value: Any) -> RuleResult:
        # Skip None (handled by the required field validator)
        if value is None:
            return RuleResult.success()

        value_str = value if isinstance(value, str) else str(value)

        if bool(self.pattern.search(value_str)) != self.match:
            return self.fail(value)

        return RuleResult.success()

    @property
    def rule_type(self) -> str:
        return "regex"
