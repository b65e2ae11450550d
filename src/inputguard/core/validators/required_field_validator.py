"""
RequiredFieldValidator - ensures a value is present and not blank.
"""

from collections.abc import Iterable
from typing import Any

from ..models import RuleResult
from .base_validator import BaseValidator, is_empty_value


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a value is present and not blank.

    Fails if:
    - Value is None
    - Value is a blank string (configurable)
    - Value is an empty container
    """

    default_message = "This value should not be blank."

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        super().__init__(parameters, message, groups)
        self.allow_empty_string = self.parameters.get("allow_empty_string", False)

    def evaluate(self, value: Any) -> RuleResult:
        if value is None:
            return self.fail(value)

        if isinstance(value, str) and self.allow_empty_string:
            return RuleResult.success()

        if is_empty_value(value):
            return self.fail(value)

        return RuleResult.success()

    @property
    def rule_type(self) -> str:
        return "required_field"
