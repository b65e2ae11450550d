"""
TypeValidator - validates that a value has the expected type.
"""

from collections.abc import Iterable
from typing import Any

from ...errors import ConfigurationError
from ..models import RuleResult
from .base_validator import BaseValidator


class TypeValidator(BaseValidator):
    """
    Validates that a value matches the expected type.

    The raw value is never converted: a numeric string is not an int.

    Supported type names:
    - int, float, str, bool, list, dict
    - Aliases: "integer", "decimal", "double", "string", "boolean"
    """

    TYPE_MAPPING = {
        "integer": int,
        "int": int,
        "decimal": float,
        "float": float,
        "double": float,
        "string": str,
        "str": str,
        "boolean": bool,
        "bool": bool,
        "list": list,
        "dict": dict,
    }

    default_message = "This value should be of type {type}."

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        super().__init__(parameters, message, groups)

        expected_type = self.parameters.get("expected_type")
        if not expected_type:
            raise ConfigurationError("TypeValidator requires 'expected_type' parameter")

        if isinstance(expected_type, str):
            self.expected_type = self.TYPE_MAPPING.get(expected_type.lower())
            if not self.expected_type:
                raise ConfigurationError(f"Unsupported type: {expected_type}")
        elif isinstance(expected_type, type):
            self.expected_type = expected_type
        else:
            raise ConfigurationError(f"expected_type must be a type or type name, got {expected_type!r}")

        if self.message == self.default_message:
            self.message = self.default_message.format(type=self.expected_type.__name__)

    def evaluate(self, value: Any) -> RuleResult:
        # Skip None (handled by the required field validator)
        if value is None:
            return RuleResult.success()

        # bool is an int subclass; only accept it when asked for
        if isinstance(value, bool) and self.expected_type is not bool:
            return self.fail(value)

        if isinstance(value, self.expected_type):
            return RuleResult.success()

        # ints are acceptable floats
        if self.expected_type is float and isinstance(value, int):
            return RuleResult.success()

        return self.fail(value)

    @property
    def rule_type(self) -> str:
        return "type_check"
