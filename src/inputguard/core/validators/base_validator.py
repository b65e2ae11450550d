"""
Base validator interface for all validation rules.

Every rule, built-in or bridged from a custom predicate, inherits from
BaseValidator and implements evaluate(). Callers never branch on the rule
class: check() applies group filtering and error wrapping uniformly.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sized
from typing import Any

from ...errors import ConfigurationError, InputGuardError, RuleExecutionError
from ..groups import GroupStep, group_applies
from ..models import RuleResult

VALUE_PLACEHOLDER = "{{ value }}"


def format_message(message: str, value: Any) -> str:
    """Render the {{ value }} placeholder of a failure message."""
    if VALUE_PLACEHOLDER not in message:
        return message
    return message.replace(VALUE_PLACEHOLDER, "" if value is None else str(value))


def is_empty_value(value: Any) -> bool:
    """
    Whether a value counts as "not provided".

    None, blank strings and empty containers are empty. Numbers and booleans
    are always considered provided, including 0 and False.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def normalize_groups(groups: str | Iterable[str] | None) -> tuple[str, ...]:
    """Turn a group tag argument into a tuple of group names."""
    if groups is None:
        return ()
    if isinstance(groups, str):
        groups = (groups,)
    names = tuple(groups)
    for name in names:
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Group names must be non-empty strings, got {name!r}")
    return names


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements a specific rule type (required, type, range,
    length, regex, email, custom) and reports the outcome as a RuleResult.
    """

    default_message = "This value is not valid."

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        """
        Initialize validator.

        Args:
            parameters: Rule-specific parameters (e.g., min/max for range)
            message: Failure message, may contain the {{ value }} placeholder
            groups: Validation groups this rule belongs to (None = default group)
        """
        self.parameters = dict(parameters or {})
        self.message = message or self.parameters.get("message") or self.default_message
        self.groups = normalize_groups(groups if groups is not None else self.parameters.get("groups"))

    @abstractmethod
    def evaluate(self, value: Any) -> RuleResult:
        """
        Evaluate a value against this rule.

        Args:
            value: The attribute value to validate

        Returns:
            RuleResult with ok=False and a message when the value is invalid
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def check(self, value: Any, step: GroupStep) -> RuleResult:
        """
        Evaluate the value if this rule takes part in the given group step.

        Rules outside the step are skipped and count as passing.

        Raises:
            RuleExecutionError: If evaluate() raised unexpectedly
        """
        if not group_applies(self.groups, step):
            return RuleResult.success()

        try:
            return self.evaluate(value)
        except InputGuardError:
            raise
        except Exception as e:
            raise RuleExecutionError(
                f"Rule '{self.rule_type}' raised {type(e).__name__}: {e}",
                rule=self,
            ) from e

    def fail(self, value: Any, message: str | None = None) -> RuleResult:
        """Build a failed result, rendering the message for value."""
        return RuleResult.failure(format_message(message or self.message, value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.parameters}, groups={self.groups})"
