"""
CustomValidator - bridges a user predicate into the rule interface.
"""

from collections.abc import Callable, Iterable, Sized
from typing import Any

from ...errors import ConfigurationError, InputGuardError, RuleExecutionError
from ..models import RuleResult
from .base_validator import BaseValidator, format_message

Predicate = Callable[[Any, Callable[[str], None]], None]


def is_blank(value: Any) -> bool:
    """
    Whether a value counts as missing for required_if().

    Strings are stripped first. None, "", "0", 0, 0.0, False and empty
    containers are blank.
    """
    if isinstance(value, str):
        return value.strip() in ("", "0")
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class CustomValidator(BaseValidator):
    """
    Validates using a custom predicate function.

    The predicate receives the value and a ``fail`` callback. Calling
    ``fail(message)`` marks the value invalid; returning normally without
    calling it means the value passed:

        def alphanumeric(value, fail):
            if not re.search(r"^\\w+$", value):
                fail("Invalid value")

    When fail() is called more than once, the last message wins.
    """

    default_message = "Invalid: {{ value }}."

    def __init__(
        self,
        callback: Predicate,
        message: str | None = None,
        groups: str | Iterable[str] | None = None,
    ):
        if not callable(callback):
            raise ConfigurationError(
                f"The callback must be a valid callable ({type(callback).__name__} given)"
            )
        super().__init__(message=message, groups=groups)
        self.callback = callback

    def evaluate(self, value: Any) -> RuleResult:
        """
        Run the predicate against the value.

        Raises:
            RuleExecutionError: If the predicate raised instead of calling fail()
        """
        passed = True
        failure_message = self.message

        def fail(message: str) -> None:
            nonlocal passed, failure_message
            passed = False
            failure_message = message

        try:
            self.callback(value, fail)
        except InputGuardError:
            raise
        except Exception as e:
            raise RuleExecutionError(
                f"Custom rule {self._callback_name()} raised {type(e).__name__}: {e}",
                rule=self,
            ) from e

        if passed:
            return RuleResult.success()
        return RuleResult.failure(format_message(failure_message or self.default_message, value))

    def _callback_name(self) -> str:
        return getattr(self.callback, "__qualname__", repr(self.callback))

    @property
    def rule_type(self) -> str:
        return "custom"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(callback={self._callback_name()}, groups={self.groups})"


def make_rule(callback: Predicate, groups: str | Iterable[str] | None = None) -> CustomValidator:
    """Make a custom rule from a ``(value, fail)`` predicate."""
    return CustomValidator(callback, groups=groups)


def required_if(
    required: bool | Callable[[], Any],
    message: str = "This field is required.",
    groups: str | Iterable[str] | None = None,
) -> CustomValidator:
    """
    Make a rule that requires a value only when a condition holds.

    Args:
        required: Condition, or a zero-argument callable evaluated immediately
        message: Failure message when the value is empty
        groups: Validation groups for the rule

    Returns:
        CustomValidator enforcing the condition
    """
    if callable(required):
        required = required()

    def check_required(value: Any, fail: Callable[[str], None]) -> None:
        if required and is_blank(value):
            fail(message)

    return CustomValidator(check_required, message=message, groups=groups)
