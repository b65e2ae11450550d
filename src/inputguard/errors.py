"""
Exception taxonomy for the validation engine.

A value that fails its rules is never an exception: it is recorded in the
ErrorCollection and reported through the boolean result of validate().
The exceptions below signal that validation could not be performed at all.
"""

from typing import Any


class InputGuardError(Exception):
    """Base class for all inputguard errors."""


class ConfigurationError(InputGuardError, ValueError):
    """Raised when rules are registered or composed in an unusable way."""


class RuleExecutionError(InputGuardError, RuntimeError):
    """Raised when a rule raises unexpectedly while evaluating a value."""

    def __init__(self, message: str, attribute: str | None = None, rule: Any = None):
        self.attribute = attribute
        self.rule = rule
        super().__init__(message)


class UnknownRuleError(InputGuardError, LookupError):
    """Raised when a rule is referenced by a name nobody registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown rule: {name!r}")


class UnknownCapabilityError(InputGuardError, AttributeError):
    """Raised when calling a capability the validator was not given."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined capability: {name!r}")
