"""
Named rule registry.

Rule maps may reference a rule by name instead of by value. Names are
looked up in a RuleRegistry when a validation run starts. Registries are
plain objects: each Validator gets its own unless one is passed in, so
registrations never leak between unrelated validators or test cases.
"""

from collections.abc import Callable, Iterator
from typing import Any

from ...errors import ConfigurationError, UnknownRuleError
from ...observability.logger import get_logger
from ..validators import BaseValidator, CustomValidator

logger = get_logger(__name__)


class RuleRegistry:
    """Mapping of rule names to rule evaluators."""

    def __init__(self, rules: dict[str, Any] | None = None):
        self._rules: dict[str, Any] = {}
        for name, rule in (rules or {}).items():
            self.register(name, rule)

    def extend(self, name: str, predicate: Callable[[Any, Callable[[str], None]], None]) -> CustomValidator:
        """
        Register a custom ``(value, fail)`` predicate under a name.

        Returns:
            The CustomValidator wrapping the predicate
        """
        rule = CustomValidator(predicate)
        self.register(name, rule)
        return rule

    def register(self, name: str, rule: Any) -> None:
        """
        Register a ready-made rule under a name.

        Raises:
            ConfigurationError: If the name is empty or the rule cannot be evaluated
        """
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Rule names must be non-empty strings, got {name!r}")
        if not isinstance(rule, BaseValidator) and not callable(getattr(rule, "check", None)):
            raise ConfigurationError(f"Cannot register {rule!r} as rule '{name}': it has no check()")

        if name in self._rules:
            logger.debug(f"Replacing registered rule '{name}'")
        self._rules[name] = rule

    def get(self, name: str) -> Any:
        """
        Look up a rule by name.

        Raises:
            UnknownRuleError: If no rule was registered under the name
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def has(self, name: str) -> bool:
        return name in self._rules

    def names(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
