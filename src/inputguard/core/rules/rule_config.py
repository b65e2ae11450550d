"""
Programmatic rule map construction.

RuleMapBuilder assembles the attribute -> rule node mapping a Validator
takes, composing every addition through the same merge rules as
Validator.add_rule().
"""

from collections.abc import Callable, Iterable
from typing import Any

from ..validators import (
    EmailValidator,
    LengthValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    TypeValidator,
    make_rule,
)
from .composer import compose
from .rule_node import RuleNode, Sequential

Groups = str | Iterable[str] | None


class RuleMapBuilder:
    """
    Fluent builder for rule maps (for tests, fixtures or dynamic rules).

    Usage:
        rules = RuleMapBuilder() \\
            .add_required("email", message="Email is required") \\
            .add_email("email", message="Invalid email") \\
            .add_length("password", min_length=8) \\
            .build()
    """

    def __init__(self):
        """Initialize empty rule map."""
        self.rules: dict[str, RuleNode] = {}

    def add(self, attribute: str, rules: Any) -> "RuleMapBuilder":
        """Add a rule, a list of rules or a Sequential group to an attribute."""
        self.rules[attribute] = compose(self.rules.get(attribute), rules)
        return self

    def add_required(
        self,
        attribute: str,
        allow_empty_string: bool = False,
        message: str | None = None,
        groups: Groups = None,
    ) -> "RuleMapBuilder":
        """Add a required value rule."""
        return self.add(
            attribute,
            RequiredFieldValidator({"allow_empty_string": allow_empty_string}, message, groups),
        )

    def add_type_check(
        self,
        attribute: str,
        expected_type: str | type,
        message: str | None = None,
        groups: Groups = None,
    ) -> "RuleMapBuilder":
        """Add a type check rule."""
        return self.add(attribute, TypeValidator({"expected_type": expected_type}, message, groups))

    def add_range(
        self,
        attribute: str,
        min_value: float | None = None,
        max_value: float | None = None,
        message: str | None = None,
        groups: Groups = None,
    ) -> "RuleMapBuilder":
        """Add a range validation rule."""
        params = {}
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value
        return self.add(attribute, RangeValidator(params, message, groups))

    def add_length(
        self,
        attribute: str,
        min_length: int | None = None,
        max_length: int | None = None,
        groups: Groups = None,
    ) -> "RuleMapBuilder":
        """Add a length validation rule."""
        params = {}
        if min_length is not None:
            params["min"] = min_length
        if max_length is not None:
            params["max"] = max_length
        return self.add(attribute, LengthValidator(params, groups=groups))

    def add_regex(
        self,
        attribute: str,
        pattern: str,
        message: str | None = None,
        groups: Groups = None,
    ) -> "RuleMapBuilder":
        """Add a regex validation rule."""
        return self.add(attribute, RegexValidator({"pattern": pattern}, message, groups))

    def add_email(self, attribute: str, message: str | None = None, groups: Groups = None) -> "RuleMapBuilder":
        """Add an email syntax rule."""
        return self.add(attribute, EmailValidator(message=message, groups=groups))

    def add_custom(
        self,
        attribute: str,
        predicate: Callable[[Any, Callable[[str], None]], None],
        groups: Groups = None,
    ) -> "RuleMapBuilder":
        """Add a custom ``(value, fail)`` predicate."""
        return self.add(attribute, make_rule(predicate, groups=groups))

    def add_named(self, attribute: str, name: str) -> "RuleMapBuilder":
        """Add a reference to a rule registered under a name."""
        return self.add(attribute, name)

    def add_sequence(self, attribute: str, *rules: Any) -> "RuleMapBuilder":
        """Add rules evaluated in order until the first failure."""
        return self.add(attribute, Sequential(rules))

    def build(self) -> dict[str, RuleNode]:
        """Build and return the rule map."""
        return dict(self.rules)
