"""
Rule nodes: the composed structure attached to one attribute.

A node is one of:
- Single: one rule, evaluated once
- RuleList: every member is evaluated, the first failure is reported
- Sequential: members are evaluated in order until the first failure

Members of a RuleList or Sequential are rules (anything with
check(value, step)), nested nodes, or registered rule names. Names are
replaced by their rules through resolve() before evaluation.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ...errors import ConfigurationError
from ..groups import GroupStep
from ..models import RuleResult

RuleResolver = Callable[[str], Any]


def _resolve_member(member: Any, resolver: RuleResolver) -> Any:
    if isinstance(member, str):
        member = resolver(member)
    elif isinstance(member, RuleNode):
        return member.resolve(resolver)

    if not callable(getattr(member, "check", None)):
        raise ConfigurationError(
            f"{member!r} is not a rule; expected a validator, a rule node or a registered rule name"
        )
    return member


class RuleNode(ABC):
    """Base class for the three rule shapes."""

    shape = "node"

    def __init__(self, rules: Iterable[Any]):
        self.rules: list[Any] = list(rules)

    @abstractmethod
    def check(self, value: Any, step: GroupStep) -> RuleResult:
        """
        Evaluate the node's rules against a value for one group step.

        Raises:
            ConfigurationError: If the node holds no rules
        """
        pass

    def resolve(self, resolver: RuleResolver) -> "RuleNode":
        """Return a copy with rule names replaced by registered rules."""
        return type(self)(_resolve_member(rule, resolver) for rule in self.rules)

    def _require_rules(self) -> None:
        if not self.rules:
            raise ConfigurationError(f"Cannot evaluate an empty {self.shape} rule node")

    def __iter__(self) -> Iterator[Any]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleNode):
            return NotImplemented
        return type(self) is type(other) and self.rules == other.rules

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rules!r})"


class Single(RuleNode):
    """A single rule."""

    shape = "single"

    def __init__(self, rule: Any):
        super().__init__([rule])

    @property
    def rule(self) -> Any:
        return self.rules[0]

    def check(self, value: Any, step: GroupStep) -> RuleResult:
        return self.rule.check(value, step)

    def resolve(self, resolver: RuleResolver) -> "Single":
        return Single(_resolve_member(self.rule, resolver))

    def __repr__(self) -> str:
        return f"Single({self.rule!r})"


class RuleList(RuleNode):
    """All rules must pass; the first failing rule's message is reported."""

    shape = "list"

    def check(self, value: Any, step: GroupStep) -> RuleResult:
        self._require_rules()

        first_failure: RuleResult | None = None
        for rule in self.rules:
            result = rule.check(value, step)
            if not result.ok and first_failure is None:
                first_failure = result

        if first_failure is not None:
            return first_failure
        return RuleResult.success()


class Sequential(RuleNode):
    """Rules are evaluated in order; evaluation stops at the first failure."""

    shape = "sequential"

    def check(self, value: Any, step: GroupStep) -> RuleResult:
        self._require_rules()

        for rule in self.rules:
            result = rule.check(value, step)
            if not result.ok:
                return result

        return RuleResult.success()
