"""
Validation groups and group sequences.

A validate() call selects rules by group. The request is resolved into an
ordered list of steps; each step is the set of group names active at that
point. A plain group (or list of groups) is a single step. A GroupSequence
yields one step per entry, and a failure in an earlier step suppresses the
later ones for that attribute.

Rules without group tags belong to the default group and apply in every step,
so within a GroupSequence an untagged rule is evaluated once per step.
Group names compare case-insensitively.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from ..errors import ConfigurationError

DEFAULT_GROUP = "Default"

GroupStep = frozenset[str]


class GroupSequence:
    """Ordered list of groups validated one after another."""

    def __init__(self, groups: Iterable[str]):
        self.groups: list[str] = list(groups)
        if not self.groups:
            raise ConfigurationError("GroupSequence requires at least one group")
        for name in self.groups:
            if not isinstance(name, str) or not name:
                raise ConfigurationError(f"Group names must be non-empty strings, got {name!r}")

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupSequence):
            return NotImplemented
        return self.groups == other.groups

    def __repr__(self) -> str:
        return f"GroupSequence({self.groups!r})"


def _step(names: Iterable[str]) -> GroupStep:
    return frozenset(name.casefold() for name in names)


def resolve_group_steps(group: Any = None) -> list[GroupStep]:
    """
    Resolve a validate() group argument into ordered group steps.

    Args:
        group: None, a group name, a list/tuple of names, or a GroupSequence

    Returns:
        List of group steps, evaluated in order

    Raises:
        ConfigurationError: If the argument has an unsupported shape
    """
    if group is None:
        return [_step([DEFAULT_GROUP])]

    if isinstance(group, GroupSequence):
        return [_step([name]) for name in group]

    if isinstance(group, str):
        return [_step([group])]

    if isinstance(group, (list, tuple, set, frozenset)):
        for name in group:
            if not isinstance(name, str):
                raise ConfigurationError(
                    f"Group lists may only contain group names, got {type(name).__name__}"
                )
        return [_step(group or [DEFAULT_GROUP])]

    raise ConfigurationError(f"Unsupported validation group: {group!r}")


def group_applies(rule_groups: Iterable[str] | None, step: GroupStep) -> bool:
    """Whether a rule tagged with rule_groups takes part in the given step."""
    if not rule_groups:
        return True
    return any(name.casefold() in step for name in rule_groups)
