"""
Rule composition and validation orchestration.
"""

from ..errors import (
    ConfigurationError,
    InputGuardError,
    RuleExecutionError,
    UnknownCapabilityError,
    UnknownRuleError,
)
from .groups import DEFAULT_GROUP, GroupSequence
from .models import RuleResult
from .rules import RuleList, RuleMapBuilder, RuleNode, RuleRegistry, Sequential, Single, compose
from .support import ErrorCollection, ValidatedInput
from .validator import RunState, Validator

__all__ = [
    "Validator",
    "RunState",
    "RuleResult",
    "RuleNode",
    "Single",
    "RuleList",
    "Sequential",
    "compose",
    "RuleRegistry",
    "RuleMapBuilder",
    "GroupSequence",
    "DEFAULT_GROUP",
    "ErrorCollection",
    "ValidatedInput",
    "InputGuardError",
    "ConfigurationError",
    "RuleExecutionError",
    "UnknownRuleError",
    "UnknownCapabilityError",
]
