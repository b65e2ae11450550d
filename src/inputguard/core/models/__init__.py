"""
Core data models for the validation engine.

Models use Pydantic for runtime validation and type safety.
"""

from .rule_result import RuleResult

__all__ = [
    "RuleResult",
]
