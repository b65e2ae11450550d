"""
Rule nodes, rule composition and the named rule registry.
"""

from .composer import compose, to_node
from .registry import RuleRegistry
from .rule_config import RuleMapBuilder
from .rule_node import RuleList, RuleNode, Sequential, Single

__all__ = [
    "RuleNode",
    "Single",
    "RuleList",
    "Sequential",
    "compose",
    "to_node",
    "RuleRegistry",
    "RuleMapBuilder",
]
