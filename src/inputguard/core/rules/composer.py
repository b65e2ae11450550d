"""
Rule composition.

compose() merges newly supplied rules into whatever node an attribute
already holds. Merges never drop a registered rule and never change the
semantics of an existing Sequential group, unless the caller supplies
another Sequential group to extend it with.

Incoming shapes:
- list or tuple: a list of rules
- Sequential: a sequential group
- anything else (validator, rule name, RuleList, Single): a single rule
"""

from typing import Any

from .rule_node import RuleList, RuleNode, Sequential, Single


def _is_list(rules: Any) -> bool:
    return isinstance(rules, (list, tuple))


def to_node(rules: Any) -> RuleNode:
    """Wrap a rule specification in the smallest node that preserves its shape."""
    if _is_list(rules):
        return RuleList(rules)
    if isinstance(rules, RuleNode):
        return rules
    return Single(rules)


def compose(existing: RuleNode | None, incoming: Any) -> RuleNode:
    """
    Merge incoming rules into an attribute's existing node.

    Args:
        existing: The node the attribute holds, or None
        incoming: A single rule, a list of rules, or a Sequential group

    Returns:
        A new node; neither argument is modified
    """
    if existing is None:
        return to_node(incoming)

    if isinstance(existing, Sequential):
        if isinstance(incoming, Sequential):
            return Sequential([*existing.rules, *incoming.rules])
        if _is_list(incoming):
            # A list cannot join a sequential group without changing its semantics
            return RuleList([existing, *incoming])
        return Sequential([*existing.rules, incoming])

    if isinstance(existing, Single):
        head = [existing.rule]
    else:
        head = list(existing.rules)

    if _is_list(incoming):
        return RuleList([*head, *incoming])
    return RuleList([*head, incoming])
