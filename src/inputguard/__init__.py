r"""
inputguard - declarative input validation.

Validates a map of named input values against per-attribute rules,
collects failure messages and exposes the values that passed:

    from inputguard import Validator, make_rule

    def alphanumeric(value, fail):
        if not re.search(r"^\w+$", value):
            fail("Invalid value")

    validator = Validator.make({"keywords": "abcd12345"}, {"keywords": make_rule(alphanumeric)})
    if validator.validate():
        keywords = validator.validated("keywords")
"""

from .config import ValidatorSettings, configure_logging, load_settings
from .core import (
    DEFAULT_GROUP,
    ConfigurationError,
    ErrorCollection,
    GroupSequence,
    InputGuardError,
    RuleExecutionError,
    RuleList,
    RuleMapBuilder,
    RuleNode,
    RuleRegistry,
    RuleResult,
    RunState,
    Sequential,
    Single,
    UnknownCapabilityError,
    UnknownRuleError,
    ValidatedInput,
    Validator,
    compose,
)
from .core.validators import (
    BaseValidator,
    CustomValidator,
    EmailValidator,
    LengthValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    TypeValidator,
    make_rule,
    required_if,
)

__version__ = "0.1.0"

__all__ = [
    "Validator",
    "RunState",
    "ValidatorSettings",
    "load_settings",
    "configure_logging",
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
    "BaseValidator",
    "CustomValidator",
    "RequiredFieldValidator",
    "TypeValidator",
    "RangeValidator",
    "LengthValidator",
    "RegexValidator",
    "EmailValidator",
    "make_rule",
    "required_if",
    "InputGuardError",
    "ConfigurationError",
    "RuleExecutionError",
    "UnknownRuleError",
    "UnknownCapabilityError",
]
