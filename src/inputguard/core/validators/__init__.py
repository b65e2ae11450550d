"""
Validation rule implementations.

Provides validators for required values, type checking, ranges, lengths,
regex patterns, email syntax, and custom predicates.
"""

from .base_validator import BaseValidator, format_message, is_empty_value
from .custom_validator import CustomValidator, make_rule, required_if
from .email_address_validator import EmailValidator
from .length_validator import LengthValidator
from .range_validator import RangeValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import TypeValidator

__all__ = [
    "BaseValidator",
    "format_message",
    "is_empty_value",
    "RequiredFieldValidator",
    "TypeValidator",
    "RangeValidator",
    "LengthValidator",
    "RegexValidator",
    "EmailValidator",
    "CustomValidator",
    "make_rule",
    "required_if",
]
