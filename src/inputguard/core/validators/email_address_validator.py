"""
EmailValidator - validates email address syntax.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from ..models import RuleResult
from .base_validator import BaseValidator


class EmailValidator(BaseValidator):
    """
    Validates that a value is a syntactically valid email address.

    Only the syntax is checked; no DNS lookups are made. None and empty
    strings pass (pair with RequiredFieldValidator to require a value).
    """

    default_message = "This value is not a valid email address."

    def evaluate(self, value: Any) -> RuleResult:
        if value is None or value == "":
            return RuleResult.success()

        if not isinstance(value, str):
            return self.fail(value)

        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return self.fail(value)

        return RuleResult.success()

    @property
    def rule_type(self) -> str:
        return "email"
