"""
RuleResult model representing the outcome of evaluating one rule (ephemeral).
"""

from pydantic import BaseModel, ConfigDict, model_validator


class RuleResult(BaseModel):
    """
    Outcome of evaluating a single rule against a value.

    Attributes:
        ok: Whether the value satisfied the rule
        message: Failure message (None when ok is True)
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "ok": False,
                "message": "Invalid email",
            }
        },
    )

    ok: bool
    message: str | None = None

    @model_validator(mode="after")
    def check_message_consistency(self) -> "RuleResult":
        """A failed result always carries a message."""
        if not self.ok and not self.message:
            raise ValueError("failed RuleResult requires a message")
        return self

    @classmethod
    def success(cls) -> "RuleResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> "RuleResult":
        return cls(ok=False, message=message)
