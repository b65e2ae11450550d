"""
Result containers produced by a validation run.
"""

from .error_collection import ErrorCollection
from .validated_input import ValidatedInput

__all__ = [
    "ErrorCollection",
    "ValidatedInput",
]
