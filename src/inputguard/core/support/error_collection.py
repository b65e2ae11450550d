"""
ErrorCollection - failure messages of one validation run.
"""

from collections.abc import Iterator


class ErrorCollection:
    """
    Ordered mapping of attribute name to failure messages.

    Attributes appear in the order they first failed. An attribute is only
    present once at least one message was added for it, and identical
    messages for the same attribute are kept once.
    """

    def __init__(self, errors: dict[str, list[str]] | None = None):
        self._errors: dict[str, list[str]] = {}
        for attribute, messages in (errors or {}).items():
            for message in messages:
                self.add(attribute, message)

    def add(self, attribute: str, message: str) -> "ErrorCollection":
        """
        Add a failure message for an attribute.

        Args:
            attribute: Attribute name
            message: Failure message

        Returns:
            self, for chaining
        """
        messages = self._errors.setdefault(attribute, [])
        if message not in messages:
            messages.append(message)
        return self

    def first(self, attribute: str) -> str | None:
        """Get the earliest message recorded for an attribute, if any."""
        messages = self._errors.get(attribute)
        return messages[0] if messages else None

    def has(self, attribute: str) -> bool:
        """Determine if an attribute has any error message."""
        return attribute in self._errors

    def get(self, attribute: str) -> Iterator[str]:
        """
        Iterate over the messages of an attribute.

        Every call returns a fresh iterator; an attribute without errors
        yields nothing.
        """
        yield from tuple(self._errors.get(attribute, ()))

    def all(self) -> dict[str, list[str]]:
        """Get a snapshot of all errors."""
        return {attribute: list(messages) for attribute, messages in self._errors.items()}

    def is_empty(self) -> bool:
        return not self._errors

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        for attribute, messages in list(self._errors.items()):
            yield attribute, list(messages)

    def __len__(self) -> int:
        return len(self._errors)

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._errors

    def __repr__(self) -> str:
        return f"ErrorCollection({self._errors!r})"
