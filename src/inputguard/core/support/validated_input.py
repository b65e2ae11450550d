"""
ValidatedInput - the accepted values of one validation run.
"""

from collections.abc import Iterable, Iterator
from typing import Any


class ValidatedInput:
    """
    Ordered mapping of attribute name to its accepted raw value.

    An attribute is present only if none of its rules failed. Values are
    stored exactly as they were received.
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data: dict[str, Any] = dict(data or {})

    def add(self, attribute: str, value: Any) -> None:
        self._data[attribute] = value

    def all(self) -> dict[str, Any]:
        """Get a snapshot of all validated values."""
        return dict(self._data)

    def get(self, attribute: str, default: Any = None) -> Any:
        """Get the validated value of an attribute."""
        return self._data.get(attribute, default)

    def only(self, attributes: Iterable[str]) -> dict[str, Any]:
        """
        Retrieve a portion of the validated values.

        Args:
            attributes: Attributes to keep; an empty selection keeps everything

        Returns:
            Selected values, in validation order
        """
        selected = set(attributes)
        if not selected:
            return self.all()
        return {key: value for key, value in self._data.items() if key in selected}

    def except_(self, attributes: Iterable[str]) -> dict[str, Any]:
        """
        Retrieve the validated values minus some attributes.

        Args:
            attributes: Attributes to drop; an empty selection keeps everything

        Returns:
            Remaining values, in validation order
        """
        excluded = set(attributes)
        return {key: value for key, value in self._data.items() if key not in excluded}

    def is_empty(self) -> bool:
        return not self._data

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        yield from list(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._data

    def __repr__(self) -> str:
        return f"ValidatedInput({self._data!r})"
