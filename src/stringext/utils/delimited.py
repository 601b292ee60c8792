"""Delimited-string builder.

Joins a sequence of items into one string, mapping each item through a
selector first. The default selector is ``str`` and the default delimiter is
``", "``; passing an empty delimiter falls back to the default.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from stringext.config import DEFAULT_DELIMITER
from stringext.errors import InvalidArgumentError

T = TypeVar("T")

__all__ = ["DEFAULT_DELIMITER", "DelimitedStringOptions", "to_delimited_string"]


@dataclass(frozen=True, slots=True)
class DelimitedStringOptions(Generic[T]):
    """Options for building a delimited string.

    Attributes:
        selector: Maps each item to the text that is joined. Defaults to ``str``.
        delimiter: Separator placed between items. Empty or ``None`` means
            ``DEFAULT_DELIMITER``.
    """

    selector: Callable[[T], Any] | None = str
    delimiter: str | None = DEFAULT_DELIMITER

    def join(self, source: Iterable[T] | None) -> str:
        """Join ``source`` using these options.

        Args:
            source: Items to join. ``None`` or an empty iterable yields ``""``.

        Returns:
            The mapped items separated by the delimiter, without a trailing
            delimiter.

        Raises:
            InvalidArgumentError: If ``selector`` is ``None`` or not callable
                and ``source`` has at least one item.
        """
        items = list(source) if source is not None else []
        if not items:
            return ""

        if self.selector is None or not callable(self.selector):
            raise InvalidArgumentError(
                "selector", "Must provide a valid property selector"
            )

        delimiter = self.delimiter or DEFAULT_DELIMITER

        parts: list[str] = []
        for item in items:
            value = self.selector(item)
            parts.append("" if value is None else str(value))
            parts.append(delimiter)
        joined = "".join(parts)
        # drop exactly one trailing delimiter, never a match inside an item
        return joined[: len(joined) - len(delimiter)]


def to_delimited_string(
    source: Iterable[T] | None,
    selector: Callable[[T], Any] | None = str,
    delimiter: str | None = DEFAULT_DELIMITER,
) -> str:
    """Convert a sequence of items to a delimited string.

    Args:
        source: Items to join. ``None`` or an empty iterable yields ``""``.
        selector: Maps each item to its display text (default ``str``). A
            selector result of ``None`` contributes an empty string.
        delimiter: Separator between items (default ``", "``). Empty or
            ``None`` falls back to the default.

    Returns:
        The joined string.

    Raises:
        InvalidArgumentError: If ``selector`` is explicitly ``None``.

    Example:
        >>> to_delimited_string([1, 2, 3])
        '1, 2, 3'
        >>> to_delimited_string(["a", "b"], str.upper, "|")
        'A|B'
    """
    return DelimitedStringOptions(selector=selector, delimiter=delimiter).join(source)
