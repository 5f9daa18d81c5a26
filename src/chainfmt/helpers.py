"""Convenience functions built on Formatter.

Example:
    >>> format_sequence("%d", [1, 2, 3])
    '1, 2, 3'
    >>> format_sequence("<%.1f>", (0.5, 1.5), sep=" ")
    '<0.5> <1.5>'
    >>> sprintf("%s has %d items", "cart", 3)
    'cart has 3 items'
"""

from __future__ import annotations

from collections.abc import Iterable

from chainfmt.config import get_format_config
from chainfmt.formatter import Formatter


def format_sequence(fmt: str, values: Iterable[object], sep: str | None = None) -> str:
    """Format every element of ``values`` with the same format string.

    ``fmt`` should contain exactly one directive. One session is reused for
    all elements: after each substitution the session flushes the literal
    tail, rewinds, and takes the separator before the next element.

    Args:
        fmt: Format string with a single directive
        values: Elements to format
        sep: Separator between elements (defaults to the configured
            default_separator)

    Returns:
        The joined output; an empty string when ``values`` is empty
    """
    if sep is None:
        sep = get_format_config().default_separator

    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        return ""

    with Formatter(fmt) as formatter:
        formatter %= first
        for value in iterator:
            formatter.reset()
            formatter.append(sep).close()
            formatter %= value
        return formatter.materialize()


def sprintf(fmt: str, *values: object) -> str:
    """Substitute ``values`` in order and return the output."""
    with Formatter(fmt) as formatter:
        for value in values:
            formatter %= value
        return formatter.materialize()
