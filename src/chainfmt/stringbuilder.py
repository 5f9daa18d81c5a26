"""StringBuilder for O(n) accumulation of formatted output.

Appends fragments to a list and joins once at the end: O(n) total vs O(n²)
for repeated string concatenation. Each session owns exactly one builder.

Rendering a value goes through the snprintf bridge in chainfmt.native with
a guess-then-exact protocol: the first attempt uses the configured
initial_buffer_size, and a longer result is rendered once more into an
exactly sized buffer.

Thread Safety:
StringBuilder instances are owned by a single FormatSession.
No shared mutable state.

"""

from __future__ import annotations

from chainfmt.errors import FormatError, FormatErrorReason
from chainfmt.native import snprintf
from chainfmt.profiling import get_format_accumulator
from chainfmt.utils.logger import get_logger

logger = get_logger(__name__)


class StringBuilder:
    """Efficient accumulator of output fragments.

    Tracks the running total length so the final size is known before
    joining.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("Total: ")
            >>> _ = sb.append_formatted("%5.1f", 3.14159)
            >>> sb.materialize()
            'Total:   3.1'
            >>> sb.length
            12

    """

    __slots__ = ("_initial_size", "_length", "_parts")

    def __init__(self, initial_size: int = 16) -> None:
        """Initialize empty StringBuilder.

        Args:
            initial_size: First-guess buffer size for append_formatted()
        """
        self._parts: list[str] = []
        self._length = 0
        self._initial_size = initial_size

    def append(self, s: str) -> StringBuilder:
        """Append a string verbatim.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining

        Raises:
            TypeError: ``s`` is not a str (the builder is left unchanged)
        """
        if not isinstance(s, str):
            raise TypeError(f"can only append str, not {type(s).__name__}")
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def append_formatted(self, directive: str, value: object) -> StringBuilder:
        """Render ``value`` with a single directive and append the result.

        Args:
            directive: One complete directive, e.g. ``"%-6d"``
            value: Value to render

        Returns:
            self for method chaining

        Raises:
            FormatError: The native formatter rejected the directive (ENCODING)
        """
        guess = self._initial_size
        text, required = snprintf(guess, directive, value)
        retried = False
        if required >= 0 and required + 1 > guess:
            # Buffer was too small, try again with the exact size
            logger.debug("Re-rendering %r: needs %d slots, guessed %d", directive, required + 1, guess)
            text, required = snprintf(required + 1, directive, value)
            retried = True
        if required < 0:
            raise FormatError(FormatErrorReason.ENCODING, directive=directive)

        self.append(text)

        acc = get_format_accumulator()
        if acc is not None:
            acc.record_substitution(retried=retried)
        return self

    def materialize(self) -> str:
        """Join all fragments into the output string.

        The fragment list is left intact, so appending afterwards and
        materializing again stays valid.

        Returns:
            Concatenation of all appended fragments in order
        """
        return "".join(self._parts)

    @property
    def length(self) -> int:
        """Total number of characters appended so far."""
        return self._length

    @property
    def fragment_count(self) -> int:
        return len(self._parts)

    def __len__(self) -> int:
        """Return total character length (not number of fragments)."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any fragments have been appended."""
        return bool(self._parts)
