"""Format session: scan state and output for one formatting operation.

One FormatSession exists per formatting operation and is passed between
Formatter handles behind the scenes. It owns the format string, the scan
cursors, the StringBuilder receiving output, and a reference count telling
it when the last handle has let go.

Scanning is resumable. Each next_directive() call continues from where the
previous one stopped, copies the literal text it passes over into the
output, consumes ``%%`` escapes as literal percent signs, and returns the
next directive whose conversion character is in the accepted set.

Thread Safety:
    A session serves one linear chain of handles on one thread. By default
    use from any other thread raises SessionError.

"""

from __future__ import annotations

import threading
from collections.abc import Collection

from chainfmt.charsets import DIRECTIVE_BODY, PERCENT
from chainfmt.config import FormatConfig, get_format_config
from chainfmt.errors import FormatError, FormatErrorReason, SessionError
from chainfmt.profiling import get_format_accumulator
from chainfmt.stringbuilder import StringBuilder
from chainfmt.utils.logger import get_logger

logger = get_logger(__name__)


class FormatSession:
    """Format parser and output buffer state.

    Attributes are exposed read-only; mutation happens only through the
    scan, substitution and lifetime methods.

    Example:
        >>> session = FormatSession("%s scored %d%%")
        >>> session.next_directive("s")
        '%s'
        >>> _ = session.buffer.append_formatted("%s", "Ada")
        >>> session.next_directive("di")
        '%d'
        >>> _ = session.buffer.append_formatted("%d", 97)
        >>> session.finalize()
        'Ada scored 97%'

    """

    __slots__ = (
        "_buffer",
        "_config",
        "_format",
        "_materialized",
        "_owner",
        "_references",
        "_scan_end",
        "_scan_start",
    )

    def __init__(self, fmt: str, *, config: FormatConfig | None = None) -> None:
        """Start a session over ``fmt`` with a reference count of 1.

        Args:
            fmt: printf-style format string
            config: Configuration (defaults to the active context config)
        """
        if not isinstance(fmt, str):
            raise TypeError(f"format string must be str, not {type(fmt).__name__}")
        self._config = config if config is not None else get_format_config()
        self._format = fmt
        self._scan_start = 0
        self._scan_end = 0
        self._buffer: StringBuilder | None = StringBuilder(self._config.initial_buffer_size)
        self._references = 1
        self._materialized = 0
        self._owner = threading.get_ident()

        acc = get_format_accumulator()
        if acc is not None:
            acc.record_session()

    # =========================================================================
    # Lifetime
    # =========================================================================

    def retain(self) -> None:
        self._check_alive()
        self._references += 1

    def release(self) -> None:
        """Drop one reference; tear the session down when none remain."""
        if self._buffer is None:
            raise SessionError("session already released")
        self._references -= 1
        if self._references == 0:
            logger.debug(
                "Releasing session for %r (%d chars buffered)",
                self._format,
                self._buffer.length,
            )
            self._buffer = None

    @property
    def refcount(self) -> int:
        return self._references

    @property
    def released(self) -> bool:
        return self._buffer is None

    # =========================================================================
    # State
    # =========================================================================

    @property
    def format(self) -> str:
        return self._format

    @property
    def config(self) -> FormatConfig:
        return self._config

    @property
    def scan_start(self) -> int:
        """Offset of the ``%`` that opened the last matched directive."""
        return self._scan_start

    @property
    def scan_end(self) -> int:
        """Offset just past the last matched directive."""
        return self._scan_end

    @property
    def buffer(self) -> StringBuilder:
        """The StringBuilder collecting output."""
        return self._check_alive()

    # =========================================================================
    # Scanning
    # =========================================================================

    def next_directive(self, accepted_chars: Collection[str]) -> str:
        """Advance to the next directive and return it.

        Literal text before the directive, and any ``%%`` escapes on the
        way, are written to the output. Nothing is written and the cursors
        do not move when the scan fails.

        Args:
            accepted_chars: Conversion characters valid for the value about
                to be substituted, e.g. ``"di"``

        Returns:
            The full directive from ``%`` through its conversion character

        Raises:
            FormatError: NOT_FOUND if no directive remains, INVALID if the
                last directive is never terminated, MISMATCH if its
                conversion character is not accepted
        """
        buffer = self._check_alive()
        fmt = self._format
        length = len(fmt)
        pending: list[str] = []
        end = self._scan_end

        while True:
            start = fmt.find(PERCENT, end)
            if start == -1 or start + 1 == length:
                raise FormatError(
                    FormatErrorReason.NOT_FOUND,
                    format_string=fmt,
                    offset=start if start != -1 else None,
                )

            # Literal text up to the directive
            pending.append(fmt[end:start])

            pos = start + 1
            while pos < length and fmt[pos] in DIRECTIVE_BODY:
                pos += 1
            if pos == length:
                raise FormatError(
                    FormatErrorReason.INVALID,
                    format_string=fmt,
                    offset=start,
                    directive=fmt[start:],
                )

            end = pos + 1
            if fmt[pos] == PERCENT:
                pending.append(PERCENT)
                continue
            if fmt[pos] not in accepted_chars:
                raise FormatError(
                    FormatErrorReason.MISMATCH,
                    format_string=fmt,
                    offset=start,
                    directive=fmt[start:end],
                )
            break

        for fragment in pending:
            buffer.append(fragment)
        self._scan_start = start
        self._scan_end = end
        return fmt[start:end]

    def reset_after_substitution(self) -> None:
        """Flush the literal tail and rewind to the start of the format.

        Lets one format string be applied again to the next value, as
        format_sequence() does between elements.
        """
        buffer = self._check_alive()
        buffer.append(self._literal_tail())
        self._scan_start = 0
        self._scan_end = 0

    def finalize(self) -> str:
        """Append the remaining literal tail and return the full output.

        Every call appends the tail again, so a second call repeats it.
        Under ``strict_materialize`` the second call raises instead.

        Raises:
            SessionError: Session released, or repeated under strict config
        """
        buffer = self._check_alive()
        if self._materialized and self._config.strict_materialize:
            raise SessionError("session already materialized")
        self._materialized += 1
        buffer.append(self._literal_tail())
        result = buffer.materialize()

        acc = get_format_accumulator()
        if acc is not None:
            acc.record_output(len(result))
        return result

    def _literal_tail(self) -> str:
        # Unscanned text is literal, but escapes ("%%", "%5%") still render
        # as one "%", matched by the same rule next_directive() uses
        fmt = self._format
        length = len(fmt)
        parts: list[str] = []
        end = self._scan_end

        while True:
            start = fmt.find(PERCENT, end)
            if start == -1:
                break
            pos = start + 1
            while pos < length and fmt[pos] in DIRECTIVE_BODY:
                pos += 1
            if pos < length and fmt[pos] == PERCENT:
                parts.append(fmt[end:start])
                parts.append(PERCENT)
            else:
                # Unconsumed directive or unterminated "%" stays verbatim
                parts.append(fmt[end : min(pos + 1, length)])
            end = min(pos + 1, length)

        parts.append(fmt[end:])
        return "".join(parts)

    def _check_alive(self) -> StringBuilder:
        if self._buffer is None:
            raise SessionError("session already released")
        if self._config.enforce_owner_thread and threading.get_ident() != self._owner:
            raise SessionError("session used from a thread other than its creator")
        return self._buffer

    def __repr__(self) -> str:
        return (
            f"FormatSession({self._format!r}, scan_end={self._scan_end}, "
            f"refcount={self._references})"
        )
