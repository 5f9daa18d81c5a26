"""Formatter handles: chained, shared access to one FormatSession.

A Formatter is a lightweight view of a session. Every chained operation
mutates the shared session and returns a new handle on it, so an
expression such as

    >>> (Formatter("%s is %d years old") % "Ada" % 36).materialize()
    'Ada is 36 years old'

reads like repeated application of one operator while a single scan
cursor and output buffer advance underneath.

Each handle holds one reference to the session and gives it back exactly
once: on close(), when leaving a ``with`` block, or when the handle is
garbage collected. The session is torn down when the last reference goes.

Thread Safety:
    Handles of one session form a single sequential chain. They are not
    meant to be shared across threads (see FormatSession).

"""

from __future__ import annotations

from collections.abc import Collection
from types import TracebackType

from chainfmt.arguments import as_argument
from chainfmt.session import FormatSession


class Formatter:
    """Copyable front end of a FormatSession.

    Usage:
        >>> f = Formatter("%-5s|%5.2f|")
        >>> f %= "ab"
        >>> f %= 3.14159
        >>> f.materialize()
        'ab   | 3.14|'

        >>> # Literal injection between substitutions
        >>> (Formatter("%d%d") % 1).append(" and ").materialize()
        '1 and %d'

    """

    __slots__ = ("_closed", "_session")

    def __init__(self, fmt: str) -> None:
        """Start a new session over ``fmt``.

        Args:
            fmt: printf-style format string
        """
        self._closed = True
        self._session = FormatSession(fmt)
        self._closed = False

    @classmethod
    def _share(cls, session: FormatSession) -> Formatter:
        session.retain()
        handle = cls.__new__(cls)
        handle._session = session
        handle._closed = False
        return handle

    # =========================================================================
    # Lifetime
    # =========================================================================

    def copy(self) -> Formatter:
        """Return another handle on the same session."""
        return self._share(self._session)

    __copy__ = copy

    def close(self) -> None:
        """Give this handle's reference back. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        self._session.release()

    def __enter__(self) -> Formatter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()

    @property
    def session(self) -> FormatSession:
        return self._session

    @property
    def closed(self) -> bool:
        return self._closed

    # =========================================================================
    # Chained operations
    # =========================================================================

    def substitute(self, accepted_chars: Collection[str], value: object) -> Formatter:
        """Render ``value`` into the next directive.

        Args:
            accepted_chars: Conversion characters valid for ``value``
            value: Value handed to the native formatter

        Returns:
            New handle on the same, advanced session

        Raises:
            FormatError: No fitting directive, or rendering failed
        """
        directive = self._session.next_directive(accepted_chars)
        self._session.buffer.append_formatted(directive, value)
        return self._share(self._session)

    def append(self, text: str) -> Formatter:
        """Append literal text to the output, bypassing the scanner."""
        self._session.buffer.append(text)
        return self._share(self._session)

    def reset(self) -> None:
        self._session.reset_after_substitution()

    def next_directive(self, accepted_chars: Collection[str]) -> str:
        return self._session.next_directive(accepted_chars)

    def materialize(self) -> str:
        """Flush the remaining literal text and return the output.

        Each call flushes the tail again; materialize a session once.
        """
        return self._session.finalize()

    def __mod__(self, value: object) -> Formatter:
        argument = as_argument(value)
        return self.substitute(argument.accepted, argument.value)

    def __imod__(self, value: object) -> Formatter:
        (self % value).close()
        return self

    def __str__(self) -> str:
        return self.materialize()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"refcount={self._session.refcount}"
        return f"Formatter({self._session.format!r}, {state})"
