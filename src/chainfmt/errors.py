"""Exception classes for chainfmt.

Provides standardized exceptions for error handling throughout chainfmt.
"""

from __future__ import annotations

from enum import Enum


class ChainfmtError(Exception):
    """Base exception for all chainfmt errors.

    Subclass this for specific error categories.
    """

    pass


class FormatErrorReason(Enum):
    """Why a directive could not be matched or rendered."""

    NOT_FOUND = "specifier not found"
    INVALID = "invalid specifier"
    MISMATCH = "specifier/type mismatch"
    ENCODING = "format error"


class FormatError(ChainfmtError):
    """Error while scanning or rendering a format directive.

    Raised when the format string has no further directive, a directive
    is never terminated, its conversion character does not fit the value
    being substituted, or the native formatter rejects it.

    None of these are recoverable: the format string does not fit the
    sequence of values the program supplies.
    """

    def __init__(
        self,
        reason: FormatErrorReason,
        *,
        format_string: str | None = None,
        offset: int | None = None,
        directive: str | None = None,
    ) -> None:
        """Initialize format error with optional location.

        Args:
            reason: Failure category
            format_string: Format string being scanned (optional)
            offset: 0-based index of the offending ``%`` (optional)
            directive: The directive text involved (optional)
        """
        self.reason = reason
        self.message = reason.value
        self.format_string = format_string
        self.offset = offset
        self.directive = directive

        detail = self.message
        if directive is not None:
            detail += f" {directive!r}"
        if offset is not None:
            detail += f" at offset {offset}"
        if format_string is not None:
            detail += f" in {format_string!r}"

        super().__init__(detail)


class SessionError(ChainfmtError):
    """Error when a format session is used outside its contract.

    Raised for use after the last handle released the session, a second
    release, a repeated materialize under strict config, or use from a
    thread other than the one that created the session.
    """

    pass
