"""chainfmt FormatAccumulator: opt-in profiling for formatting sessions.

This module provides accumulated metrics while formatting:
- Sessions created
- Values substituted
- Rendering retries (first-guess buffer too small)
- Characters materialized

Zero overhead when disabled (get_format_accumulator() returns None).

Example:
    from chainfmt import Formatter
    from chainfmt.profiling import profiled_format

    with profiled_format() as metrics:
        (Formatter("%s is %d") % "Ada" % 36).materialize()

    print(metrics.summary())
    # {"total_ms": 0.1, "sessions": 1, "substitutions": 2, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class FormatAccumulator:
    """Accumulated metrics during formatting.

    Attributes:
        start_time: Profiling start timestamp.
        sessions: Number of FormatSession objects created.
        substitutions: Number of values rendered into sessions.
        buffer_retries: Renderings that outgrew the first-guess buffer.
        output_length: Total characters returned by materialize calls.

    """

    start_time: float = field(default_factory=perf_counter)
    sessions: int = 0
    substitutions: int = 0
    buffer_retries: int = 0
    output_length: int = 0

    def record_session(self) -> None:
        self.sessions += 1

    def record_substitution(self, *, retried: bool) -> None:
        self.substitutions += 1
        if retried:
            self.buffer_retries += 1

    def record_output(self, length: int) -> None:
        self.output_length += length

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of format metrics.

        Returns:
            Dict with total_ms, sessions, substitutions, buffer_retries,
            output_length.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "sessions": self.sessions,
            "substitutions": self.substitutions,
            "buffer_retries": self.buffer_retries,
            "output_length": self.output_length,
        }


_accumulator: ContextVar[FormatAccumulator | None] = ContextVar(
    "format_accumulator",
    default=None,
)


def get_format_accumulator() -> FormatAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_format() -> Iterator[FormatAccumulator]:
    """Context manager for profiled formatting.

    Creates a FormatAccumulator and makes it available via
    get_format_accumulator() for the duration of the with block.

    Yields:
        FormatAccumulator that will be populated by formatting calls.

    """
    acc = FormatAccumulator()
    token: Token[FormatAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
