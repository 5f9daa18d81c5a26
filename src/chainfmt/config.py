"""ContextVar-based format configuration for chainfmt.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A FormatSession captures the active config once, when it is created, and
reads it for the rest of its lifetime.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from chainfmt.config import FormatConfig, format_config_context

    with format_config_context(FormatConfig(strict_materialize=True)):
        text = (Formatter("%d items") % 3).materialize()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        initial_buffer_size: First-guess buffer size for rendering one value;
            longer renderings are retried once with an exact size
        default_separator: Separator used by format_sequence() when none is given
        strict_materialize: Raise SessionError when a session is materialized
            a second time instead of appending the literal tail again
        enforce_owner_thread: Reject session use from a thread other than the
            one that created it

    """

    initial_buffer_size: int = 16
    default_separator: str = ", "
    strict_materialize: bool = False
    enforce_owner_thread: bool = True

    def __post_init__(self) -> None:
        if self.initial_buffer_size < 1:
            raise ValueError(
                f"initial_buffer_size must be positive, got {self.initial_buffer_size}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "strict_materialize": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_materialize
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (thread-local).

    Returns:
        The active FormatConfig for this thread/context.

    """
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated formatting.

    Args:
        config: FormatConfig to use within the context.

    Yields:
        None

    Example:
        >>> with format_config_context(FormatConfig(default_separator="; ")):
        ...     format_sequence("%d", [1, 2])
        '1; 2'

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
]
