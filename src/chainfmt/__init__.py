"""
chainfmt: Chained printf-style formatting for Python

Builds a formatted string one value at a time. Each ``%`` applied to a
Formatter consumes the next directive of the format string, checks that its
conversion character fits the value's kind, and renders the value with the
host's printf-style formatting.

Quick Start:
    >>> from chainfmt import Formatter
    >>> (Formatter("%s is %d years old") % "Ada" % 36).materialize()
    'Ada is 36 years old'

    >>> # Kinds without a Python counterpart are explicit
    >>> from chainfmt import UInt
    >>> (Formatter("mask=%08X") % UInt(0xBEEF)).materialize()
    'mask=0000BEEF'

    >>> # One directive, many values
    >>> from chainfmt import format_sequence
    >>> format_sequence("%d", [1, 2, 3])
    '1, 2, 3'

Installation:
    pip install chainfmt              # Zero runtime dependencies
"""

from chainfmt.arguments import (
    Argument,
    Char,
    Float,
    Int,
    Pointer,
    String,
    UInt,
    as_argument,
)
from chainfmt.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from chainfmt.errors import ChainfmtError, FormatError, FormatErrorReason, SessionError
from chainfmt.formatter import Formatter
from chainfmt.helpers import format_sequence, sprintf
from chainfmt.profiling import FormatAccumulator, get_format_accumulator, profiled_format
from chainfmt.session import FormatSession
from chainfmt.stringbuilder import StringBuilder

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "Formatter",
    "FormatSession",
    "StringBuilder",
    # Helpers
    "format_sequence",
    "sprintf",
    # Argument kinds
    "Argument",
    "Char",
    "Float",
    "Int",
    "Pointer",
    "String",
    "UInt",
    "as_argument",
    # Configuration
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
    # Errors
    "ChainfmtError",
    "FormatError",
    "FormatErrorReason",
    "SessionError",
    # Profiling
    "FormatAccumulator",
    "profiled_format",
    "get_format_accumulator",
]
