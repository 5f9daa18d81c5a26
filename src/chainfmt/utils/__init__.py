"""Utility modules for chainfmt.

Provides:
- logger: get_logger for logging
"""

from chainfmt.utils.logger import get_logger

__all__ = [
    "get_logger",
]
