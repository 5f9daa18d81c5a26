"""Logger lookup for chainfmt modules.

chainfmt only emits DEBUG records (render retries, session teardown).
Every logger hangs off the "chainfmt" root, which carries a NullHandler so
a host application sees nothing until it configures logging itself.
"""

from __future__ import annotations

import logging

ROOT = "chainfmt"

logging.getLogger(ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the "chainfmt" root.

    >>> get_logger("session").name
    'chainfmt.session'
    """
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)
