"""snprintf-shaped bridge to the host's printf-style formatting.

chainfmt never converts values to text itself. Every directive is handed to
Python's ``%`` operator, which implements the C conversion grammar with a
few differences handled here:

- C length modifiers (``hh``, ``l``, ``ll``, ``z``...) are stripped. The host
  skips at most one ``h``/``l``/``L`` and rejects the rest.
- ``%p`` has no host equivalent. Pointers render as ``0x``-prefixed hex,
  and a null pointer as ``(nil)``.

The bridge reports results the way C's ``snprintf`` does: the text that fit
in ``size - 1`` characters plus the full required length, or a negative
length when the directive cannot render the value.
"""

from __future__ import annotations

from chainfmt.charsets import FLAG_CHARS, LENGTH_MODIFIERS, POINTER_CONVERSIONS
from chainfmt.utils.logger import get_logger

logger = get_logger(__name__)

NULL_POINTER = "(nil)"

_FLAG_PREFIX = "".join(sorted(FLAG_CHARS))


def to_host_directive(directive: str) -> str:
    """Translate a C directive into one the host ``%`` operator accepts.

    Args:
        directive: Complete directive, e.g. ``"%-08lld"``

    Returns:
        Equivalent host directive, e.g. ``"%-08d"``

    Example:
        >>> to_host_directive("%zu")
        '%u'
        >>> to_host_directive("%12p")
        '%#12x'
    """
    conversion = directive[-1]
    body = "".join(ch for ch in directive[1:-1] if ch not in LENGTH_MODIFIERS)
    if conversion in POINTER_CONVERSIONS:
        return f"%#{body}x"
    return f"%{body}{conversion}"


def _null_pointer_directive(directive: str) -> str:
    # glibc keeps only left-justification and field width for "(nil)"
    body = "".join(ch for ch in directive[1:-1] if ch not in LENGTH_MODIFIERS)
    spec = body.lstrip(_FLAG_PREFIX)
    flags = body[: len(body) - len(spec)]
    width = spec.split(".", 1)[0]
    return f"%{'-' if '-' in flags else ''}{width}s"


def render_directive(directive: str, value: object) -> str:
    """Render one value with one directive.

    Raises whatever the host raises (TypeError, ValueError, OverflowError)
    when the pair cannot be rendered.
    """
    if directive[-1:] in POINTER_CONVERSIONS and not value:
        return _null_pointer_directive(directive) % (NULL_POINTER,)
    return to_host_directive(directive) % (value,)


def snprintf(size: int, directive: str, value: object) -> tuple[str, int]:
    """Render ``value`` into a buffer of ``size`` slots.

    One slot is reserved for the terminator, so at most ``size - 1``
    characters are returned.

    Args:
        size: Buffer size including the terminator slot
        directive: Single directive such as ``"%5.2f"``
        value: Value to render

    Returns:
        Tuple of (text that fit, required length). The required length is
        ``-1`` when the host rejects the directive/value pair.

    Example:
        >>> snprintf(4, "%d", 123456)
        ('123', 6)
    """
    if not directive.startswith("%") or len(directive) < 2:
        return "", -1
    try:
        rendered = render_directive(directive, value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Host rejected directive %r for %r", directive, value, exc_info=True)
        return "", -1
    if size <= 0:
        return "", len(rendered)
    return rendered[: size - 1], len(rendered)
