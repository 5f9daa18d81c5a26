"""Character sets for O(1) directive classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: C11 7.21.6.1 (fprintf conversion specifications)

Usage:
    from chainfmt.charsets import SIGNED_CONVERSIONS

    if terminator in SIGNED_CONVERSIONS:  # O(1) lookup
        ...
"""

# Flag characters
FLAG_CHARS: frozenset[str] = frozenset("-+ #0'")

# Field width / precision (including "*" for an argument-supplied value)
WIDTH_CHARS: frozenset[str] = frozenset("0123456789.*")

# Length modifiers (hh, h, l, ll, L, q, j, z, t)
LENGTH_MODIFIERS: frozenset[str] = frozenset("hlLqjzt")

# Everything allowed between "%" and the conversion character
DIRECTIVE_BODY: frozenset[str] = FLAG_CHARS | WIDTH_CHARS | LENGTH_MODIFIERS

# Accepted conversion characters, one set per value kind
STRING_CONVERSIONS: frozenset[str] = frozenset("s")
CHAR_CONVERSIONS: frozenset[str] = frozenset("c")
SIGNED_CONVERSIONS: frozenset[str] = frozenset("di")
UNSIGNED_CONVERSIONS: frozenset[str] = frozenset("uxXo")
FLOAT_CONVERSIONS: frozenset[str] = frozenset("fFeEgG")
POINTER_CONVERSIONS: frozenset[str] = frozenset("p")

# Escape terminator: "%%" renders a literal percent sign
PERCENT = "%"
