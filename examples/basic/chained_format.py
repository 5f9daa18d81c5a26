"""Build a string one value at a time; each % consumes the next directive."""

from chainfmt import Formatter, UInt, format_sequence

print((Formatter("%s is %d years old") % "Ada" % 36).materialize())
print((Formatter("flags=%#06x, ratio=%.1f%%") % UInt(42) % 87.5).materialize())
print(format_sequence("<%d>", [1, 2, 3], sep=" "))
