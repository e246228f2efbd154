"""
printfy formatting context: "how to render the next value".

Overview
- Base / FloatStyle / Align: the numeric base, float notation and padding
  placement selected by a directive (None means "cleared", i.e. the value's own
  default rendering).
- FormattingContext: the mutable state a FormatStream carries (base, case,
  float style, alignment, fill, width, precision, showbase/showpoint/showpos)
  plus the conversion character of the directive that produced it.
- SideFlags: behaviors with no field in FormattingContext, applied by the
  dispatcher as text post-processing.

Baseline
- width 0, precision 6, fill ' ', everything else cleared. reset() returns a
  context to it; the interpreter always starts from a reset context.
"""
from enum import Enum, IntFlag


class Base(Enum):
    DEC = 10
    OCT = 8
    HEX = 16


class FloatStyle(Enum):
    FIXED = "f"
    SCIENTIFIC = "e"


class Align(Enum):
    LEFT = "<"
    RIGHT = ">"
    INTERNAL = "="


class SideFlags(IntFlag):
    TRUNCATE_TO_PRECISION = 1 << 0  # truncate rendered text to precision
    SPACE_PAD_POSITIVE = 1 << 1  # render the positive sign as a space


class FormattingContext:
    __slots__ = (
        "base",
        "uppercase",
        "floatstyle",
        "align",
        "fill",
        "width",
        "precision",
        "showbase",
        "showpoint",
        "showpos",
        "conversion",
    )

    def __init__(self, **fields):
        self.reset()
        for name, value in fields.items():
            setattr(self, name, value)

    def reset(self):
        """
        return the context to the baseline and hand it back (for chaining).
        """
        self.base = None
        self.uppercase = False
        self.floatstyle = None
        self.align = None
        self.fill = " "
        self.width = 0
        self.precision = 6
        self.showbase = False
        self.showpoint = False
        self.showpos = False
        self.conversion = ""
        return self

    def assign(self, other, /):
        """
        copy every field of `other` into this context (iostream's copyfmt).
        """
        if not isinstance(other, FormattingContext):
            raise TypeError("assign() argument must be a formatting context")
        for name in self.__slots__:
            setattr(self, name, getattr(other, name))
        return self

    def copy(self):
        return type(self)().assign(self)

    def __copy__(self):
        return self.copy()

    def __replace__(self, /, **overrides):
        unknown = overrides.keys() - set(self.__slots__)
        if unknown:
            raise TypeError("unknown formatting context field(s): %s" % ", ".join(sorted(unknown)))
        replica = self.copy()
        for name, value in overrides.items():
            setattr(replica, name, value)
        return replica

    def __eq__(self, other, /):
        if not isinstance(other, FormattingContext):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    __hash__ = None

    def __rich_repr__(self):
        baseline = FormattingContext()
        for name in self.__slots__:
            yield name, getattr(self, name), getattr(baseline, name)

    def __repr__(self):
        changed = ", ".join(
            "%s=%r" % (name, value)
            for name, value, default in self.__rich_repr__()
            if value != default
        )
        return "%s(%s)" % (type(self).__name__, changed)


__all__ = (
    "Base",
    "FloatStyle",
    "Align",
    "SideFlags",
    "FormattingContext",
)
