"""
printfy value capabilities and per-type rendering hooks.

What this module provides
- stringify(value, context): the generic text hook (the "insert into stream"
  operation). A functools.singledispatch function; register your own types
  with @stringify.register(MyType). Implementations return either a str or a
  (prefix, body) pair, where the prefix (sign, base prefix) is kept in front
  of internal padding.
- character(value): character code of a character-typed value (1-char str or
  bytes, ctypes.c_char / c_byte / c_ubyte), Unset for any other value.
- narrow(value): the single character a value losslessly converts to for the
  %c conversion, Unset when it has none.
- address(value): the opaque address a value exposes for %p, Unset when it has
  none. Never dereferences.
- truncate(value, length): at most `length` characters of a value's bounded
  text view, Unset when the value has none.

Capability protocols
- SupportsChar: objects defining __char__() -> str | int.
- SupportsAddress: objects defining __address__() -> int.

Rendering rules (generic path)
- int and other numbers.Integral: base from the context (decimal when
  cleared), '-' for negatives, '+' under showpos in decimal only, '0x'/'0X'
  or '0' base prefix under showbase for non-zero values, uppercase digits
  under uppercase.
- bool: "True"/"False" unless an integer base is active, then 1/0.
- float and other numbers.Real: notation from the float style (general when
  cleared), precision, '#' under showpoint, '+' under showpos. Integers are
  never turned into floats.
- str as-is; bytes/bytearray decoded as latin-1; ctypes scalars by value with
  "(null)" for NULL string pointers; anything else through str().
"""
import ctypes
import functools
import numbers
import operator
from typing import Protocol, SupportsIndex, runtime_checkable

from .context import Base
from .utils import Unset

MAX_CODEPOINT = 0x10FFFF


@runtime_checkable
class SupportsChar(Protocol):
    def __char__(self): ...


@runtime_checkable
class SupportsAddress(Protocol):
    def __address__(self): ...


@functools.singledispatch
def character(value, /):
    return Unset


@character.register(str)
def _(value, /):
    return ord(value) if len(value) == 1 else Unset


@character.register(bytes)
@character.register(bytearray)
def _(value, /):
    return value[0] if len(value) == 1 else Unset


@character.register(ctypes.c_char)
def _(value, /):
    return value.value[0] if value.value else 0


@character.register(ctypes.c_byte)
@character.register(ctypes.c_ubyte)
def _(value, /):
    return value.value


def narrow(value, /):
    """
    resolve the character a value stands for under %c.

    order
    - character-typed values use their own code.
    - SupportsChar objects answer through __char__ (a 1-char str or a code point).
    - integer-like values (SupportsIndex) qualify when they fit a code point.
    """
    if (code := character(value)) is not Unset:
        return chr(code)
    if isinstance(value, SupportsChar):
        char = value.__char__()
        return chr(operator.index(char)) if not isinstance(char, str) else char
    if isinstance(value, SupportsIndex):
        code = operator.index(value)
        if 0 <= code <= MAX_CODEPOINT:
            return chr(code)
    return Unset


@functools.singledispatch
def address(value, /):
    if isinstance(value, SupportsAddress):
        return operator.index(value.__address__())
    return Unset


@address.register(ctypes._Pointer)
@address.register(ctypes.c_void_p)
@address.register(ctypes.c_char_p)
@address.register(ctypes.c_wchar_p)
def _(value, /):
    # cast instead of .value so string pointers are never read
    return ctypes.cast(value, ctypes.c_void_p).value or 0


@functools.singledispatch
def truncate(value, length, /):
    return Unset


@truncate.register(str)
def _(value, length, /):
    return value[:length]


@truncate.register(bytes)
@truncate.register(bytearray)
def _(value, length, /):
    return bytes(value[:length]).decode("latin-1")


@truncate.register(ctypes.c_char_p)
def _(value, length, /):
    if not ctypes.cast(value, ctypes.c_void_p).value:
        return Unset
    # read byte by byte: the buffer may not be NUL-terminated within `length`
    chars = ctypes.cast(value, ctypes.POINTER(ctypes.c_char))
    buffer = bytearray()
    while len(buffer) < length and (byte := chars[len(buffer)]) != b"\0":
        buffer += byte
    return buffer.decode("latin-1")


@functools.singledispatch
def stringify(value, context, /):
    return str(value)


@stringify.register(str)
def _(value, context, /):
    return value


@stringify.register(bytes)
@stringify.register(bytearray)
def _(value, context, /):
    return bytes(value).decode("latin-1")


@stringify.register(int)
def _(value, context, /):
    base = context.base or Base.DEC
    magnitude = abs(value)
    digits = {Base.DEC: "%d", Base.OCT: "%o", Base.HEX: "%x"}[base] % magnitude
    if value < 0:
        prefix = "-"
    elif context.showpos and base is Base.DEC:
        prefix = "+"
    else:
        prefix = ""
    # like printf's '#', zero never gets a base prefix
    if context.showbase and magnitude:
        prefix += {Base.DEC: "", Base.OCT: "0", Base.HEX: "0x"}[base]
    if context.uppercase:
        return prefix.upper(), digits.upper()
    return prefix, digits


@stringify.register(bool)
def _(value, context, /):
    if context.base is None:
        return str(value)
    return stringify.dispatch(int)(int(value), context)


@stringify.register(float)
def _(value, context, /):
    notation = context.floatstyle.value if context.floatstyle else "g"
    spec = "%s%s.%d%s" % (
        "+" if context.showpos else "",
        "#" if context.showpoint else "",
        context.precision,
        notation.upper() if context.uppercase else notation,
    )
    text = format(value, spec)
    if text.startswith(("+", "-")):
        return text[0], text[1:]
    return "", text


@stringify.register(numbers.Real)
def _(value, context, /):
    return stringify.dispatch(float)(float(value), context)


@stringify.register(numbers.Integral)
def _(value, context, /):
    return stringify.dispatch(int)(operator.index(value), context)


@stringify.register(ctypes._SimpleCData)
def _(value, context, /):
    if value.value is None:
        return "(null)"
    return stringify(value.value, context)


__all__ = (
    "SupportsChar",
    "SupportsAddress",
    "character",
    "narrow",
    "address",
    "truncate",
    "stringify",
)
