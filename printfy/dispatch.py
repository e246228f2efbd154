"""
printfy value dispatcher: render one argument under one directive's context.

render() is the only place a stream's context changes while formatting, and it
always hands the context back exactly as it found it.
"""
from .context import SideFlags
from .streams import FormatStream
from .utils import Unset
from .values import address, character, narrow, truncate

# conversions under which a character-typed value prints its code
CHARACTER_AS_INTEGER = frozenset("udioxX")


def formatvalue(stream, value, /):
    """
    render `value` into `stream` under the context the stream already carries.

    character-typed values come first, then the %c and %p capability checks,
    then the generic insertion.
    """
    conversion = stream.context.conversion
    if (code := character(value)) is not Unset:
        return stream.insert(code if conversion in CHARACTER_AS_INTEGER else chr(code))
    if conversion == "c" and (char := narrow(value)) is not Unset:
        return stream.insert(char)
    if conversion == "p" and (where := address(value)) is not Unset:
        return stream.pad("0x", "%x" % where)
    return stream.insert(value)


def render(stream, context, flags, value, /):
    """
    render one value with a directive's context and side flags.

    behavior
    - the stream context is saved, replaced by `context`, and restored on every
      exit path (including faults raised by user hooks).
    - values whose type defines __printf__(stream, context) render themselves.
    - without side flags the value goes through formatvalue() directly.
    - with side flags the value is rendered into a temporary stream first:
      • SPACE_PAD_POSITIVE forces showpos, then every '+' becomes a space.
      • TRUNCATE_TO_PRECISION writes at most `precision` characters of the
        value's bounded text view when it has one; longer results are cut.
    """
    with stream.saved() as active:
        active.assign(context)
        if callable(getattr(type(value), "__printf__", None)):
            return value.__printf__(stream, active)
        if not flags:
            return formatvalue(stream, value)

        buffer = FormatStream(context=active)
        if flags & SideFlags.SPACE_PAD_POSITIVE:
            buffer.context.showpos = True

        truncated = Unset
        if flags & SideFlags.TRUNCATE_TO_PRECISION:
            truncated = truncate(value, active.precision)
        if truncated is not Unset:
            buffer.write(truncated)
        else:
            formatvalue(buffer, value)

        result = buffer.getvalue()
        if flags & SideFlags.SPACE_PAD_POSITIVE:
            result = result.replace("+", " ")
        if flags & SideFlags.TRUNCATE_TO_PRECISION and len(result) > active.precision:
            stream.write(result[:active.precision])
        else:
            stream.insert(result)


__all__ = (
    "formatvalue",
    "render",
)
