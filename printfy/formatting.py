"""
printfy argument sequencer and entry points.

- format(stream, template, *args): drive scanner, interpreter and dispatcher
  across the template, one directive per argument.
- sformat(template, *args): format into a fresh in-memory stream and return the text.
- printf(template, *args): format straight to sys.stdout.

The number of directives must equal the number of arguments; any mismatch is
a fault, never a partial render of the remaining template.

Quick examples
    >>> sformat("%s, %s %d, %.2d:%.2d", "Wednesday", "July", 27, 14, 44)
    'Wednesday, July 27, 14:44'
    >>> sformat("%-6s|%6.2f|%#x", "id", 3.14159, 255)
    'id    |  3.14|0xff'
"""
import sys

from .directives import findend, interpret, scanliteral
from .dispatch import render
from .faults import *
from .streams import FormatStream


def format(stream, template, /, *args):
    """
    format `args` into `stream` following `template`.

    parameters
    - stream: FormatStream | any object with write(str)
      plain writers are wrapped in a FormatStream with a baseline context for
      the duration of the call.
    - template: str
    - args: the values, consumed in order, one per directive.

    faults
    - TooManyArgumentsError when the directives run out before the arguments.
    - NotEnoughArgumentsError when directives remain after the last argument
      (a malformed trailing directive reports its MalformedSpecError first).
    - any MalformedSpecError raised while scanning or interpreting.
    """
    if not isinstance(template, str):
        raise TypeError("format() template must be a string")
    if not isinstance(stream, FormatStream):
        stream = FormatStream(stream)

    pos = 0
    for index, value in enumerate(args):
        start = scanliteral(stream, template, pos)
        if start is None:
            trigger(TooManyArgumentsError(
                "too many arguments for format string (not enough conversion specifiers): "
                "%d given, %d used" % (len(args), index)),
                title="too many arguments",
                code=FaultCode.TOO_MANY_ARGUMENTS,
                hint="add a directive for every argument, or drop the extra arguments",
                template=template,
                index=len(template),
            )
        end = findend(template, start)
        context, flags = interpret(template[start:end], template=template, offset=start)
        render(stream, context, flags, value)
        pos = end

    if (start := scanliteral(stream, template, pos)) is not None:
        findend(template, start)
        trigger(NotEnoughArgumentsError(
            "not enough arguments for format string (too many conversion specifiers): "
            "%d given" % len(args)),
            title="not enough arguments",
            code=FaultCode.NOT_ENOUGH_ARGUMENTS,
            hint="pass a value for every directive, or write '%%' for a literal percent sign",
            template=template,
            index=start - 1,
        )


def sformat(template, /, *args):
    stream = FormatStream()
    format(stream, template, *args)
    return stream.getvalue()


def printf(template, /, *args):
    format(sys.stdout, template, *args)


__all__ = (
    "format",
    "sformat",
    "printf",
)
