r"""
printfy directive scanning and interpretation.

The format mini-language is the one from C99:

    directive    := '%' flags* width? ('.' precision)? length* type
    flags        := '#' | '0' | '-' | ' ' | '+'
    width        := digit+                 ('*' rejected)
    precision    := digit+ | '-' digit+    ('*' rejected; negative means 0)
    length       := 'l' | 'h' | 'L' | 'j' | 'z' | 't'   (parsed, ignored)
    type         := one of "diouxXeEfFgGaAcspn"
    '%%'         := one literal '%'

Length modifiers carry no meaning here: the type always comes from the value.

Operations
- scanliteral(stream, template, pos): copy literal text up to the next
  directive, collapsing '%%'.
- findend(template, pos): locate the end of the directive starting at pos.
- interpret(directive): turn a directive body into a fresh FormattingContext
  and the SideFlags it needs.
"""
import string

from .context import Align, Base, FloatStyle, FormattingContext, SideFlags
from .faults import *
from .utils import Unset, getlogger, nullify

logger = getlogger(__name__)

FLAGS = frozenset("#0- +")
LENGTH_MODIFIERS = frozenset("lhLjzt")
INTEGER_CONVERSIONS = frozenset("diuoxXp")
TERMINATORS = frozenset(string.ascii_letters) - LENGTH_MODIFIERS


def scanliteral(stream, template, pos=0, /):
    """
    write the literal text starting at `pos` and return where the next directive begins.

    returns
    - the index just past the '%' that opens the next directive; equal to
      len(template) when the template ends with a lone '%'.
    - None when the rest of the template was literal text.
    """
    start = pos
    while (pos := template.find("%", pos)) >= 0:
        stream.write(template[start:pos])
        pos += 1
        if template[pos:pos + 1] != "%":
            return pos
        # the escaped '%' opens the next literal span
        start = pos
        pos += 1
    stream.write(template[start:])
    return None


def findend(template, pos, /):
    """
    return the index one past the conversion character of the directive at `pos`.

    `pos` points just after the '%'. Length modifiers are skipped; any other
    ASCII letter terminates the directive.
    """
    if pos >= len(template):
        trigger(MissingConversionError(
            "missing conversion after '%%' at offset %d" % (pos - 1)),
            title="missing conversion",
            code=FaultCode.MISSING_CONVERSION,
            hint="write '%%' for a literal percent sign",
            template=template,
            index=pos - 1,
        )
    for index in range(pos, len(template)):
        if template[index] in TERMINATORS:
            return index + 1
    trigger(UnterminatedDirectiveError(
        "unterminated directive %r at offset %d" % ("%" + template[pos:], pos - 1)),
        title="unterminated directive",
        code=FaultCode.UNTERMINATED_DIRECTIVE,
        hint="end the directive with a conversion character such as 'd' or 's'",
        template=template,
        index=len(template),
    )


def _digits(text, index, /):
    end = index
    while end < len(text) and text[end] in string.digits:
        end += 1
    if end == index:
        return Unset, index
    return int(text[index:end]), end


def interpret(directive, /, *, template=Unset, offset=0):
    """
    parse a directive body (the text after '%') into (FormattingContext, SideFlags).

    parameters
    - directive: str
      flags, width, precision, length modifiers and the conversion character.
    - template / offset: where the directive sits, used only to point at the
      offending character when a fault is triggered.

    order of application
    1) flags, greedily: '#' showbase+showpoint; '0' zero fill with internal
       alignment unless left-aligned; '-' left alignment with space fill;
       ' ' space-pad-positive unless showpos; '+' showpos (drops ' ').
    2) width; '*' is rejected.
    3) precision after '.'; '*' is rejected, '-N' and a bare '.' mean 0.
    4) length modifiers, skipped.
    5) conversion character ('s' when absent).

    integer conversions given a precision but no width treat the precision as
    a minimum digit count: width = precision, internal alignment, '0' fill.
    """
    context = FormattingContext()
    flags = SideFlags(0)
    source, base = (template, offset) if template is not Unset else ("%" + directive, 1)
    length = len(directive)
    index = 0

    # 1) flags
    while index < length and directive[index] in FLAGS:
        match directive[index]:
            case "#":
                context.showbase = context.showpoint = True
            case "0":
                # internal padding keeps the sign in front: -0010, not 000-10
                if context.align is not Align.LEFT:
                    context.fill = "0"
                    context.align = Align.INTERNAL
            case "-":
                context.fill = " "
                context.align = Align.LEFT
            case " ":
                if not context.showpos:
                    flags |= SideFlags.SPACE_PAD_POSITIVE
            case "+":
                context.showpos = True
                flags &= ~SideFlags.SPACE_PAD_POSITIVE
        index += 1

    # 2) width
    width, index = _digits(directive, index)
    context.width = nullify(width, 0)
    if directive[index:index + 1] == "*":
        trigger(DynamicWidthError(
            "dynamic width '*' is not supported in %r" % ("%" + directive)),
            title="dynamic width unsupported",
            code=FaultCode.DYNAMIC_WIDTH,
            hint="write the width as a number, or pre-format the value with the width you need",
            template=source,
            index=base + index,
        )

    # 3) precision
    precision = Unset
    if directive[index:index + 1] == ".":
        index += 1
        if directive[index:index + 1] == "*":
            trigger(DynamicPrecisionError(
                "dynamic precision '*' is not supported in %r" % ("%" + directive)),
                title="dynamic precision unsupported",
                code=FaultCode.DYNAMIC_PRECISION,
                hint="write the precision as a number after the '.'",
                template=source,
                index=base + index,
            )
        if directive[index:index + 1] == "-":
            # negative precisions are ignored, as by printf
            _, index = _digits(directive, index + 1)
            precision = 0
        else:
            digits, index = _digits(directive, index)
            precision = nullify(digits, 0)
        context.precision = precision

    # 4) length modifiers
    while index < length and directive[index] in LENGTH_MODIFIERS:
        index += 1

    # 5) conversion character
    conversion = directive[index] if index < length else "s"
    context.conversion = conversion
    match conversion:
        case "d" | "i" | "u":
            context.base = Base.DEC
        case "o":
            context.base = Base.OCT
        case "x" | "X" | "p":
            context.base = Base.HEX
        case "e" | "E":
            context.floatstyle = FloatStyle.SCIENTIFIC
            context.base = Base.DEC
        case "f" | "F":
            context.floatstyle = FloatStyle.FIXED
        case "g" | "G":
            context.base = Base.DEC
            context.floatstyle = None
        case "a" | "A":
            logger.debug("hexadecimal float conversion unsupported", directive="%" + directive)
        case "c":
            pass  # resolved by the dispatcher from the value's capabilities
        case "s":
            if precision is not Unset:
                flags |= SideFlags.TRUNCATE_TO_PRECISION
        case "n":
            trigger(WriteBackConversionError(
                "%%n conversion is not supported in %r" % ("%" + directive)),
                title="write-back conversion unsupported",
                code=FaultCode.WRITEBACK_CONVERSION,
                hint="count the output yourself, e.g. with len(sformat(...))",
                template=source,
                index=base + index,
            )
    if conversion in ("X", "E", "F", "G"):
        context.uppercase = True

    if conversion in INTEGER_CONVERSIONS and precision is not Unset and width is Unset:
        context.width = precision
        context.align = Align.INTERNAL
        context.fill = "0"

    return context, flags


__all__ = (
    "scanliteral",
    "findend",
    "interpret",
)
