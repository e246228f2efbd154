"""
printfy faults (errors) and the process-wide error sink.

Scope
- FaultCode: canonical, stable numeric identifiers for every formatting fault.
  Codes are grouped by domain so logs and searches stay predictable.
- FormatException: base type that carries the reason message + options and
  knows how to render itself (template excerpt, caret, hint) through rich.
- trigger(): central entry point to surface any fault; routes it through the
  configured handler before any further template processing happens.
- configure() / errorhandler(): replace the handler (and rendering options)
  process-wide or for a scoped block.
- getdoc(): optional description lookup for a code from the host application.

Handlers
- abort (default): print the fault to stderr and terminate the process.
- propagate: raise the fault to the caller.
- any callable taking the fault; if it returns normally the fault is raised
  anyway, a format call never resumes after a fault.

Integration
- The scanner, interpreter and sequencer call trigger(fault, **ctx) with the
  template and the offending index so the rendering can point at it.
- Hosts may customize output via __prog__, __styles__, __codes__ and __docs__
  in __main__.
"""
import copy
import sys
from collections import defaultdict
from contextlib import contextmanager
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, UnsetType, getlogger

console = Console(stderr=True)
logger = getlogger(__name__)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the engine (stable identifiers).

    grouping (by high-level domain)
    - malformed directives (211xx)
      • UNTERMINATED_DIRECTIVE, MISSING_CONVERSION, DYNAMIC_WIDTH,
        DYNAMIC_PRECISION, WRITEBACK_CONVERSION
    - argument sequencing (212xx)
      • NOT_ENOUGH_ARGUMENTS, TOO_MANY_ARGUMENTS
    """
    # --- malformed directive errors (211xx) ---
    UNTERMINATED_DIRECTIVE      = 21101
    MISSING_CONVERSION          = 21102
    DYNAMIC_WIDTH               = 21103
    DYNAMIC_PRECISION           = 21104
    WRITEBACK_CONVERSION        = 21105

    # --- argument count errors (212xx) ---
    NOT_ENOUGH_ARGUMENTS        = 21201
    TOO_MANY_ARGUMENTS          = 21202

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class FormatException(Exception):
    def __init__(self, message=Unset, /, **options):
        if not isinstance(message, str | UnsetType):
            raise TypeError("%s() message must be a string" % type(self).__name__)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message) if self.message is not Unset else ""

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "template": "#E6E6F0",  # offending template excerpt
            "caret": "bold #FF4DA6",  # caret under the offending index
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "docs": "underline #00E5FF dim",
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        code = self.options.get("code")
        title = self.options.get("title")
        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "printfy"), styler("prog-name")),
            " — ",
            text(code.normalize() if code is not None else "?", styler("code")),
            " | ",
            text(str(title).title() if title else type(self).__name__, styler("error-title")),
            " ]"
        )
        renders = [text(self.message, styler("error-message"))]

        # template excerpt with a caret under the offending character
        if (template := self.options.get("template")) is not None:
            index = min(max(self.options.get("index", 0), 0), len(template))
            renders.append(Text.assemble("  ", text(repr(template)[1:-1] or " ", styler("template"))))
            renders.append(Text.assemble("  ", " " * len(repr(template[:index])[1:-1]), text("^", styler("caret"))))

        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
        if docs := self.options.get("docs"):
            renders.append(text(docs, styler("docs")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __replace__(self, *unused, **overrides):
        if unused:
            raise TypeError("__replace__() takes no positional arguments")
        return type(self)(self.message, **{**self.options, **overrides})


class MalformedSpecError(FormatException): ...
class UnterminatedDirectiveError(MalformedSpecError): ...
class MissingConversionError(MalformedSpecError): ...
class DynamicWidthError(MalformedSpecError): ...
class DynamicPrecisionError(MalformedSpecError): ...
class WriteBackConversionError(MalformedSpecError): ...

class ArgumentCountMismatchError(FormatException): ...
class NotEnoughArgumentsError(ArgumentCountMismatchError): ...
class TooManyArgumentsError(ArgumentCountMismatchError): ...


def abort(fault, /):
    """
    default handler: print the fault to stderr through rich and terminate the process.
    """
    console.print(fault)
    sys.exit(1)


def propagate(fault, /):
    """
    raising handler: hand the fault back to the caller as an exception.
    """
    raise fault from None


_settings = {
    "handler": abort,
    "fancy": False,
    "colorful": True,
}


def configure(*, handler=Unset, fancy=Unset, colorful=Unset):
    """
    update the process-wide error sink settings.

    parameters
    - handler: callable(fault) invoked for every fault (abort, propagate, or custom).
    - fancy: render faults inside a rich Panel.
    - colorful: style the rendering (disable for plain logs).

    returns
    - read-only snapshot of the settings in effect before the call, suitable for
      configure(**previous) to undo.
    """
    previous = MappingProxyType(dict(_settings))
    if handler is not Unset:
        if not callable(handler):
            raise TypeError("configure() handler must be callable")
        _settings["handler"] = handler
    if fancy is not Unset:
        _settings["fancy"] = bool(fancy)
    if colorful is not Unset:
        _settings["colorful"] = bool(colorful)
    return previous


@contextmanager
def errorhandler(handler, /):
    """
    scope a handler replacement to a with-block; the previous handler is restored on exit.
    """
    previous = configure(handler=handler)
    try:
        yield handler
    finally:
        configure(handler=previous["handler"])


def trigger(fault, /, **options):
    """
    surface a fault with the given diagnostic options.

    contract
    - fault must provide a __replace__ method (see FormatException).
    - options (title, code, hint, template, index, ...) are merged into the fault
      via copy.replace before the handler sees it.
    - the configured handler runs before any further template processing; if it
      returns normally the fault is raised so the call stays all-or-nothing.
    """
    if not hasattr(fault, "__replace__") or not callable(fault.__replace__):
        raise TypeError("trigger() argument must have a __replace__ method")
    fault = copy.replace(fault, **{
        "fancy": _settings["fancy"],
        "colorful": _settings["colorful"],
        "docs": getdoc(options["code"]) if "code" in options else None,
    } | options)
    logger.debug("format fault triggered", code=int(fault.options.get("code", 0)), reason=str(fault))
    _settings["handler"](fault)
    raise fault


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FormatException",
    "MalformedSpecError",
    "UnterminatedDirectiveError",
    "MissingConversionError",
    "DynamicWidthError",
    "DynamicPrecisionError",
    "WriteBackConversionError",
    "ArgumentCountMismatchError",
    "NotEnoughArgumentsError",
    "TooManyArgumentsError",
    "FaultCode",
    "abort",
    "propagate",
    "configure",
    "errorhandler",
    "trigger",
    "getdoc",
)
