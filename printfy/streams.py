"""
printfy output sink.

FormatStream couples a writable text target with the mutable FormattingContext
that governs the next insertion, the same split an iostream makes between its
buffer and its format state.

- write(text): raw output, ignores the context (literal template text,
  truncated results).
- insert(value): context-driven output through values.stringify, padded to
  the context width; the width is consumed by the insertion.
- saved(): context manager restoring the context on every exit path.
"""
import io
from contextlib import contextmanager

from .context import Align, FormattingContext
from .utils import Unset
from .values import stringify


class FormatStream:
    __slots__ = ("_target", "context")

    def __init__(self, target=Unset, /, *, context=Unset):
        if target is Unset:
            target = io.StringIO()
        if not callable(getattr(target, "write", None)):
            raise TypeError("FormatStream() target must have a write method")
        self._target = target
        self.context = FormattingContext() if context is Unset else context.copy()

    @property
    def target(self):
        return self._target

    def write(self, text, /):
        if text:
            self._target.write(text)

    def insert(self, value, /):
        rendered = stringify(value, self.context)
        if isinstance(rendered, str):
            return self.pad("", rendered)
        prefix, body = rendered
        return self.pad(prefix, body)

    def pad(self, prefix, body, /):
        """
        write prefix + body filled up to the context width, then consume the width.

        placement
        - Align.LEFT: fill after the text.
        - Align.INTERNAL: fill between prefix and body (-0042, 0x00ff).
        - otherwise: fill before the text.
        """
        context = self.context
        padding = context.fill * max(context.width - len(prefix) - len(body), 0)
        match context.align:
            case Align.LEFT:
                text = prefix + body + padding
            case Align.INTERNAL:
                text = prefix + padding + body
            case _:
                text = padding + prefix + body
        context.width = 0
        self.write(text)

    def getvalue(self):
        if not callable(getattr(self._target, "getvalue", None)):
            raise TypeError("stream target is not an in-memory buffer")
        return self._target.getvalue()

    @contextmanager
    def saved(self):
        baseline = self.context.copy()
        try:
            yield self.context
        finally:
            self.context.assign(baseline)

    def __repr__(self):
        return "%s(%r, context=%r)" % (type(self).__name__, self._target, self.context)


__all__ = (
    "FormatStream",
)
