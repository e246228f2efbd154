import functools
import logging
from typing import final

import structlog


@final
class UnsetType:
    """
    internal singleton sentinel representing an "unset" value.

    intent
    - used by the internal API to distinguish "not provided" from a user-supplied
      value (including None, 0 or other falsy values).
    - a width of 0 and an omitted width are different things to the directive
      interpreter, so parsed fields start as Unset rather than 0.

    behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process-wide singleton (see __new__).
    - display: repr(Unset) -> "Unset" (human-friendly).
    - final: subclassing is forbidden to preserve semantics (see __init_subclass__).
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __init_subclass__(cls):
        """
        disallow subclassing to keep sentinel semantics stable.
        """
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()
"""
internal singleton instance of UnsetType.

note
- exposed for completeness, but intended for internal API use only.
"""


def nullify(object, default=None, /):
    """
    internal helper: return `default` when `object` is Unset; otherwise return `object`.

    parameters
    - object: any
      candidate value that may be the Unset sentinel.
    - default: any | None (positional-only)
      replacement value to use when `object is Unset` (if omitted, None is used).

    returns
    - default when object is Unset; otherwise object unchanged.
    """
    return default if object is Unset else object


def getlogger(name, /):
    """
    return a structlog logger that emits through the stdlib logger `name`.

    events reach the stdlib `logging` tree, so they stay silent until the host
    application configures logging (or structlog) for the "printfy" loggers.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


__all__ = (
    "UnsetType",
    "Unset",
    "nullify",
    "getlogger",
)
