"""
Argument checks shared by the container.

Each check returns its input unchanged or raises InvalidArgumentError.
Two kinds of "unusable" are told apart:

  • None     -> the value was deliberately passed as absent
  • MISSING  -> the argument was never supplied at all
"""

from __future__ import annotations

from typing import Optional, TypeVar

from loguru import logger

from .errors import IllegalAccessError, InvalidArgumentError
from .values import is_missing, is_null

T = TypeVar("T")

NULL_MESSAGE = "value is null"
MISSING_MESSAGE = "value is not defined"


def _reject(message: Optional[str], default: str) -> InvalidArgumentError:
    error = InvalidArgumentError(message or default)
    logger.debug("Argument rejected: {reason}", reason=error.message)
    return error


def require_present(value: T) -> T:
    """Reject both None and MISSING; return value otherwise."""
    require_supplied(value)
    require_not_missing(value)
    return value


def require_not_missing(value: T, message: Optional[str] = None) -> T:
    if is_null(value):
        raise _reject(message, NULL_MESSAGE)
    return value


def require_supplied(value: T, message: Optional[str] = None) -> T:
    if is_missing(value):
        raise _reject(message, MISSING_MESSAGE)
    return value


class Require:
    """Namespace form of the checks above. Not instantiable."""

    present = staticmethod(require_present)
    not_missing = staticmethod(require_not_missing)
    supplied = staticmethod(require_supplied)

    def __new__(cls, *args, **kwargs):
        raise IllegalAccessError(f"{cls.__name__} is a utility class")
