from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Equatable(Protocol):
    """Values that decide equality themselves through an ``equals`` method."""

    def equals(self, other: Any) -> bool:
        ...


def _has_own_equals(value: Any) -> bool:
    # a class exposing ``equals`` for its instances is not itself Equatable
    if isinstance(value, type):
        return False
    return isinstance(value, Equatable) and callable(value.equals)


def values_equal(left: Any, right: Any) -> bool:
    """
    Compare two held values.

    The left operand's own ``equals`` wins when it has one. Otherwise values
    match when they are the same object or compare equal with ``==``, except
    that a bool never matches a non-bool, so ``1`` differs from ``True`` but
    equals ``1.0``.
    """
    if _has_own_equals(left):
        return bool(left.equals(right))
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left is right or bool(left == right)
