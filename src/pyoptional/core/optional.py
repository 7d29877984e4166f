from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

from .equality import values_equal
from .errors import InvalidArgumentError
from .validation import require_not_missing, require_present
from .values import MISSING, is_usable

T = TypeVar("T")
U = TypeVar("U")

_EMPTY_HASH = hash(("pyoptional.Optional", "empty"))


@dataclass(frozen=True, eq=False, repr=False)
class Optional(Generic[T]):
    """
    A container which may or may not hold a usable value.

    A value is usable when it is neither ``None`` nor ``MISSING``. A container
    holding one is *present*; otherwise it is *empty* and never hands out a
    value. Build instances with ``empty()``, ``of()`` or ``of_nullable()``;
    calling ``Optional(value)`` directly behaves like ``of_nullable``.

    Every operation returns a new container (or ``self``); the slot is never
    rebound. A mutable payload can still be changed in place through the
    reference the container hands out, e.g. from an ``if_present`` action.

    Callback parameters default to ``MISSING`` so that leaving one out is
    rejected the same way as passing ``None``, but only on the branch that
    would actually call it.
    """

    _value: Any = None

    def __post_init__(self):
        # empty is always stored as None
        if not is_usable(self._value):
            object.__setattr__(self, "_value", None)

    # construction

    @classmethod
    def empty(cls) -> Optional[T]:
        return _EMPTY

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Wrap ``value``, which must be neither None nor MISSING."""
        return cls(require_present(value))

    @classmethod
    def of_nullable(cls, value: Any = MISSING) -> Optional[T]:
        return cls.of(value) if is_usable(value) else cls.empty()

    # inspection

    def is_present(self) -> bool:
        return is_usable(self._value)

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """
        Return the held value.

        Prefer ``or_else_throw`` or ``or_else`` where a fallback is known.

        Raises:
            InvalidArgumentError: if the container is empty
        """
        return require_not_missing(self._value)

    # transformation

    def filter(self, predicate: Callable[[T], Any] = MISSING) -> Optional[T]:
        """Keep the value only if ``predicate`` holds for it."""
        if not self.is_present():
            return self
        require_present(predicate)
        return self if predicate(self._value) else Optional.empty()

    def map(self, mapper: Callable[[T], U] = MISSING) -> Optional[U]:
        """
        Apply ``mapper`` to the value and wrap the result with ``of_nullable``.

        A mapper returning None (or MISSING) yields an empty container rather
        than an error.
        """
        if not self.is_present():
            return self  # type: ignore[return-value]
        require_present(mapper)
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], Optional[U]] = MISSING) -> Optional[U]:
        """
        Apply an Optional-bearing ``mapper`` and return its container as is.

        Raises:
            InvalidArgumentError: if the container is present and ``mapper`` is
                missing, or ``mapper`` returns None, MISSING or a non-Optional
        """
        if not self.is_present():
            return self  # type: ignore[return-value]
        require_present(mapper)
        return _require_optional(mapper(self._value), "mapper")

    def or_(self, supplier: Callable[[], Optional[T]] = MISSING) -> Optional[T]:
        """Return ``self`` if present, otherwise the container produced by ``supplier``."""
        if self.is_present():
            return self
        require_present(supplier)
        return _require_optional(supplier(), "supplier")

    # extraction

    def or_else(self, other: Any = None) -> Any:
        return self._value if self.is_present() else other

    def or_else_get(self, supplier: Callable[[], T] = MISSING) -> T:
        if self.is_present():
            return self._value
        require_present(supplier)
        return supplier()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException] = MISSING) -> T:
        """
        Return the value, or raise the exception built by ``exception_supplier``.

        The supplier is called once and its result raised unmodified. An
        exception class works as a supplier too: ``opt.or_else_throw(KeyError)``.
        """
        if self.is_present():
            return self._value
        require_present(exception_supplier)
        raise exception_supplier()

    # side effects

    def if_present(self, action: Callable[[T], Any] = MISSING) -> None:
        if self.is_present():
            require_present(action)
            action(self._value)

    def if_present_or_else(
        self,
        action: Callable[[T], Any] = MISSING,
        empty_action: Callable[[], Any] = MISSING,
    ) -> None:
        """Run ``action`` with the value if present, ``empty_action`` otherwise. Only the branch taken is checked."""
        if self.is_present():
            require_present(action)
            action(self._value)
        else:
            require_present(empty_action)
            empty_action()

    # comparison and rendering

    def equals(self, other: Any) -> bool:
        """
        Compare with another container.

        Two empty containers are always equal, whatever value type they were
        meant to carry. Present values are compared with ``values_equal``, so
        a payload's own ``equals`` method is honoured.
        """
        if not isinstance(other, Optional):
            return False
        if self.is_present() != other.is_present():
            return False
        if not self.is_present():
            return True
        return values_equal(self._value, other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # payloads equal through a custom ``equals`` must define a matching __hash__
        return hash(self._value) if self.is_present() else _EMPTY_HASH

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self._value

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"Optional[{self._value if self.is_present() else 'empty'}]"

    def __repr__(self) -> str:
        if self.is_present():
            return f"Optional.of({self._value!r})"
        return "Optional.empty()"


def _require_optional(result: Any, role: str) -> Optional[Any]:
    require_present(result)
    if not isinstance(result, Optional):
        raise InvalidArgumentError(
            f"{role} must return an Optional, got {type(result).__name__}"
        )
    return result


_EMPTY: Optional[Any] = Optional()
