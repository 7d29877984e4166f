from typing import Any, Final


class MissingType:
    """Marker for an argument that was never supplied."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "MISSING"
    def __bool__(self): return False
    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return "MISSING"


MISSING: Final[Any] = MissingType()

def is_missing(val: Any) -> bool:
    return val is MISSING

def is_null(val: Any) -> bool:
    return val is None

def is_absent(val: Any) -> bool:
    return val is None or val is MISSING

def is_usable(val: Any) -> bool:
    return val is not None and val is not MISSING
