from typing import Optional


class OptionalError(Exception):
    """Base class for every failure raised by pyoptional."""

    default_message: str = "optional contract violated"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgumentError(OptionalError, ValueError):
    """A method has been passed an illegal or inappropriate argument."""

    default_message = "invalid argument"


class IllegalAccessError(OptionalError, TypeError):
    """Code tried to use a construct it is not allowed to, e.g. instantiate a static-only namespace."""

    default_message = "illegal access"
