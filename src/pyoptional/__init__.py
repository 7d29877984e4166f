from loguru import logger

__version__ = "0.1.0"

from pyoptional.core.errors import IllegalAccessError, InvalidArgumentError, OptionalError
from pyoptional.core.values import MISSING, MissingType
from pyoptional.core.validation import (
    Require,
    require_not_missing,
    require_present,
    require_supplied,
)
from pyoptional.core.equality import Equatable, values_equal
from pyoptional.core.optional import Optional
from pyoptional.logging_config import configure_logging

# silent as a library until configure_logging() is called
logger.disable("pyoptional")

__all__ = [
    "Equatable",
    "IllegalAccessError",
    "InvalidArgumentError",
    "MISSING",
    "MissingType",
    "Optional",
    "OptionalError",
    "Require",
    "configure_logging",
    "require_not_missing",
    "require_present",
    "require_supplied",
    "values_equal",
]
