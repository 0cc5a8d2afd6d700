"""
optionkit — Option[T] для Python

Контейнер опционального значения с API комбинаторов, pydantic-интеграцией
и JSON Schema контрактом сериализованного layout.
"""

from optionkit.core.domain import (
    NONE,
    UNWRAP_NONE_MESSAGE,
    NoneMarker,
    Option,
    OptionLayout,
    none,
    some,
    to_option,
)
from optionkit.core.errors import EmptyValueAccessError, InvalidArgumentError, OptionError

__version__ = "0.1.0"

__all__ = [
    "Option",
    "OptionLayout",
    "NoneMarker",
    "NONE",
    "UNWRAP_NONE_MESSAGE",
    "some",
    "none",
    "to_option",
    "OptionError",
    "InvalidArgumentError",
    "EmptyValueAccessError",
]
