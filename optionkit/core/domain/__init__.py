"""
Domain models and value objects.

Содержит контейнер Option и его сериализованный layout.
"""

from optionkit.core.domain.option import (
    NONE,
    UNWRAP_NONE_MESSAGE,
    NoneMarker,
    Option,
    none,
    some,
    to_option,
)
from optionkit.core.domain.layout import OptionLayout

__all__ = [
    # Option
    "Option",
    "NoneMarker",
    "NONE",
    "UNWRAP_NONE_MESSAGE",
    "some",
    "none",
    "to_option",
    # Layout
    "OptionLayout",
]
