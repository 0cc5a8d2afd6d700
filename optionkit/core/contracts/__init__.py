"""
Contract Validation Module

Валидация сериализованного layout Option против JSON Schema.
"""

from .validators import (
    LAYOUT_SCHEMA_NAME,
    LAYOUT_STRICT_SCHEMA_NAME,
    LayoutContractConfig,
    LayoutContractValidator,
    SchemaLoader,
    validate_option_layout,
)

__all__ = [
    # Constants
    "LAYOUT_SCHEMA_NAME",
    "LAYOUT_STRICT_SCHEMA_NAME",
    # Classes
    "SchemaLoader",
    "LayoutContractConfig",
    "LayoutContractValidator",
    # Functions
    "validate_option_layout",
]
