"""
JSON Schema Contract Validators

Модуль для валидации сериализованного layout Option согласно JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия.

Схемы (optionkit/core/contracts/schema/):
- option_layout.json: has_value + value, слот пустого layout не ограничен
- option_layout_strict.json: то же, но у пустого layout value обязан быть null
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from optionkit.core.domain.option import Option
from optionkit.observability import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

LAYOUT_SCHEMA_NAME: Final[str] = "option_layout"
LAYOUT_STRICT_SCHEMA_NAME: Final[str] = "option_layout_strict"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в пакете, в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'option_layout')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LayoutContractConfig:
    """Конфигурация валидатора layout.

    По умолчанию слот value пустого layout может содержать что угодно:
    читатель обязан его игнорировать. strict_empty_slot требует null.
    """

    strict_empty_slot: bool = False

    @property
    def schema_name(self) -> str:
        if self.strict_empty_slot:
            return LAYOUT_STRICT_SCHEMA_NAME
        return LAYOUT_SCHEMA_NAME


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class LayoutContractValidator:
    """
    Валидатор сериализованного layout Option.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, config: LayoutContractConfig | None = None):
        """
        Инициализация валидатора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or LayoutContractConfig()
        self.schema = _SCHEMA_LOADER.load_schema(self.config.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def validate_option(self, option: Option[Any]) -> None:
        """
        Валидация JSON-представления layout контейнера.

        Raises:
            jsonschema.ValidationError: Если layout не соответствует схеме
        """
        self.validate(option.layout().model_dump(mode="json"))

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_option_layout(data: Dict[str, Any], strict_empty_slot: bool = False) -> None:
    """
    Валидация сериализованного layout.

    Args:
        data: Данные для валидации
        strict_empty_slot: Требовать null в слоте пустого layout

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    config = LayoutContractConfig(strict_empty_slot=strict_empty_slot)
    LayoutContractValidator(config).validate(data)
