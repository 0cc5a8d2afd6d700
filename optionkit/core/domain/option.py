"""
Option — Контейнер опционального значения

Generic-тип Option[T]: либо ровно одно значение типа T, либо отсутствие
значения. API комбинаторов (map, unwrap-варианты, предикаты, равенство)
повторяет option/maybe из стандартных библиотек функциональных языков.

Инварианты:
- Флаг _has_value — единственный источник истины о пустоте.
  Option.of(None) — НЕ пустой контейнер, а контейнер со значением None.
- Слот _value не читается как осмысленный, если _has_value == False.
- Immutable: комбинаторы возвращают новые контейнеры.

Сериализованный layout — ровно два поля: has_value и value
(см. optionkit.core.domain.layout.OptionLayout).
"""

from typing import Any, Callable, Final, Generic, Optional, Tuple, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from optionkit.core.errors import EmptyValueAccessError, require_callable
from optionkit.observability import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

UNWRAP_NONE_MESSAGE: Final[str] = "Failed to unwrap Option; value is 'None'."

# Хэш пустого контейнера (и маркера NONE, который ему равен)
_EMPTY_HASH: Final[int] = hash(("optionkit.Option", False))


# =============================================================================
# UNTYPED NONE MARKER
# =============================================================================


class NoneMarker:
    """
    Нетипизированный маркер "нет значения".

    Позволяет писать пустой случай без указания параметра типа:
    NONE приводится к Option.empty() для любого T (to_option, поля pydantic)
    и равен любому пустому Option.
    """

    _instance: Optional["NoneMarker"] = None

    def __new__(cls) -> "NoneMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NoneMarker):
            return True
        if isinstance(other, Option):
            return other.is_absent()
        return NotImplemented

    def __hash__(self) -> int:
        return _EMPTY_HASH

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NONE"

    def __reduce__(self):
        return (NoneMarker, ())


NONE: Final[NoneMarker] = NoneMarker()


# =============================================================================
# OPTION
# =============================================================================


class Option(Generic[T]):
    """
    Контейнер опционального значения.

    Создаётся только через Option.empty() / Option.of(value) (или
    none() / some(value) / to_option(x)); прямой вызов Option(...) запрещён.
    Слоты _has_value и _value — документированный внутренний layout: они
    перечислены в Option.__slots__ и видны через Option.layout(), но не
    являются публичным API.
    """

    __slots__ = ("_has_value", "_value")

    def __init__(self, *args: Any, **kwargs: Any):
        raise TypeError("Use Option.of(value) or Option.empty() to create an Option")

    @classmethod
    def _build(cls, has_value: bool, value: Any) -> "Option[Any]":
        option = object.__new__(cls)
        object.__setattr__(option, "_has_value", has_value)
        object.__setattr__(option, "_value", value)
        return option

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Option is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Option is immutable; cannot delete {name!r}")

    def __reduce__(self):
        return (_rebuild, (self._has_value, self._value))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Option[T]":
        """Пустой Option."""
        return cls._build(False, None)

    @classmethod
    def of(cls, value: T) -> "Option[T]":
        """Option, содержащий value (в том числе None)."""
        return cls._build(True, value)

    @classmethod
    def from_layout(cls, layout: Any) -> "Option[Any]":
        """
        Восстановление Option из сериализованного layout.

        Args:
            layout: OptionLayout или mapping с полями has_value/value

        Returns:
            Option; слот value игнорируется, если has_value == False

        Raises:
            pydantic.ValidationError: Если layout не соответствует модели
        """
        from optionkit.core.domain.layout import OptionLayout

        if not isinstance(layout, OptionLayout):
            layout = OptionLayout.model_validate(layout)
        return layout.to_option()

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def is_present(self) -> bool:
        return self._has_value

    def is_absent(self) -> bool:
        return not self._has_value

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        """
        True, если значение есть и predicate(value) истинен.

        Raises:
            InvalidArgumentError: Если predicate is None (в любом состоянии)
        """
        require_callable(predicate, "predicate")

        has_value, value = self.try_unwrap()
        if not has_value:
            return False
        return bool(predicate(value))

    def is_absent_or(self, predicate: Callable[[T], bool]) -> bool:
        """
        True, если значения нет, ИЛИ значение есть и predicate(value) истинен.

        Для пустого контейнера predicate не вызывается.

        Raises:
            InvalidArgumentError: Если predicate is None (в любом состоянии)
        """
        require_callable(predicate, "predicate")

        has_value, value = self.try_unwrap()
        if not has_value:
            return True
        return bool(predicate(value))

    def layout(self):
        """Инспектируемое представление: OptionLayout(has_value, value)."""
        from optionkit.core.domain.layout import OptionLayout

        return OptionLayout.from_option(self)

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    def map(self, mapper: Callable[[T], U]) -> "Option[U]":
        """
        Пустой → пустой; Some(v) → Some(mapper(v)).

        Raises:
            InvalidArgumentError: Если mapper is None (даже для пустого)
        """
        require_callable(mapper, "mapper")

        has_value, value = self.try_unwrap()
        if not has_value:
            return Option.empty()
        return Option.of(mapper(value))

    def map_or(self, mapper: Callable[[T], U], fallback: U) -> "Option[U]":
        """
        Пустой → Some(fallback); Some(v) → Some(mapper(v)).

        Результат всегда содержит значение.

        Raises:
            InvalidArgumentError: Если mapper is None
        """
        require_callable(mapper, "mapper")

        has_value, value = self.try_unwrap()
        if not has_value:
            return Option.of(fallback)
        return Option.of(mapper(value))

    def map_or_else(
        self, mapper: Callable[[T], U], fallback_fn: Callable[[], U]
    ) -> "Option[U]":
        """
        Как map_or, но fallback вычисляется лениво и только для пустого.

        Raises:
            InvalidArgumentError: Если mapper или fallback_fn is None
        """
        require_callable(mapper, "mapper")
        require_callable(fallback_fn, "fallback_fn")

        has_value, value = self.try_unwrap()
        if not has_value:
            return Option.of(fallback_fn())
        return Option.of(mapper(value))

    # -------------------------------------------------------------------------
    # Extraction
    # -------------------------------------------------------------------------

    def try_unwrap(self) -> Tuple[bool, Optional[T]]:
        """
        Тотальное извлечение: (has_value, value).

        Для пустого контейнера value == None и не должен использоваться.
        """
        return self._has_value, self._value

    def expect(self, message: str) -> T:
        """
        Значение, если оно есть.

        Raises:
            EmptyValueAccessError: С сообщением message, если пусто
        """
        has_value, value = self.try_unwrap()
        if not has_value:
            logger.debug("expect() on empty Option: %s", message)
            raise EmptyValueAccessError(message)
        return value

    def unwrap(self) -> T:
        """
        Значение, если оно есть.

        Raises:
            EmptyValueAccessError: С фиксированным сообщением, если пусто
        """
        return self.expect(UNWRAP_NONE_MESSAGE)

    def unwrap_or(self, fallback: T) -> T:
        has_value, value = self.try_unwrap()
        if not has_value:
            return fallback
        return value

    def unwrap_or_default(
        self, default_factory: Optional[Callable[[], T]] = None
    ) -> Optional[T]:
        """
        Значение, либо значение по умолчанию для T.

        Тип T недоступен в runtime, поэтому значение по умолчанию задаётся
        фабрикой (обычно самим типом: int, str, list). Без фабрики
        возвращается None.

        Args:
            default_factory: Фабрика значения по умолчанию (опционально)

        Returns:
            value, default_factory() или None
        """
        has_value, value = self.try_unwrap()
        if has_value:
            return value
        if default_factory is None:
            return None
        return default_factory()

    def unwrap_or_else(self, fallback_fn: Callable[[], T]) -> T:
        """
        Значение, либо результат fallback_fn() для пустого контейнера.

        В отличие от unwrap_or, fallback не вычисляется заранее.

        Raises:
            InvalidArgumentError: Если контейнер пуст и fallback_fn is None
        """
        has_value, value = self.try_unwrap()
        if has_value:
            return value

        require_callable(fallback_fn, "fallback_fn")
        return fallback_fn()

    # -------------------------------------------------------------------------
    # Equality / hashing
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # value == option приходит сюда через reflected __eq__
        if isinstance(other, Option):
            if self.is_absent():
                return other.is_absent()
            return other.is_present() and self._value == other._value

        if isinstance(other, NoneMarker):
            return self.is_absent()

        if self.is_absent():
            return False
        return self._value == other

    def __hash__(self) -> int:
        # of(v) == v, поэтому hash(of(v)) == hash(v)
        if self.is_absent():
            return _EMPTY_HASH
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._has_value

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self.is_absent():
            return "(Option) None"
        return f"(Option) {self._value}"

    def __repr__(self) -> str:
        if self.is_absent():
            return "Option.empty()"
        return f"Option.of({self._value!r})"

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Схема pydantic для полей типа Option[T].

        Вход: Option, NONE, OptionLayout, mapping {has_value, value} или
        голое значение T (→ Option.of). Выход: layout {has_value, value}
        с сериализацией value по правилам T.
        """
        from optionkit.core.domain.layout import OptionLayout

        args = get_args(source_type)
        value_type = args[0] if args else Any

        def layout_schema() -> core_schema.CoreSchema:
            return core_schema.no_info_after_validator_function(
                OptionLayout.to_option,
                handler.generate_schema(OptionLayout[value_type]),
            )

        def bare_value_schema() -> core_schema.CoreSchema:
            return core_schema.no_info_after_validator_function(
                cls.of, handler.generate_schema(value_type)
            )

        # Готовые Option и OptionLayout проходят через layout: значение
        # заново валидируется по правилам T
        python_schema = core_schema.union_schema(
            [
                core_schema.chain_schema(
                    [
                        core_schema.is_instance_schema(cls),
                        core_schema.no_info_plain_validator_function(_dump_layout),
                        layout_schema(),
                    ]
                ),
                core_schema.no_info_after_validator_function(
                    lambda _: cls.empty(), core_schema.is_instance_schema(NoneMarker)
                ),
                core_schema.chain_schema(
                    [
                        core_schema.is_instance_schema(OptionLayout),
                        core_schema.no_info_plain_validator_function(_layout_fields),
                        layout_schema(),
                    ]
                ),
                layout_schema(),
                bare_value_schema(),
            ],
            mode="left_to_right",
        )
        json_schema = core_schema.union_schema(
            [layout_schema(), bare_value_schema()],
            mode="left_to_right",
        )

        serialized_layout_schema = core_schema.typed_dict_schema(
            {
                "has_value": core_schema.typed_dict_field(core_schema.bool_schema()),
                "value": core_schema.typed_dict_field(
                    core_schema.nullable_schema(handler.generate_schema(value_type))
                ),
            }
        )

        return core_schema.json_or_python_schema(
            json_schema=json_schema,
            python_schema=python_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _dump_layout,
                return_schema=serialized_layout_schema,
            ),
        )


def _dump_layout(option: Option[Any]) -> dict:
    has_value, value = option.try_unwrap()
    return {"has_value": has_value, "value": value if has_value else None}


def _layout_fields(layout: Any) -> dict:
    return {"has_value": layout.has_value, "value": layout.value}


def _rebuild(has_value: bool, value: Any) -> Option[Any]:
    return Option._build(has_value, value)


# =============================================================================
# CONSTRUCTOR FUNCTIONS
# =============================================================================


def some(value: T) -> Option[T]:
    """Сокращение для Option.of(value)."""
    return Option.of(value)


def none() -> Option[Any]:
    """Сокращение для Option.empty()."""
    return Option.empty()


def to_option(value: Any) -> Option[Any]:
    """
    Приведение к Option.

    - Option → без изменений
    - NONE → Option.empty()
    - любое другое значение → Option.of(value)
    """
    if isinstance(value, Option):
        return value
    if isinstance(value, NoneMarker):
        return Option.empty()
    return Option.of(value)
