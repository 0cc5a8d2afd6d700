"""
OptionLayout — Сериализованный layout контейнера Option

Immutable Pydantic модель из ровно двух полей:
- has_value: флаг наличия значения
- value: значение по правилам сериализации T (null, если значения нет)

Контракт для внешних потребителей (рендеры, инспекторы):
- has_value решает, показывать ли value вообще;
- value — обычное поле типа T;
- если has_value == False, содержимое value не заслуживает доверия
  и при чтении отбрасывается.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator

from optionkit.core.domain.option import Option
from optionkit.observability import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class OptionLayout(BaseModel, Generic[T]):
    """
    Layout Option[T]: (has_value, value).

    Immutable модель (frozen=True). Для пустого layout слот value
    нормализуется к None до валидации типа T.
    """

    has_value: bool = Field(..., description="Флаг наличия значения")
    value: Optional[T] = Field(
        default=None, description="Значение (осмысленно только при has_value=True)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def discard_empty_slot(cls, data: Any) -> Any:
        """
        Отбрасывание недоверенного слота value у пустого layout.

        Читатель не обязан понимать, что лежит в слоте пустого контейнера,
        поэтому слот не проходит валидацию типа T.
        """
        if isinstance(data, dict) and data.get("has_value") is False:
            if data.get("value") is not None:
                logger.debug("Discarding value slot of empty Option layout")
            data = {**data, "value": None}
        return data

    @model_validator(mode="after")
    def check_present_null(self) -> "OptionLayout[T]":
        """
        Непустой layout с null в слоте допустим, только если T принимает None.

        Слот объявлен как Optional[T] ради пустого layout; для has_value=True
        значение обязано пройти валидацию самого T.
        """
        if not self.has_value or self.value is not None:
            return self

        args = type(self).__pydantic_generic_metadata__["args"]
        if not args:
            return self
        try:
            TypeAdapter(args[0]).validate_python(None)
        except ValidationError as e:
            raise ValueError(
                f"value must not be null when has_value is true (value type {args[0]!r})"
            ) from e
        return self

    @classmethod
    def from_option(cls, option: Option[Any]) -> "OptionLayout[T]":
        """
        Layout существующего контейнера.

        Args:
            option: Контейнер Option

        Returns:
            OptionLayout; для пустого контейнера value == None
        """
        has_value, value = option.try_unwrap()
        return cls(has_value=has_value, value=value if has_value else None)

    def to_option(self) -> Option[T]:
        """Контейнер, описываемый этим layout."""
        if not self.has_value:
            return Option.empty()
        return Option.of(self.value)
