"""
Errors — Иерархия исключений optionkit

Два вида ошибок:
- InvalidArgumentError: обязательный callable-аргумент (mapper, predicate,
  fallback) передан как None. Выбрасывается до любых побочных эффектов.
- EmptyValueAccessError: небезопасное извлечение (expect/unwrap) из пустого
  Option. Это ошибка программиста, а не восстанавливаемое состояние.
"""


class OptionError(Exception):
    """Базовое исключение optionkit."""


class InvalidArgumentError(OptionError, ValueError):
    """
    Обязательный аргумент отсутствует (None).

    Attributes:
        argument: Имя параметра, переданного как None
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class EmptyValueAccessError(OptionError, RuntimeError):
    """
    Попытка извлечь значение из пустого Option.

    str(error) совпадает с сообщением, переданным в expect(), либо с
    фиксированным сообщением unwrap().
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def require_callable(value, argument: str) -> None:
    """
    Проверка обязательного callable-аргумента.

    Args:
        value: Проверяемый аргумент
        argument: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value is None
    """
    if value is None:
        raise InvalidArgumentError(argument)
