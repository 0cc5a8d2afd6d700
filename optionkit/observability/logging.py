"""
Logging — именованные логгеры пакета

Все логгеры живут под корнем "optionkit". Корневой логгер пакета несёт
NullHandler: библиотека молчит, пока приложение не настроит logging.
"""

import logging
from typing import Final

ROOT_LOGGER_NAME: Final[str] = "optionkit"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён optionkit.

    Args:
        name: Имя компонента ("contracts", "domain.option") или полное имя
            модуля, уже начинающееся с "optionkit."

    Returns:
        logging.Logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
