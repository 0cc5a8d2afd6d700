"""
Тесты иерархии ошибок и логирования optionkit

Проверяет:
1. Иерархию исключений и их атрибуты
2. Пространство имён логгеров
3. DEBUG-записи при небезопасном извлечении и чтении layout
"""

import logging

import pytest

from optionkit import EmptyValueAccessError, InvalidArgumentError, Option, OptionError
from optionkit.core.domain import OptionLayout
from optionkit.core.errors import require_callable
from optionkit.observability import get_logger


# =============================================================================
# ERRORS
# =============================================================================


class TestErrors:
    """Тесты исключений"""

    def test_invalid_argument_hierarchy(self) -> None:
        err = InvalidArgumentError("mapper")
        assert isinstance(err, OptionError)
        assert isinstance(err, ValueError)
        assert err.argument == "mapper"
        assert str(err) == "mapper must not be None"

    def test_empty_value_access_hierarchy(self) -> None:
        err = EmptyValueAccessError("nothing here")
        assert isinstance(err, OptionError)
        assert isinstance(err, RuntimeError)
        assert str(err) == "nothing here"

    def test_require_callable(self) -> None:
        require_callable(len, "fn")
        with pytest.raises(InvalidArgumentError):
            require_callable(None, "fn")

    def test_invalid_argument_raised_before_side_effects(self) -> None:
        """Проверка аргументов выполняется до вызова других функций"""
        calls = []
        with pytest.raises(InvalidArgumentError):
            Option.empty().map_or_else(None, lambda: calls.append("fallback"))
        assert calls == []


# =============================================================================
# LOGGING
# =============================================================================


class TestLogging:
    """Тесты логирования"""

    def test_logger_namespace(self) -> None:
        assert get_logger("contracts").name == "optionkit.contracts"
        assert get_logger("optionkit.core.domain.option").name == "optionkit.core.domain.option"
        assert get_logger("optionkit").name == "optionkit"

    def test_root_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger("optionkit").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_expect_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="optionkit")
        with pytest.raises(EmptyValueAccessError):
            Option.empty().expect("token missing")
        assert "token missing" in caplog.text

    def test_discarded_slot_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="optionkit")
        OptionLayout.model_validate({"has_value": False, "value": 12})
        assert "Discarding value slot" in caplog.text
