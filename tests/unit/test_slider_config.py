"""
Tests for SliderConfig

Покрывает:
- Значения по умолчанию
- Валидацию min_range / max_range и порядка границ
- Immutability (frozen=True)
- Сохранение типов int / float / Decimal
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from slider_core.core.domain import (
    DEFAULT_INTERVAL,
    DEFAULT_MAX,
    DEFAULT_MIN,
    SliderConfig,
)


class TestSliderConfigDefaults:
    """Значения по умолчанию"""

    def test_defaults(self) -> None:
        config = SliderConfig()
        assert config.data is None
        assert config.max_value == DEFAULT_MAX
        assert config.min_value == DEFAULT_MIN
        assert config.interval == DEFAULT_INTERVAL
        assert config.enable_cross is True
        assert config.fixed is False
        assert config.min_range is None
        assert config.max_range is None
        assert not config.is_data_domain

    def test_data_domain(self) -> None:
        config = SliderConfig(data=["a", "b"])
        assert config.is_data_domain


class TestSliderConfigTypes:
    """Числовые типы сохраняются без потери точности"""

    def test_int_preserved(self) -> None:
        config = SliderConfig(max_value=10, min_value=0, interval=2)
        assert isinstance(config.interval, int)

    def test_float_preserved(self) -> None:
        config = SliderConfig(max_value=1.0, min_value=0.0, interval=0.1)
        assert config.interval == 0.1

    def test_decimal_preserved(self) -> None:
        config = SliderConfig(max_value=Decimal("1"), interval=Decimal("0.1"))
        assert config.interval == Decimal("0.1")


class TestSliderConfigValidation:
    """Валидация полей"""

    def test_negative_min_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            SliderConfig(min_range=-1)

    def test_negative_max_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            SliderConfig(max_range=-0.5)

    def test_reversed_bounds_rejected(self) -> None:
        with pytest.raises(ValidationError, match="max_value"):
            SliderConfig(max_value=0, min_value=10)

    def test_reversed_bounds_ignored_for_data_domain(self) -> None:
        config = SliderConfig(data=[1, 2, 3], max_value=0, min_value=10)
        assert config.is_data_domain

    def test_non_divisible_interval_accepted(self) -> None:
        """Делимость проверяет Control (ошибка INTERVAL), а не конфигурация"""
        config = SliderConfig(max_value=10, min_value=0, interval=3)
        assert config.interval == 3

    def test_frozen(self) -> None:
        config = SliderConfig()
        with pytest.raises(ValidationError):
            config.fixed = True
