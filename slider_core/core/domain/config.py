"""
SliderConfig - Снапшот конфигурации слайдера

Immutable Pydantic модель, описывающая домен значений и режимы перетаскивания.
Соответствует схеме contracts/schema/slider_config.json.

Домен значений:
- data != None → дискретный список значений (total = len(data) - 1)
- data is None → числовой диапазон [min_value, max_value] с шагом interval

Делимость (max_value - min_value) на interval здесь НЕ проверяется:
это ошибка INTERVAL, которую Control сообщает через ErrorReporter.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from slider_core.core.math.safe_decimal import Number


# =============================================================================
# КОНСТАНТЫ ТРЕКА
# =============================================================================

# Позиции ручек выражены в процентах длины трека
POS_MIN: Final[float] = 0.0
POS_MAX: Final[float] = 100.0

# Числовой домен по умолчанию
DEFAULT_MIN: Final[int] = 0
DEFAULT_MAX: Final[int] = 100
DEFAULT_INTERVAL: Final[int] = 1


# =============================================================================
# CONFIG MODEL
# =============================================================================


class SliderConfig(BaseModel):
    """
    Конфигурация слайдера.

    Immutable модель (frozen=True): конфигурация фиксируется при создании Control.
    """

    # Домен значений
    data: list[Any] | None = Field(
        default=None, description="Дискретный список допустимых значений"
    )
    max_value: Number = Field(default=DEFAULT_MAX, description="Максимум числового домена")
    min_value: Number = Field(default=DEFAULT_MIN, description="Минимум числового домена")
    interval: Number = Field(default=DEFAULT_INTERVAL, description="Шаг числового домена")

    # Режимы перетаскивания
    enable_cross: bool = Field(default=True, description="Ручки могут меняться местами")
    fixed: bool = Field(default=False, description="Все ручки двигаются вместе")

    # Ограничения расстояния между соседними ручками (в шагах домена)
    min_range: Number | None = Field(default=None, description="Минимальная дистанция")
    max_range: Number | None = Field(default=None, description="Максимальная дистанция")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("min_range", "max_range")
    @classmethod
    def validate_range_non_negative(cls, v: Number | None) -> Number | None:
        """Дистанция между ручками не может быть отрицательной."""
        if v is not None and v < 0:
            raise ValueError(f"range must be non-negative, got {v}")
        return v

    @model_validator(mode="after")
    def validate_numeric_bounds(self) -> "SliderConfig":
        """
        Проверка порядка границ числового домена.

        Для data-домена min_value/max_value не используются.
        """
        if self.data is None and self.max_value < self.min_value:
            raise ValueError(
                f"max_value {self.max_value} must be >= min_value {self.min_value}"
            )
        return self

    @property
    def is_data_domain(self) -> bool:
        """True если активен дискретный домен data"""
        return self.data is not None

    def to_contract(self) -> dict[str, Any]:
        """Dict для валидации против slider_config.json"""
        return self.model_dump()
