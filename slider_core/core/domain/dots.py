"""
Dots - read-модели состояния ручек слайдера

Dot - публичная пара (pos, value) для слоя отображения.
ValidPos - результат clamp позиции в допустимый диапазон ручки.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Union

# Значение ручки: число, строка или произвольный hashable-маркер (symbol)
TValue = Union[int, float, str, Hashable]


@dataclass(frozen=True)
class Dot:
    """Позиция (проценты трека) и значение одной ручки."""

    pos: float
    value: Any

    def to_contract(self) -> dict[str, Any]:
        """Dict для валидации против slider_dots.json"""
        return {"pos": self.pos, "value": self.value}


@dataclass(frozen=True)
class ValidPos:
    """Результат clamp позиции ручки."""

    pos: float
    in_range: bool


def dots_to_contract(dots: list[Dot]) -> list[dict[str, Any]]:
    """Сериализация списка ручек в JSON-совместимую форму."""
    return [dot.to_contract() for dot in dots]
