"""Control - движок позиций и значений ручек слайдера.

- Конвертер value ↔ pos (Decimal-арифметика для числового домена)
- Resolver допустимого диапазона каждой ручки
- Оркестратор drag-обновлений (независимый и fixed режимы)
"""

from .control import Control

__all__ = [
    "Control",
]
