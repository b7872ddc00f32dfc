"""
Errors - типы ошибок слайдера и канал их доставки

Control никогда не бросает исключения на некорректных value/interval:
ошибка передаётся в ErrorReporter (callback), а вычисление деградирует
до безопасного значения по умолчанию (позиция 0 или total = 0).

Таблица ошибок:
- VALUE    - value не найден в data или не является числом → позиция 0
- INTERVAL - (max - min) не делится на interval нацело → total = 0
- MIN      - value < min → позиция 0
- MAX      - value > max → позиция 0
"""

from enum import IntEnum
from typing import Callable, Final, Mapping


# =============================================================================
# ENUMS
# =============================================================================


class ErrorType(IntEnum):
    """Тип ошибки, передаваемый в ErrorReporter"""

    VALUE = 1
    INTERVAL = 2
    MIN = 3
    MAX = 4


# =============================================================================
# СООБЩЕНИЯ
# =============================================================================

ERROR_MESSAGES: Final[Mapping[ErrorType, str]] = {
    ErrorType.VALUE: 'The type of the "value" is illegal',
    ErrorType.INTERVAL: (
        'The prop "interval" is invalid, "(max - min)" cannot be divisible by "interval"'
    ),
    ErrorType.MIN: 'The "value" cannot be less than the minimum.',
    ErrorType.MAX: 'The "value" cannot be greater than the maximum.',
}


# Callback: (error_type, message) -> None
ErrorReporter = Callable[[ErrorType, str], None]
