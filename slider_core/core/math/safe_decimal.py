"""
Safe Decimal - точная арифметика для конверсии value ↔ step

Модуль обеспечивает численную точность операций рядом с min/interval:
- Конверсия int/float/Decimal в Decimal без binary-артефактов (через str)
- Безопасные subtract/add/multiply/divide
- Деление на ноль никогда не бросает исключение (возвращается fallback)
- Проверка целочисленности результата (количество шагов домена)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0.3 / 0.1 == 3 (native float даёт 2.9999999999999996)
2. bool не является числом
3. NaN/Inf никогда не попадают в Decimal-вычисления
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Union

Number = Union[int, float, Decimal]

# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_numeric(value: Any) -> bool:
    """
    Проверка, является ли значение конечным числом.

    bool исключён явно: True/False не являются значениями слайдера.

    Examples:
        >>> is_numeric(10)
        True
        >>> is_numeric(0.5)
        True
        >>> is_numeric(True)
        False
        >>> is_numeric(float("nan"))
        False
        >>> is_numeric("10")
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    return False


def is_integral(value: Decimal) -> bool:
    """
    Проверка, что Decimal представляет целое число.

    Examples:
        >>> is_integral(Decimal("10"))
        True
        >>> is_integral(Decimal("10.0"))
        True
        >>> is_integral(Decimal("10.5"))
        False
    """
    if not value.is_finite():
        return False
    return value == value.to_integral_value()


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value: Number) -> Decimal:
    """
    Конверсия числа в Decimal.

    float конвертируется через repr-строку, поэтому 0.1 → Decimal("0.1"),
    а не 0.1000000000000000055511151231257827...

    Raises:
        ValueError: Если value не является конечным числом
    """
    if not is_numeric(value):
        raise ValueError(f"value must be a finite number, got {value!r}")

    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def to_number(value: Decimal, as_int: bool = False) -> Number:
    """
    Обратная конверсия Decimal → int/float на границе модуля.

    Args:
        value: Результат Decimal-вычислений
        as_int: Вернуть int (только если value целое)

    Returns:
        int если as_int и value целое, иначе float
    """
    if as_int and is_integral(value):
        return int(value)
    return float(value)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def safe_subtract(a: Number, b: Number) -> Decimal:
    """
    Точное вычитание a - b.

    Examples:
        >>> safe_subtract(0.1, 0.05)
        Decimal('0.05')
    """
    return to_decimal(a) - to_decimal(b)


def safe_add(a: Number, b: Number) -> Decimal:
    """Точное сложение a + b."""
    return to_decimal(a) + to_decimal(b)


def safe_multiply(a: Number, b: Number) -> Decimal:
    """
    Точное умножение a * b.

    Examples:
        >>> safe_multiply(3, 0.1)
        Decimal('0.3')
    """
    return to_decimal(a) * to_decimal(b)


def safe_divide(
    numerator: Number,
    denominator: Number,
    fallback: Decimal | None = None,
) -> Decimal | None:
    """
    Точное деление без исключений на нулевом знаменателе.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль (default: None)

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(0.3, 0.1)
        Decimal('3')
        >>> safe_divide(1, 0) is None
        True
    """
    denom = to_decimal(denominator)
    if denom == 0:
        return fallback

    try:
        return to_decimal(numerator) / denom
    except InvalidOperation:
        return fallback
