"""Control - движок позиций и значений многоручечного слайдера.

Поддерживает две синхронизированные последовательности одинаковой длины:
- dots_pos: позиция каждой ручки в процентах трека [0, 100]
- dots_value: значение каждой ручки (число, строка или hashable-маркер)

Состоит из трёх частей:
- Конвертер value ↔ pos (parse_value / parse_pos) с Decimal-арифметикой
  рядом с min/interval, чтобы 0.3 / 0.1 давало ровно 3 шага
- Resolver допустимого диапазона каждой ручки (value_pos_range / get_valid_pos)
- Оркестратор обновлений при перетаскивании (set_dot_pos)

Производные величины (total, gap, value_pos, value_pos_range, min_range_dir,
max_range_dir) пересчитываются при каждом обращении и не кэшируются.

Ошибки домена никогда не бросаются: они передаются в on_error, а вычисление
деградирует до безопасного значения (позиция 0, total = 0).
"""

import logging
import math
from typing import Any, Sequence

from slider_core.core.domain.config import (
    DEFAULT_INTERVAL,
    DEFAULT_MAX,
    DEFAULT_MIN,
    POS_MAX,
    POS_MIN,
    SliderConfig,
)
from slider_core.core.domain.dots import Dot, TValue, ValidPos
from slider_core.core.domain.errors import ERROR_MESSAGES, ErrorReporter, ErrorType
from slider_core.core.math.safe_decimal import (
    Number,
    is_integral,
    is_numeric,
    safe_add,
    safe_divide,
    safe_multiply,
    safe_subtract,
    to_number,
)

logger = logging.getLogger(__name__)


class Control:
    """Позиции и значения ручек слайдера.

    Конфигурация фиксируется в конструкторе; dots_pos/dots_value меняются
    при каждом set_value / set_dots_pos / set_dot_pos.

    Домен значений:
    - data is not None → дискретный список (total = len(data) - 1)
    - иначе → [min_value, max_value] с шагом interval
      (total = (max_value - min_value) / interval, должен быть целым)
    """

    def __init__(
        self,
        value: TValue | list[TValue],
        data: list[TValue] | None = None,
        enable_cross: bool = True,
        fixed: bool = False,
        max_value: Number = DEFAULT_MAX,
        min_value: Number = DEFAULT_MIN,
        interval: Number = DEFAULT_INTERVAL,
        min_range: Number | None = None,
        max_range: Number | None = None,
        on_error: ErrorReporter | None = None,
    ):
        """
        Args:
            value: начальное значение (скаляр) или значения всех ручек
            data: дискретный список допустимых значений (приоритет над min/max)
            enable_cross: могут ли ручки менять порядок
            fixed: True - все ручки двигаются на одинаковый delta
            max_value: максимум числового домена
            min_value: минимум числового домена
            interval: шаг числового домена
            min_range: минимальная дистанция между соседними ручками (в шагах)
            max_range: максимальная дистанция (в шагах, не применяется)
            on_error: callback (error_type, message) для ошибок домена
        """
        self._data = data
        self._enable_cross = enable_cross
        self._fixed = fixed
        self._max_value = max_value
        self._min_value = min_value
        self._interval = interval
        self._min_range = min_range
        self._max_range = max_range
        self._on_error = on_error

        self.dots_pos: list[float] = []
        self.dots_value: list[Any] = []

        self.set_value(value)

    @classmethod
    def from_config(
        cls,
        config: SliderConfig,
        value: TValue | list[TValue],
        on_error: ErrorReporter | None = None,
    ) -> "Control":
        """Создание Control из валидированного снапшота конфигурации."""
        return cls(
            value,
            data=list(config.data) if config.is_data_domain else None,
            enable_cross=config.enable_cross,
            fixed=config.fixed,
            max_value=config.max_value,
            min_value=config.min_value,
            interval=config.interval,
            min_range=config.min_range,
            max_range=config.max_range,
            on_error=on_error,
        )

    @property
    def config(self) -> SliderConfig:
        """Снапшот конфигурации (без повторной валидации)."""
        return SliderConfig.model_construct(
            data=self._data,
            max_value=self._max_value,
            min_value=self._min_value,
            interval=self._interval,
            enable_cross=self._enable_cross,
            fixed=self._fixed,
            min_range=self._min_range,
            max_range=self._max_range,
        )

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def set_value(self, value: TValue | list[TValue]) -> None:
        """Замена значений всех ручек и пересчёт их позиций.

        Несколько ручек задаются только list; tuple и прочие значения
        считаются скаляром и оборачиваются в список из одного элемента.
        Порядок сохраняется.
        """
        if isinstance(value, list):
            self.dots_value = list(value)
        else:
            self.dots_value = [value]
        self.sync_dots_pos()

    def set_dots_pos(self, dots_pos: Sequence[float]) -> None:
        """Установка позиций всех ручек.

        dots_pos сохраняется в исходном (неотсортированном) порядке, а значения
        назначаются по отсортированной копии: dots_value[k] соответствует
        k-й наименьшей позиции, а не dots_pos[k].
        """
        sorted_pos = sorted(dots_pos)
        self.dots_pos = list(dots_pos)
        self.dots_value = [self.parse_pos(pos) for pos in sorted_pos]

    def sort_dots_pos(self) -> None:
        """Сортировка позиций по возрастанию (dots_value не меняется)."""
        self.dots_pos = sorted(self.dots_pos)

    def sync_dots_pos(self) -> None:
        """Пересчёт dots_pos из текущих dots_value."""
        self.dots_pos = [self.parse_value(value) for value in self.dots_value]

    def get_dots(self) -> list[Dot]:
        """Read-модель всех ручек: пары (pos, value) по индексу."""
        return [
            Dot(pos=pos, value=self.dots_value[index])
            for index, pos in enumerate(self.dots_pos)
        ]

    def set_dot_pos(self, pos: float, index: int) -> bool:
        """Перемещение одной ручки (точка входа drag).

        В fixed-режиме все ручки сдвигаются на одинаковый delta; если какая-то
        ручка упирается в границу, delta уменьшается по модулю (знак сохраняется).

        Args:
            pos: новая позиция ручки (проценты трека)
            index: индекс ручки

        Returns:
            False если позиция не изменилась, True если изменения применены
        """
        if not 0 <= index < len(self.dots_pos):
            return False

        change_pos = self.get_valid_pos(pos, index).pos - self.dots_pos[index]
        if not change_pos or math.isnan(change_pos):
            return False

        if self._fixed:
            for i, origin_pos in enumerate(self.dots_pos):
                if i == index:
                    continue
                valid = self.get_valid_pos(origin_pos + change_pos, i)
                if not valid.in_range:
                    change_pos = math.copysign(
                        min(abs(valid.pos - origin_pos), abs(change_pos)), change_pos
                    )
            if not change_pos:
                logger.debug(f"Fixed drag of dot {index} blocked by range")
                return False
            changes = [change_pos] * len(self.dots_pos)
        else:
            changes = [0.0] * len(self.dots_pos)
            changes[index] = change_pos

        logger.debug(f"Dot {index} moved by {change_pos} (fixed={self._fixed})")
        self.set_dots_pos([cur + delta for cur, delta in zip(self.dots_pos, changes)])
        return True

    def get_recent_dot(self, pos: float) -> int:
        """Индекс ближайшей к pos ручки (при равенстве - наименьший индекс).

        Returns:
            Индекс ручки или -1, если ручек нет
        """
        if not self.dots_pos:
            return -1
        distances = [abs(dot_pos - pos) for dot_pos in self.dots_pos]
        return distances.index(min(distances))

    # =========================================================================
    # RANGE RESOLVER
    # =========================================================================

    def get_valid_pos(self, new_pos: float, index: int) -> ValidPos:
        """Clamp позиции ручки в её допустимый диапазон.

        Returns:
            ValidPos(pos, in_range); in_range=False если clamp сработал
        """
        min_pos, max_pos = self.value_pos_range[index]
        if new_pos < min_pos:
            return ValidPos(pos=min_pos, in_range=False)
        if new_pos > max_pos:
            return ValidPos(pos=max_pos, in_range=False)
        return ValidPos(pos=new_pos, in_range=True)

    @property
    def value_pos_range(self) -> list[tuple[float, float]]:
        """Допустимый диапазон [min_pos, max_pos] каждой ручки.

        Правила:
        - min_range задан: ручка i оставляет место для i ручек слева
          и (n - 1 - i) справа
        - enable_cross=False: границы - позиции соседних ручек
        - иначе: [0, 100]
        """
        dots_pos = self.dots_pos
        count = len(dots_pos)

        if self._min_range:
            min_range_dir = self.min_range_dir
            return [
                (min_range_dir * i, POS_MAX - min_range_dir * (count - 1 - i))
                for i in range(count)
            ]

        if not self._enable_cross:
            return [
                (
                    dots_pos[i - 1] if i > 0 else POS_MIN,
                    dots_pos[i + 1] if i < count - 1 else POS_MAX,
                )
                for i in range(count)
            ]

        return [(POS_MIN, POS_MAX) for _ in range(count)]

    @property
    def min_range_dir(self) -> float:
        """Минимальная дистанция между соседними ручками в процентах."""
        if not self._min_range:
            return 0.0
        return float(self._min_range) * self.gap

    @property
    def max_range_dir(self) -> float:
        """Максимальная дистанция между соседними ручками в процентах.

        Вычисляется, но не участвует в value_pos_range и fixed-режиме.
        """
        if not self._max_range:
            return POS_MAX
        return float(self._max_range) * self.gap

    # =========================================================================
    # CONVERTER
    # =========================================================================

    def parse_value(self, val: TValue) -> float:
        """Позиция ручки по значению.

        Ошибки (VALUE / MIN / MAX) передаются в on_error, позиция → 0.
        """
        if self._data is not None:
            try:
                index = self._data.index(val)
            except ValueError:
                self._emit_error(ErrorType.VALUE)
                return 0
            return self.value_pos[index]

        if not is_numeric(val) or not self._has_numeric_domain():
            self._emit_error(ErrorType.VALUE)
            return 0

        if val < self._min_value:
            self._emit_error(ErrorType.MIN)
            return 0
        if val > self._max_value:
            self._emit_error(ErrorType.MAX)
            return 0

        step = safe_divide(safe_subtract(val, self._min_value), self._interval)
        value_pos = self.value_pos
        # Значение вне сетки шагов или вырожденный домен
        if step is None or not is_integral(step) or not 0 <= step < len(value_pos):
            self._emit_error(ErrorType.VALUE)
            return 0

        return value_pos[int(step)]

    def parse_pos(self, pos: float) -> Any:
        """Значение по позиции: ближайший шаг домена.

        Returns:
            data[index] или min_value + index * interval;
            None если позиция вне data, не конечна (NaN/inf)
            или числовой домен некорректен
        """
        ratio = pos / self.gap
        if not math.isfinite(ratio):
            return None
        index = math.floor(ratio + 0.5)

        if self._data is not None:
            if 0 <= index < len(self._data):
                return self._data[index]
            return None

        if not self._has_numeric_domain():
            return None

        value = safe_add(safe_multiply(index, self._interval), self._min_value)
        as_int = isinstance(self._min_value, int) and isinstance(self._interval, int)
        return to_number(value, as_int=as_int)

    @property
    def total(self) -> int:
        """Количество шагов домена.

        Если (max - min) не делится на interval нацело → INTERVAL, 0.
        """
        if self._data is not None:
            return len(self._data) - 1

        if not self._has_numeric_domain():
            self._emit_error(ErrorType.INTERVAL)
            return 0

        steps = safe_divide(
            safe_subtract(self._max_value, self._min_value), self._interval
        )
        if steps is None or not is_integral(steps):
            self._emit_error(ErrorType.INTERVAL)
            return 0

        return int(steps)

    @property
    def gap(self) -> float:
        """Дистанция между соседними шагами в процентах (100 / total)."""
        return self._gap_for(self.total)

    @property
    def value_pos(self) -> list[float]:
        """Позиции всех шагов: [0, gap, 2 * gap, ..., 100]."""
        total = self.total
        gap = self._gap_for(total)
        return [index * gap for index in range(total)] + [POS_MAX]

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _gap_for(total: int) -> float:
        # Вырожденный домен (total = 0): каждая позиция округляется к шагу 0
        if not total:
            return math.inf
        return POS_MAX / total

    def _has_numeric_domain(self) -> bool:
        return (
            is_numeric(self._max_value)
            and is_numeric(self._min_value)
            and is_numeric(self._interval)
        )

    def _emit_error(self, error_type: ErrorType) -> None:
        """Передача ошибки в on_error (или только в debug-лог)."""
        message = ERROR_MESSAGES[error_type]
        if self._on_error is None:
            logger.debug(f"Slider error {error_type.name} ignored: {message}")
            return
        self._on_error(error_type, message)
