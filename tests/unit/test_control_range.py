"""
Тесты resolver'а допустимых диапазонов ручек (Control)

Покрытие:
- enable_cross=False: границы - соседние ручки
- enable_cross=True: [0, 100]
- min_range: место для всех ручек слева и справа
- max_range: вычисляется, но не применяется
- get_valid_pos: clamp и флаг in_range
"""

import pytest

from slider_core.control import Control
from slider_core.core.domain import ValidPos


# =============================================================================
# FIXTURES
# =============================================================================


def make_control(value, **kwargs) -> Control:
    """Домен [0, 100] с шагом 10 (gap = 10%)."""
    kwargs.setdefault("max_value", 100)
    kwargs.setdefault("min_value", 0)
    kwargs.setdefault("interval", 10)
    return Control(value, **kwargs)


# =============================================================================
# VALUE POS RANGE
# =============================================================================


class TestNoCrossRange:
    """enable_cross=False"""

    def test_bounds_are_neighbors(self) -> None:
        control = make_control([20, 50, 80], enable_cross=False)
        assert control.value_pos_range == [(0, 50.0), (20.0, 80.0), (50.0, 100)]

    def test_single_handle(self) -> None:
        control = make_control(40, enable_cross=False)
        assert control.value_pos_range == [(0, 100)]

    def test_upper_bound_is_next_handle(self) -> None:
        """Верхняя граница ручки i == позиция ручки i + 1"""
        control = make_control([10, 30, 60], enable_cross=False)
        ranges = control.value_pos_range
        for i in range(len(control.dots_pos) - 1):
            assert ranges[i][1] == control.dots_pos[i + 1]
        assert ranges[-1][1] == 100

    def test_next_handle_at_zero_is_bound(self) -> None:
        """Соседняя ручка в позиции 0 - это граница, а не «нет соседа»"""
        control = make_control([0, 0], enable_cross=False)
        assert control.value_pos_range == [(0, 0), (0, 100)]


class TestCrossRange:
    """enable_cross=True без min_range"""

    def test_full_track(self) -> None:
        control = make_control([20, 50, 80], enable_cross=True)
        assert control.value_pos_range == [(0, 100)] * 3


class TestMinRange:
    """min_range задан (в шагах домена)"""

    def test_min_range_dir(self) -> None:
        control = make_control([20, 80], min_range=2)
        assert control.min_range_dir == pytest.approx(20.0)

    def test_bounds_leave_room_for_all_handles(self) -> None:
        control = make_control([0, 50, 100], min_range=2)
        ranges = control.value_pos_range
        assert ranges[0] == pytest.approx((0, 60))
        assert ranges[1] == pytest.approx((20, 80))
        assert ranges[2] == pytest.approx((40, 100))

    def test_min_range_overrides_cross_setting(self) -> None:
        """min_range задаёт границы независимо от enable_cross"""
        with_cross = make_control([20, 80], min_range=1, enable_cross=True)
        without_cross = make_control([20, 80], min_range=1, enable_cross=False)
        assert with_cross.value_pos_range == without_cross.value_pos_range

    def test_zero_min_range_is_unset(self) -> None:
        control = make_control([20, 80], min_range=0, enable_cross=False)
        assert control.min_range_dir == 0
        assert control.value_pos_range == [(0, 80.0), (20.0, 100)]


class TestMaxRange:
    """max_range вычисляется, но не ограничивает ручки"""

    def test_default_max_range_dir(self) -> None:
        control = make_control([20, 80])
        assert control.max_range_dir == 100

    def test_max_range_dir(self) -> None:
        control = make_control([20, 80], max_range=3)
        assert control.max_range_dir == pytest.approx(30.0)

    def test_max_range_not_enforced(self) -> None:
        limited = make_control([20, 80], max_range=1, enable_cross=False)
        unlimited = make_control([20, 80], enable_cross=False)
        assert limited.value_pos_range == unlimited.value_pos_range

        assert limited.set_dot_pos(0.0, 0)
        assert limited.dots_pos == [0.0, 80.0]


# =============================================================================
# GET VALID POS
# =============================================================================


class TestGetValidPos:
    """Clamp позиции в диапазон ручки"""

    def test_in_range(self) -> None:
        control = make_control([20, 80], enable_cross=False)
        assert control.get_valid_pos(50.0, 0) == ValidPos(pos=50.0, in_range=True)

    def test_clamped_to_next_handle(self) -> None:
        """Перемещение за соседнюю ручку → граница, in_range=False"""
        control = make_control([20, 80], enable_cross=False)
        assert control.get_valid_pos(90.0, 0) == ValidPos(pos=80.0, in_range=False)

    def test_clamped_to_previous_handle(self) -> None:
        control = make_control([20, 80], enable_cross=False)
        assert control.get_valid_pos(10.0, 1) == ValidPos(pos=20.0, in_range=False)

    def test_clamped_to_track(self) -> None:
        control = make_control([20, 80], enable_cross=True)
        assert control.get_valid_pos(-5.0, 0) == ValidPos(pos=0, in_range=False)
        assert control.get_valid_pos(120.0, 1) == ValidPos(pos=100, in_range=False)

    def test_bound_itself_is_in_range(self) -> None:
        control = make_control([20, 80], enable_cross=False)
        assert control.get_valid_pos(80.0, 0).in_range
