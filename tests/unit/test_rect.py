"""
Тесты для Rect2 / Rect3

Проверяет:
1. Конструкторы (from_coords / from_tuple / from_size)
2. Размеры (width / height / depth / size)
3. Предикаты порядка и положительности, ordered()
4. intersect / expand включая граничные случаи
5. Делегирование операторов углам
6. checked / try с префиксом поля угла
7. Конверсии скалярного типа
"""

import logging
from fractions import Fraction

import pytest

from vecrect.core.domain.errors import CheckedArithmeticError, ConversionError
from vecrect.core.domain.rect import Rect2, Rect3
from vecrect.core.domain.vector import Vector2, Vector3
from vecrect.core.math.fixed_int import U8

# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


class TestConstruction:
    """Тесты для конструкторов прямоугольника"""

    def test_from_coords(self) -> None:
        """from_coords(x0, y0, x1, y1)"""
        rect = Rect2.from_coords(0, 1, 2, 3)
        assert rect.point0 == Vector2(0, 1)
        assert rect.point1 == Vector2(2, 3)
        assert rect == Rect2(Vector2(0, 1), Vector2(2, 3))

    def test_from_coords_3d(self) -> None:
        """from_coords(x0, y0, z0, x1, y1, z1)"""
        rect = Rect3.from_coords(0, 1, 2, 3, 4, 5)
        assert rect.point0 == Vector3(0, 1, 2)
        assert rect.point1 == Vector3(3, 4, 5)

    def test_from_coords_wrong_count_raises(self) -> None:
        """Неверное число координат → ValueError"""
        with pytest.raises(ValueError, match="requires 4 corner coordinates"):
            Rect2.from_coords(0, 1, 2)

    def test_tuple_round_trip(self) -> None:
        """from_tuple(to_tuple(r)) == r"""
        rect = Rect3.from_coords(1, 2, 3, 4, 5, 6)
        assert rect.to_tuple() == (1, 2, 3, 4, 5, 6)
        assert Rect3.from_tuple(rect.to_tuple()) == rect

    def test_from_size_vector(self) -> None:
        """from_size: point0 в начале координат"""
        rect = Rect2.from_size(Vector2(10, 20))
        assert rect == Rect2.from_coords(0, 0, 10, 20)

    def test_from_size_tuple_keeps_component_types(self) -> None:
        """Начало координат строится из типа каждой компоненты"""
        rect = Rect3.from_size((2.5, U8(3), Fraction(1, 2)))
        assert type(rect.point0.x) is float
        assert type(rect.point0.y) is U8
        assert rect.point0.z == Fraction(0)

    def test_from_size_wrong_dimension_raises(self) -> None:
        """Вектор другой размерности → TypeError"""
        with pytest.raises(TypeError):
            Rect2.from_size(Vector3(1, 2, 3))

    def test_iteration_over_corners(self) -> None:
        """Итерация по углам"""
        point0, point1 = Rect2.from_coords(0, 1, 2, 3)
        assert point0 == Vector2(0, 1)
        assert point1 == Vector2(2, 3)

    def test_hashable(self) -> None:
        """Прямоугольники можно использовать как ключи"""
        assert {Rect2.from_coords(0, 0, 1, 1): 1}[Rect2.from_coords(0, 0, 1, 1)] == 1


# =============================================================================
# РАЗМЕРЫ
# =============================================================================


class TestDimensions:
    """Тесты для width / height / depth / size"""

    def test_width_height(self) -> None:
        """Разность координат углов по оси"""
        rect = Rect2.from_coords(1, 2, 11, 7)
        assert rect.width() == 10
        assert rect.height() == 5

    def test_depth_only_for_rect3(self) -> None:
        """depth есть только у Rect3"""
        assert Rect3.from_coords(0, 0, 1, 2, 3, 9).depth() == 8
        assert not hasattr(Rect2, "depth")

    def test_size(self) -> None:
        """size = point1 - point0"""
        assert Rect2.from_coords(1, 2, 11, 7).size() == Vector2(10, 5)

    def test_negative_size_for_unordered_rect(self) -> None:
        """Неупорядоченный прямоугольник даёт отрицательные размеры"""
        rect = Rect2.from_coords(5, 0, 0, 5)
        assert rect.width() == -5

    def test_dimensions_do_not_mutate(self) -> None:
        """Размеры не мутируют прямоугольник"""
        rect = Rect2.from_coords(1, 2, 11, 7)
        rect.size()
        assert rect == Rect2.from_coords(1, 2, 11, 7)


# =============================================================================
# ПОРЯДОК
# =============================================================================


class TestOrdering:
    """Тесты для is_ordered / is_positive / ordered"""

    def test_ordered_and_positive(self) -> None:
        """(0, 1, 2, 3): упорядочен и положителен"""
        rect = Rect2.from_coords(0, 1, 2, 3)
        assert rect.is_ordered()
        assert rect.is_positive()
        assert rect.is_partially_ordered()
        assert rect.is_partially_positive()

    def test_degenerate_is_ordered_but_not_positive(self) -> None:
        """(0, 1, 0, 3): упорядочен, но не положителен"""
        rect = Rect2.from_coords(0, 1, 0, 3)
        assert rect.is_ordered()
        assert not rect.is_positive()

    def test_unordered(self) -> None:
        """(2, 1, 0, 3): ни упорядочен, ни положителен"""
        rect = Rect2.from_coords(2, 1, 0, 3)
        assert not rect.is_ordered()
        assert not rect.is_positive()

    def test_ordered_sorts_each_axis(self) -> None:
        """ordered сортирует оси независимо, а не меняет углы местами"""
        assert Rect2.from_coords(2, 1, 0, 3).ordered() == Rect2.from_coords(0, 1, 2, 3)
        assert Rect3.from_coords(5, 0, 9, 1, 4, 2).ordered() == Rect3.from_coords(1, 0, 2, 5, 4, 9)

    def test_ordered_is_idempotent(self) -> None:
        """Упорядоченный прямоугольник не меняется"""
        rect = Rect2.from_coords(0, 1, 2, 3)
        assert rect.ordered() == rect
        assert rect.partially_ordered() == rect

    def test_nan_is_neither_ordered_nor_positive(self) -> None:
        """NaN несравним: предикаты ложны"""
        rect = Rect2.from_coords(0.0, float("nan"), 1.0, 1.0)
        assert not rect.is_partially_ordered()
        assert not rect.is_partially_positive()

    def test_partially_ordered_leaves_incomparable_pair(self) -> None:
        """Несравнимая пара остаётся как есть"""
        rect = Rect2.from_coords(3.0, float("nan"), 1.0, 2.0).partially_ordered()
        assert rect.point0.x == 1.0
        assert rect.point1.x == 3.0
        assert rect.point1.y == 2.0


# =============================================================================
# ПЕРЕСЕЧЕНИЕ
# =============================================================================


class TestIntersect:
    """Тесты для intersect"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ((0, 1, 80, 81), (20, 21, 100, 101), (20, 21, 80, 81)),
            ((1, 0, 101, 100), (21, 20, 81, 80), (21, 20, 81, 80)),
        ],
    )
    def test_overlap(self, a: tuple, b: tuple, expected: tuple) -> None:
        """Перекрывающиеся прямоугольники"""
        result = Rect2.from_tuple(a).intersect(Rect2.from_tuple(b))
        assert result == Rect2.from_tuple(expected)

    @pytest.mark.parametrize(
        "a,b",
        [
            ((0, 0, 10, 10), (10, 0, 20, 10)),
            ((0, 0, 100, 100), (100, 0, 200, 100)),
            ((0, 0, 100, 100), (50, 50, 50, 50)),
            ((0, 0, 100, 100), (80, 80, 20, 20)),
            ((0, 0, 10, 10), (20, 0, 30, 10)),
        ],
    )
    def test_no_intersection(self, a: tuple, b: tuple) -> None:
        """Касание, вырожденный, неупорядоченный или непересекающийся → None"""
        assert Rect2.from_tuple(a).intersect(Rect2.from_tuple(b)) is None

    def test_intersect_is_symmetric(self) -> None:
        """intersect(a, b) == intersect(b, a)"""
        a = Rect2.from_coords(0, 1, 80, 81)
        b = Rect2.from_coords(20, 21, 100, 101)
        assert a.intersect(b) == b.intersect(a)

    def test_intersect_3d(self) -> None:
        """Пересечение призм"""
        a = Rect3.from_coords(0, 0, 0, 10, 10, 10)
        b = Rect3.from_coords(5, 5, 5, 15, 15, 15)
        assert a.intersect(b) == Rect3.from_coords(5, 5, 5, 10, 10, 10)

    def test_non_rect_operand_raises(self) -> None:
        """Операнд другого класса → TypeError"""
        with pytest.raises(TypeError):
            Rect2.from_coords(0, 0, 1, 1).intersect(Rect3.from_coords(0, 0, 0, 1, 1, 1))

    def test_empty_overlap_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Пустое пересечение пишется в DEBUG-лог"""
        with caplog.at_level(logging.DEBUG, logger="vecrect.core.domain.rect"):
            Rect2.from_coords(0, 0, 10, 10).intersect(Rect2.from_coords(10, 0, 20, 10))
        assert "empty overlap" in caplog.text


# =============================================================================
# РАСШИРЕНИЕ
# =============================================================================


class TestExpand:
    """Тесты для expand"""

    def test_expand_covers_both(self) -> None:
        """Наименьший прямоугольник, содержащий оба"""
        a = Rect2.from_coords(0, 0, 10, 10)
        b = Rect2.from_coords(5, -5, 20, 8)
        assert a.expand(b) == Rect2.from_coords(0, -5, 20, 10)

    def test_expand_self_is_identity(self) -> None:
        """r.expand(r) == r для положительного r"""
        rect = Rect3.from_coords(1, 2, 3, 4, 5, 6)
        assert rect.expand(rect) == rect

    def test_expand_non_positive_returns_self(self) -> None:
        """Неположительный прямоугольник → self без изменений"""
        positive = Rect2.from_coords(0, 0, 10, 10)
        degenerate = Rect2.from_coords(0, 0, 0, 10)
        assert positive.expand(degenerate) is positive
        assert degenerate.expand(positive) is degenerate

    def test_expand_fallback_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Возврат self пишется в DEBUG-лог"""
        with caplog.at_level(logging.DEBUG, logger="vecrect.core.domain.rect"):
            Rect2.from_coords(0, 0, 10, 10).expand(Rect2.from_coords(5, 5, 1, 1))
        assert "non-positive operand" in caplog.text


# =============================================================================
# ДЕЛЕГИРОВАНИЕ ОПЕРАТОРОВ
# =============================================================================


class TestLiftedOperators:
    """Тесты для операторов прямоугольника"""

    def test_broadcast_applies_to_both_corners(self) -> None:
        """Скаляр применяется к обоим углам"""
        assert Rect2.from_coords(0, 1, 2, 3) + 10 == Rect2.from_coords(10, 11, 12, 13)
        assert Rect2.from_coords(0, 1, 2, 3) * 2 == Rect2.from_coords(0, 2, 4, 6)

    def test_vector_translation(self) -> None:
        """Вектор того же измерения — сдвиг обоих углов"""
        rect = Rect2.from_coords(0, 0, 1, 1) + Vector2(5, 6)
        assert rect == Rect2.from_coords(5, 6, 6, 7)

    def test_tuple_operand(self) -> None:
        """Кортеж длины N"""
        assert Rect3.from_coords(0, 0, 0, 1, 1, 1) * (1, 2, 3) == Rect3.from_coords(0, 0, 0, 1, 2, 3)

    def test_reflected(self) -> None:
        """Скаляр слева"""
        assert 10 - Rect2.from_coords(0, 1, 2, 3) == Rect2.from_coords(10, 9, 8, 7)
        assert -Rect2.from_coords(0, 1, 2, 3) == Rect2.from_coords(0, -1, -2, -3)

    def test_rect_is_not_an_operand(self) -> None:
        """Прямоугольник операндом не бывает"""
        rect = Rect2.from_coords(0, 0, 1, 1)
        with pytest.raises(TypeError):
            rect + rect
        with pytest.raises(TypeError):
            rect + Vector3(1, 2, 3)
        with pytest.raises(TypeError):
            rect.saturating_add(rect)

    def test_inplace_updates_both_corners(self) -> None:
        """In-place обновляет оба угла того же прямоугольника"""
        rect = Rect2.from_coords(0, 1, 2, 3)
        alias = rect
        rect += Vector2(1, 1)
        assert rect is alias
        assert rect == Rect2.from_coords(1, 2, 3, 4)

    def test_inplace_with_shared_corner(self) -> None:
        """Общий объект угла не мутируется дважды"""
        corner = Vector2(1, 1)
        rect = Rect2(corner, corner)
        rect *= 3
        assert rect == Rect2.from_coords(3, 3, 3, 3)
        assert corner == Vector2(1, 1)

    def test_inplace_rebinds_corners(self) -> None:
        """In-place заменяет объекты углов; ранее полученные ссылки не меняются"""
        rect = Rect2.from_coords(0, 1, 2, 3)
        old_point0 = rect.point0
        old_point1 = rect.point1
        rect += 1
        assert rect.point0 is not old_point0
        assert rect.point1 is not old_point1
        assert old_point0 == Vector2(0, 1)
        assert old_point1 == Vector2(2, 3)
        assert rect == Rect2.from_coords(1, 2, 3, 4)

    def test_checked(self) -> None:
        """checked_*: None если хотя бы один угол неудачен"""
        rect = Rect2(Vector2(U8(0), U8(0)), Vector2(U8(100), U8(250)))
        assert rect.checked_add(5) == Rect2.from_coords(5, 5, 105, 255)
        assert rect.checked_add(10) is None
        assert rect.checked_neg() is None

    def test_try_prefixes_corner(self) -> None:
        """try_*: поле с префиксом угла, point0 раньше point1"""
        rect = Rect2(Vector2(U8(0), U8(0)), Vector2(U8(100), U8(250)))
        with pytest.raises(CheckedArithmeticError) as exc_info:
            rect.try_add(10)
        assert exc_info.value.field == "point1.y"
        assert isinstance(exc_info.value.__cause__, OverflowError)

        with pytest.raises(CheckedArithmeticError) as exc_info:
            rect.try_sub(1)
        assert exc_info.value.field == "point0.x"

    def test_saturating_and_wrapping(self) -> None:
        """saturating / wrapping на обоих углах"""
        rect = Rect2(Vector2(U8(0), U8(0)), Vector2(U8(100), U8(250)))
        assert rect.saturating_add(10) == Rect2.from_coords(10, 10, 110, 255)
        assert rect.wrapping_add(10) == Rect2.from_coords(10, 10, 110, 4)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


class TestConversions:
    """Тесты для convert / try_convert"""

    def test_convert(self) -> None:
        """Total-конверсия обоих углов"""
        rect = Rect2.from_coords(0, 1, 2, 3).convert(float)
        assert type(rect.point1.y) is float

    def test_try_convert_prefixes_corner(self) -> None:
        """Неудачное поле с префиксом угла"""
        with pytest.raises(ConversionError) as exc_info:
            Rect2.from_coords(0, 1, 2, 300).try_convert(U8)
        assert exc_info.value.field == "point1.y"
        assert exc_info.value.value == 300
        assert isinstance(exc_info.value.__cause__, OverflowError)
