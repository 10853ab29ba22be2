"""
Тесты для адаптеров complex / numpy
"""

import numpy as np
import pytest

from vecrect.core.domain.rect import Rect2, Rect3
from vecrect.core.domain.vector import Vector2, Vector3, Vector4
from vecrect.core.interop import (
    from_complex,
    from_numpy,
    rect_from_numpy,
    rect_to_numpy,
    to_complex,
    to_numpy,
)


class TestComplex:
    """Тесты для Vector2 ↔ complex"""

    def test_to_complex(self) -> None:
        """x → real, y → imag"""
        assert to_complex(Vector2(1.5, -2.0)) == complex(1.5, -2.0)

    def test_from_complex(self) -> None:
        """real → x, imag → y"""
        assert from_complex(3 + 4j) == Vector2(3.0, 4.0)

    def test_round_trip(self) -> None:
        """complex → Vector2 → complex"""
        value = complex(-0.5, 7.25)
        assert to_complex(from_complex(value)) == value


class TestNumpyVectors:
    """Тесты для векторов ↔ numpy"""

    def test_to_numpy_field_order(self) -> None:
        """Массив в порядке x, y, z, w"""
        array = to_numpy(Vector4(1, 2, 3, 4))
        assert array.shape == (4,)
        assert array.tolist() == [1, 2, 3, 4]

    def test_to_numpy_dtype(self) -> None:
        """Явный dtype"""
        assert to_numpy(Vector2(1, 2), dtype=np.float32).dtype == np.float32

    @pytest.mark.parametrize("cls,length", [(Vector2, 2), (Vector3, 3), (Vector4, 4)])
    def test_from_numpy_chooses_dimension(self, cls: type, length: int) -> None:
        """Класс вектора выбирается по длине"""
        vector = from_numpy(np.arange(length))
        assert type(vector) is cls
        assert vector == cls.from_array(range(length))

    def test_from_numpy_builtin_scalars(self) -> None:
        """Поля — встроенные скаляры Python"""
        vector = from_numpy(np.array([1.5, 2.5]))
        assert type(vector.x) is float

    @pytest.mark.parametrize("array", [np.zeros(5), np.zeros(1), np.zeros((2, 2))])
    def test_from_numpy_bad_shape_raises(self, array: np.ndarray) -> None:
        """Неподдерживаемая форма → ValueError"""
        with pytest.raises(ValueError, match="expected a 1-D array"):
            from_numpy(array)


class TestNumpyRects:
    """Тесты для прямоугольников ↔ numpy"""

    def test_rect_to_numpy(self) -> None:
        """Строки — point0 и point1"""
        array = rect_to_numpy(Rect2.from_coords(0, 1, 2, 3))
        assert array.shape == (2, 2)
        assert array.tolist() == [[0, 1], [2, 3]]

    def test_rect_round_trip(self) -> None:
        """rect → array → rect"""
        rect = Rect3.from_coords(0, 1, 2, 3, 4, 5)
        assert rect_from_numpy(rect_to_numpy(rect)) == rect

    def test_rect_from_numpy_bad_shape_raises(self) -> None:
        """Неподдерживаемая форма → ValueError"""
        with pytest.raises(ValueError, match="shape"):
            rect_from_numpy(np.zeros((3, 2)))
        with pytest.raises(ValueError):
            rect_from_numpy(np.zeros((2, 4)))


class TestNumpyScalarOperands:
    """Тесты для numpy-скаляров слева от вектора / прямоугольника"""

    def test_numpy_scalar_left_returns_vector(self) -> None:
        """np.float64 * Vector2 → Vector2, а не ndarray"""
        result = np.float64(2.0) * Vector2(1.0, 2.0)
        assert type(result) is Vector2
        assert result == Vector2(2.0, 4.0)

    def test_numpy_scalar_left_reflected_order(self) -> None:
        """Отражённые операторы сохраняют порядок scalar ⊗ field"""
        assert np.float64(10.0) - Vector3(1.0, 2.0, 3.0) == Vector3(9.0, 8.0, 7.0)
        assert np.int64(1) + Vector4(1, 2, 3, 4) == Vector4(2, 3, 4, 5)

    def test_numpy_scalar_left_of_rect(self) -> None:
        """np.float64 * Rect2 → Rect2"""
        result = np.float64(2.0) * Rect2.from_coords(0.0, 1.0, 2.0, 3.0)
        assert type(result) is Rect2
        assert result == Rect2.from_coords(0.0, 2.0, 4.0, 6.0)

    def test_numpy_scalar_right_broadcasts(self) -> None:
        """numpy-скаляр справа — обычный broadcast"""
        assert Vector2(1.0, 2.0) * np.float64(3.0) == Vector2(3.0, 6.0)
