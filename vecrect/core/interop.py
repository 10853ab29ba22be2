"""
Interop — адаптеры к complex и numpy

- Vector2 ↔ complex: real → x, imag → y (без валидации)
- Vector2/3/4 ↔ numpy.ndarray формы (N,)
- Rect2/3 ↔ numpy.ndarray формы (2, N): строка 0 — point0, строка 1 — point1

Из numpy значения извлекаются через tolist(), поэтому поля вектора —
встроенные Python-скаляры (int, float, complex), а не numpy-скаляры.
"""

from typing import Any, Final, Optional, Union

import numpy as np

from vecrect.core.domain.rect import Rect2, Rect3, RectBase
from vecrect.core.domain.vector import Vector2, Vector3, Vector4, VectorBase

# Класс вектора по длине одномерного массива
VECTOR_BY_LENGTH: Final[dict[int, type]] = {2: Vector2, 3: Vector3, 4: Vector4}

# Класс прямоугольника по числу столбцов массива (2, N)
RECT_BY_LENGTH: Final[dict[int, type]] = {2: Rect2, 3: Rect3}


# =============================================================================
# COMPLEX
# =============================================================================


def to_complex(vector: Vector2) -> complex:
    """
    Vector2 → complex(x, y).

    Examples:
        >>> to_complex(Vector2(1.5, -2.0))
        (1.5-2j)
    """
    return complex(vector.x, vector.y)


def from_complex(value: complex) -> Vector2[float]:
    """complex → Vector2(real, imag)."""
    return Vector2(value.real, value.imag)


# =============================================================================
# NUMPY: ВЕКТОРЫ
# =============================================================================


def to_numpy(vector: VectorBase, dtype: Optional[Any] = None) -> np.ndarray:
    """
    Вектор → одномерный массив в порядке x, y, z, w.

    Args:
        vector: Vector2/3/4
        dtype: dtype массива (None → вывод numpy)
    """
    return np.asarray(vector.to_tuple(), dtype=dtype)


def from_numpy(array: Union[np.ndarray, Any]) -> VectorBase:
    """
    Одномерный массив длины 2/3/4 → Vector2/3/4.

    Raises:
        ValueError: Если массив не одномерный или длина не 2, 3, 4
    """
    values = np.asarray(array)
    if values.ndim != 1 or values.shape[0] not in VECTOR_BY_LENGTH:
        raise ValueError(f"expected a 1-D array of length 2, 3 or 4, got shape {values.shape}")
    return VECTOR_BY_LENGTH[values.shape[0]].from_array(values.tolist())


# =============================================================================
# NUMPY: ПРЯМОУГОЛЬНИКИ
# =============================================================================


def rect_to_numpy(rect: RectBase, dtype: Optional[Any] = None) -> np.ndarray:
    """Прямоугольник → массив формы (2, N): [point0, point1]."""
    return np.asarray([rect.point0.to_tuple(), rect.point1.to_tuple()], dtype=dtype)


def rect_from_numpy(array: Union[np.ndarray, Any]) -> RectBase:
    """
    Массив формы (2, 2) или (2, 3) → Rect2 / Rect3.

    Raises:
        ValueError: Для любой другой формы
    """
    values = np.asarray(array)
    if values.ndim != 2 or values.shape[0] != 2 or values.shape[1] not in RECT_BY_LENGTH:
        raise ValueError(f"expected an array of shape (2, 2) or (2, 3), got shape {values.shape}")
    rect_cls = RECT_BY_LENGTH[values.shape[1]]
    point0, point1 = values.tolist()
    return rect_cls(rect_cls._VECTOR.from_array(point0), rect_cls._VECTOR.from_array(point1))
