"""
Products — скалярное и векторное произведения как свободные функции

dot(a, b) = sum(a_i * b_i) для любой размерности.
cross(a, b) — только для трёхмерных векторов.
"""

from typing import Any, Sequence, TypeVar, Union

from vecrect.core.domain.vector import Vector3, VectorBase

T = TypeVar("T")


def dot(lhs: VectorBase, rhs: Union[VectorBase, Sequence[Any]]) -> Any:
    """
    Скалярное произведение двух векторов одной размерности.

    Examples:
        >>> dot(Vector3(1, 2, 3), Vector3(4, 5, 6))
        32

    Raises:
        TypeError: Если lhs не вектор или rhs не того же класса
    """
    if not isinstance(lhs, VectorBase):
        raise TypeError(f"dot product requires a vector, got {type(lhs).__name__!r}")
    return lhs.dot(rhs)


def cross(lhs: Vector3[T], rhs: Union[Vector3[T], Sequence[T]]) -> Vector3[T]:
    """
    Векторное произведение трёхмерных векторов.

    Raises:
        TypeError: Для Vector2 / Vector4 и любых других операндов
    """
    if not isinstance(lhs, Vector3):
        raise TypeError(f"cross product requires a Vector3, got {type(lhs).__name__!r}")
    return lhs.cross(rhs)
