"""
Rect — выровненные по осям прямоугольники Rect2 / Rect3

Прямоугольник — пара угловых векторов (point0, point1) одной размерности.

ВАЖНО: point1 >= point0 НЕ является инвариантом. "Упорядоченность"
(is_ordered) и "положительность" (is_positive) — производные предикаты.
Прямоугольник может временно описывать неупорядоченные границы
(например, при знаковом росте); канонический вид min/max получается
только явным вызовом ordered() / partially_ordered().

Любой оператор вектора доступен у прямоугольника: он применяется к point0
и point1 независимо с одним и тем же правым операндом (скаляр, вектор той
же размерности или tuple/list длины N). Прямоугольник операндом не бывает.

Геометрические исходы — значения, а не ошибки:
- intersect() без пересечения → None
- expand() с неположительным прямоугольником → self без изменений
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Iterator, Optional, Sequence, TypeVar, Union

from vecrect.core.domain.errors import ConversionError
from vecrect.core.domain.lifting import (
    Lifted,
    corner_binary,
    corner_checked,
    corner_inplace,
    corner_try,
    corner_unary,
)
from vecrect.core.domain.vector import Vector2, Vector3, VectorBase
from vecrect.core.math.numerical_safeguards import (
    additive_identity,
    partial_max,
    partial_min,
    sort_pair,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound="RectBase")


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class RectBase(Lifted, Generic[T]):
    """
    Общая реализация прямоугольников любой размерности.

    Подкласс задаёт _VECTOR — класс угловых векторов.
    """

    __slots__ = ()

    _VECTOR: ClassVar[type] = VectorBase

    point0: Any
    point1: Any

    def __iter__(self) -> Iterator[Any]:
        return iter((self.point0, self.point1))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_coords(cls: type[R], *coords: T) -> R:
        """
        Прямоугольник из координат углов: from_coords(x0, y0, x1, y1).

        Raises:
            ValueError: Если число координат не равно 2 * N
        """
        return cls.from_tuple(coords)

    @classmethod
    def from_tuple(cls: type[R], corners: Sequence[T]) -> R:
        """
        Прямоугольник из плоского кортежа (x0, y0[, z0], x1, y1[, z1]).

        Raises:
            ValueError: Если длина не равна 2 * N
        """
        size = len(cls._VECTOR._FIELDS)
        if len(corners) != 2 * size:
            raise ValueError(
                f"{cls.__name__} requires {2 * size} corner coordinates, got {len(corners)}"
            )
        return cls(
            cls._VECTOR.from_tuple(tuple(corners[:size])),
            cls._VECTOR.from_tuple(tuple(corners[size:])),
        )

    @classmethod
    def from_size(cls: type[R], size: Union[VectorBase, Sequence[T]]) -> R:
        """
        Прямоугольник заданного размера с point0 в начале координат.

        Начало координат строится из аддитивного нуля типа каждой
        компоненты размера.

        Args:
            size: Вектор размера или tuple/list длины N
        """
        if isinstance(size, VectorBase):
            if not isinstance(size, cls._VECTOR):
                raise TypeError(
                    f"{cls.__name__} size must be a {cls._VECTOR.__name__}, got {type(size).__name__}"
                )
            point1 = size
        else:
            point1 = cls._VECTOR.from_tuple(tuple(size))
        origin = cls._VECTOR.from_tuple(tuple(additive_identity(value) for value in point1))
        return cls(origin, point1)

    def to_tuple(self) -> tuple:
        """Плоский кортеж координат углов (обратное к from_tuple)."""
        return self.point0.to_tuple() + self.point1.to_tuple()

    # -------------------------------------------------------------------------
    # Конверсии скалярного типа
    # -------------------------------------------------------------------------

    def convert(self: R, target: Callable[[Any], Any]) -> R:
        """Total-конверсия скаляров обоих углов."""
        return type(self)(self.point0.convert(target), self.point1.convert(target))

    def try_convert(self: R, target: Callable[[Any], Any]) -> R:
        """
        Fallible-конверсия скаляров обоих углов.

        Raises:
            ConversionError: Первое неудачное поле; point0 проверяется
                раньше point1, имя поля с префиксом ("point1.y")
        """
        corners = []
        for prefix, corner in (("point0.", self.point0), ("point1.", self.point1)):
            try:
                corners.append(corner.try_convert(target))
            except ConversionError as error:
                raise error.with_prefix(prefix) from error.error
        return type(self)(*corners)

    # -------------------------------------------------------------------------
    # Размеры
    # -------------------------------------------------------------------------

    def width(self) -> T:
        """point1.x - point0.x"""
        return self.point1.x - self.point0.x

    def height(self) -> T:
        """point1.y - point0.y"""
        return self.point1.y - self.point0.y

    def size(self) -> Any:
        """Вектор point1 - point0."""
        return self.point1 - self.point0

    # -------------------------------------------------------------------------
    # Предикаты порядка
    # -------------------------------------------------------------------------

    def is_partially_ordered(self) -> bool:
        """True если каждая ось point1 >= соответствующей оси point0."""
        return all(b >= a for a, b in zip(self.point0, self.point1))

    def is_ordered(self) -> bool:
        """
        То же, что is_partially_ordered, для полностью упорядоченных скаляров.
        """
        return self.is_partially_ordered()

    def is_partially_positive(self) -> bool:
        """True если каждая ось point1 строго > соответствующей оси point0."""
        return all(b > a for a, b in zip(self.point0, self.point1))

    def is_positive(self) -> bool:
        """
        То же, что is_partially_positive, для полностью упорядоченных скаляров.
        """
        return self.is_partially_positive()

    def partially_ordered(self: R) -> R:
        """
        Новый прямоугольник, в котором каждая пара осей отсортирована.

        Сортировка независима по осям (это НЕ обмен углов): Rect2(2, 1, 0, 3)
        → Rect2(0, 1, 2, 3). Несравнимые пары остаются как есть.
        """
        pairs = [sort_pair(a, b) for a, b in zip(self.point0, self.point1)]
        return type(self)(
            self._VECTOR.from_tuple(tuple(low for low, _ in pairs)),
            self._VECTOR.from_tuple(tuple(high for _, high in pairs)),
        )

    def ordered(self: R) -> R:
        """То же, что partially_ordered, для полностью упорядоченных скаляров."""
        return self.partially_ordered()

    # -------------------------------------------------------------------------
    # Объединение и пересечение
    # -------------------------------------------------------------------------

    def _combine(self: R, rhs: R, low: Callable, high: Callable) -> R:
        return type(self)(
            self._VECTOR.from_tuple(tuple(low(a, b) for a, b in zip(self.point0, rhs.point0))),
            self._VECTOR.from_tuple(tuple(high(a, b) for a, b in zip(self.point1, rhs.point1))),
        )

    def _require_same(self, rhs: Any, name: str) -> None:
        if not isinstance(rhs, type(self)):
            raise TypeError(f"{type(self).__name__}.{name} requires a {type(self).__name__}, got {type(rhs).__name__!r}")

    def expand(self: R, rhs: R) -> R:
        """
        Наименьший прямоугольник, содержащий self и rhs.

        Только если ОБА прямоугольника строго положительны; иначе
        возвращается self без изменений (без ошибки).

        point0 = partial_min по осям, point1 = partial_max по осям.
        """
        self._require_same(rhs, "expand")
        if not self.is_partially_positive() or not rhs.is_partially_positive():
            logger.debug("%s.expand: non-positive operand, returning self unchanged", type(self).__name__)
            return self
        return self._combine(rhs, partial_min, partial_max)

    def intersect(self: R, rhs: R) -> Optional[R]:
        """
        Пересечение двух строго положительных прямоугольников.

        Returns:
            Прямоугольник пересечения, либо None если один из прямоугольников
            не положителен или пересечение не строго положительно
            (касание по границе не является пересечением)

        Examples:
            >>> Rect2.from_coords(0, 1, 80, 81).intersect(Rect2.from_coords(20, 21, 100, 101))
            Rect2(point0=Vector2(x=20, y=21), point1=Vector2(x=80, y=81))
        """
        self._require_same(rhs, "intersect")
        if not self.is_partially_positive() or not rhs.is_partially_positive():
            return None
        intersection = self._combine(rhs, partial_max, partial_min)
        if not intersection.is_partially_positive():
            logger.debug("%s.intersect: empty overlap", type(self).__name__)
            return None
        return intersection

    # -------------------------------------------------------------------------
    # Поднятые операторы (делегирование углам)
    # -------------------------------------------------------------------------

    __neg__ = corner_unary("__neg__")

    __add__ = corner_binary("__add__", dunder=True)
    __radd__ = corner_binary("__radd__", dunder=True)
    __iadd__ = corner_inplace("__iadd__", "__add__")

    __sub__ = corner_binary("__sub__", dunder=True)
    __rsub__ = corner_binary("__rsub__", dunder=True)
    __isub__ = corner_inplace("__isub__", "__sub__")

    __mul__ = corner_binary("__mul__", dunder=True)
    __rmul__ = corner_binary("__rmul__", dunder=True)
    __imul__ = corner_inplace("__imul__", "__mul__")

    __truediv__ = corner_binary("__truediv__", dunder=True)
    __rtruediv__ = corner_binary("__rtruediv__", dunder=True)
    __itruediv__ = corner_inplace("__itruediv__", "__truediv__")

    __floordiv__ = corner_binary("__floordiv__", dunder=True)
    __rfloordiv__ = corner_binary("__rfloordiv__", dunder=True)
    __ifloordiv__ = corner_inplace("__ifloordiv__", "__floordiv__")

    checked_add = corner_checked("checked_add", 2)
    checked_sub = corner_checked("checked_sub", 2)
    checked_mul = corner_checked("checked_mul", 2)
    checked_div = corner_checked("checked_div", 2)
    checked_neg = corner_checked("checked_neg", 1)

    try_add = corner_try("try_add", 2)
    try_sub = corner_try("try_sub", 2)
    try_mul = corner_try("try_mul", 2)
    try_div = corner_try("try_div", 2)
    try_neg = corner_try("try_neg", 1)

    saturating_add = corner_binary("saturating_add", dunder=False)
    saturating_sub = corner_binary("saturating_sub", dunder=False)
    saturating_mul = corner_binary("saturating_mul", dunder=False)
    saturating_neg = corner_unary("saturating_neg")

    wrapping_add = corner_binary("wrapping_add", dunder=False)
    wrapping_sub = corner_binary("wrapping_sub", dunder=False)
    wrapping_mul = corner_binary("wrapping_mul", dunder=False)
    wrapping_neg = corner_unary("wrapping_neg")


# =============================================================================
# КОНКРЕТНЫЕ РАЗМЕРНОСТИ
# =============================================================================


@dataclass(eq=True, unsafe_hash=True)
class Rect2(RectBase[T]):
    """Двумерный выровненный по осям прямоугольник, заданный двумя противоположными углами."""

    point0: Vector2[T]
    point1: Vector2[T]

    _VECTOR: ClassVar[type] = Vector2


@dataclass(eq=True, unsafe_hash=True)
class Rect3(RectBase[T]):
    """Трёхмерная выровненная по осям прямоугольная призма."""

    point0: Vector3[T]
    point1: Vector3[T]

    _VECTOR: ClassVar[type] = Vector3

    def depth(self) -> T:
        """point1.z - point0.z"""
        return self.point1.z - self.point0.z
