"""
Vector — обобщённые векторы Vector2 / Vector3 / Vector4

Вектор — упорядоченный кортеж из N однотипных скалярных полей
x, y[, z][, w]. Никаких инвариантов, кроме наличия полей; равенство и хеш
структурные (по полям, только в пределах одного класса).

Конструирование:
- Vector3(1, 2, 3) / vec3(1, 2, 3)
- Vector3.from_array([1, 2, 3]), Vector3.from_tuple((1, 2, 3))
Обратно: to_array() → list, to_tuple() → tuple, итерация и индексация
в порядке x, y, z, w.

Конверсии скалярного типа:
- convert(target)      — total: ошибки target пробрасываются как есть
- try_convert(target)  — fallible: первое неудачное поле → ConversionError

Свёртки sum() / product() строго слева направо: ((x + y) + z) + w.

Все арифметические операторы подняты из скалярных фабриками lifting.
"""

import functools
import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Final, Generic, Iterator, Sequence, TypeVar

from vecrect.core.domain.errors import ConversionError
from vecrect.core.domain.lifting import (
    Lifted,
    lift_binary,
    lift_checked,
    lift_inplace,
    lift_named,
    lift_reflected,
    lift_try,
    lift_unary,
    require_operand,
)
from vecrect.core.math import scalar_ops
from vecrect.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    multiplicative_identity,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound="VectorBase")

# Скалярные исключения, которые fallible-конверсия превращает в ConversionError
CONVERSION_ERRORS: Final[tuple[type[Exception], ...]] = (ValueError, TypeError, ArithmeticError)


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class VectorBase(Lifted, Generic[T]):
    """
    Общая реализация для векторов любой размерности.

    Размерность задаётся кортежем имён полей _FIELDS в подклассе;
    все операции выражены через него, поэтому Vector2/3/4 имеют
    идентичный набор операций (кроме cross, только у Vector3).
    """

    __slots__ = ()

    _FIELDS: ClassVar[tuple[str, ...]] = ()

    # -------------------------------------------------------------------------
    # Доступ к полям
    # -------------------------------------------------------------------------

    @classmethod
    def _from_values(cls: type[V], values: Sequence[Any]) -> V:
        return cls(*values)

    def _values(self) -> tuple:
        return tuple(getattr(self, field) for field in self._FIELDS)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values())

    def __len__(self) -> int:
        return len(self._FIELDS)

    def __getitem__(self, index: int) -> T:
        return self._values()[index]

    def __str__(self) -> str:
        return "(" + ", ".join(str(value) for value in self._values()) + ")"

    # -------------------------------------------------------------------------
    # Конструирование и обратная конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_tuple(cls: type[V], values: tuple) -> V:
        """
        Вектор из кортежа той же длины.

        Raises:
            ValueError: Если длина кортежа не равна размерности
        """
        if len(values) != len(cls._FIELDS):
            raise ValueError(
                f"{cls.__name__} requires a tuple of length {len(cls._FIELDS)}, got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def from_array(cls: type[V], values: Sequence[T]) -> V:
        """
        Вектор из последовательности фиксированной длины (list, array, ...).

        Raises:
            ValueError: Если длина не равна размерности
        """
        items = list(values)
        if len(items) != len(cls._FIELDS):
            raise ValueError(
                f"{cls.__name__} requires an array of length {len(cls._FIELDS)}, got {len(items)}"
            )
        return cls(*items)

    def to_tuple(self) -> tuple:
        return self._values()

    def to_array(self) -> list:
        return list(self._values())

    # -------------------------------------------------------------------------
    # Конверсии скалярного типа
    # -------------------------------------------------------------------------

    def convert(self: V, target: Callable[[Any], Any]) -> V:
        """
        Total-конверсия полей в другой скалярный тип.

        Используется, когда target представим для любого значения
        исходного типа (int → float, int → Fraction). Исключения target
        считаются нарушением контракта и пробрасываются без обёртки.

        Args:
            target: Тип или конвертер, применяемый к каждому полю

        Returns:
            Новый вектор того же класса; исходный не изменяется
        """
        return self._from_values([target(value) for value in self._values()])

    def try_convert(self: V, target: Callable[[Any], Any]) -> V:
        """
        Fallible-конверсия полей (например, int → U8).

        Поля конвертируются в порядке x, y, z, w; первое неудачное поле
        прерывает конверсию.

        Args:
            target: Тип или конвертер

        Returns:
            Новый вектор того же класса

        Raises:
            ConversionError: Первое поле, на котором target бросил
                ValueError / TypeError / ArithmeticError
        """
        results = []
        for field, value in zip(self._FIELDS, self._values()):
            try:
                results.append(target(value))
            except CONVERSION_ERRORS as error:
                logger.debug("%s.try_convert failed on field %s=%r: %s", type(self).__name__, field, value, error)
                raise ConversionError(field, value, target, error) from error
        return self._from_values(results)

    # -------------------------------------------------------------------------
    # Свёртки и скалярное произведение
    # -------------------------------------------------------------------------

    def sum(self) -> T:
        """Сумма полей слева направо: ((x + y) + z) + w."""
        return functools.reduce(operator.add, self._values())

    def product(self) -> T:
        """Произведение полей слева направо: ((x * y) * z) * w."""
        return functools.reduce(operator.mul, self._values())

    def dot(self, rhs: Any) -> T:
        """
        Скалярное произведение: покомпонентное умножение + sum().

        Args:
            rhs: Вектор того же класса или tuple/list длины N

        Raises:
            TypeError: Для скаляра или вектора другой размерности
        """
        if not isinstance(rhs, (type(self), tuple, list)):
            raise TypeError(
                f"dot product requires a {type(self).__name__} or a sequence, got {type(rhs).__name__!r}"
            )
        return self._from_values(
            [a * b for a, b in zip(self._values(), require_operand(self, rhs, "dot"))]
        ).sum()

    # -------------------------------------------------------------------------
    # Нейтральные элементы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls: type[V], scalar_type: type = int) -> V:
        """Нулевой вектор заданного скалярного типа."""
        return cls(*(scalar_type(0) for _ in cls._FIELDS))

    @classmethod
    def one(cls: type[V], scalar_type: type = int) -> V:
        """Вектор из единиц заданного скалярного типа."""
        return cls(*(multiplicative_identity(scalar_type) for _ in cls._FIELDS))

    def is_zero(self) -> bool:
        return all(value == 0 for value in self._values())

    def is_one(self) -> bool:
        return all(value == 1 for value in self._values())

    def set_zero(self) -> None:
        """Обнуляет каждое поле, сохраняя его скалярный тип."""
        for field in self._FIELDS:
            setattr(self, field, type(getattr(self, field))(0))

    def set_one(self) -> None:
        for field in self._FIELDS:
            setattr(self, field, type(getattr(self, field))(1))

    def is_close(
        self,
        rhs: Any,
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью (math.isclose).

        Args:
            rhs: Вектор, tuple/list длины N или скаляр (broadcast)
        """
        operand = require_operand(self, rhs, "is_close")
        return all(
            is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self._values(), operand)
        )

    # -------------------------------------------------------------------------
    # Обычные операторы
    # -------------------------------------------------------------------------

    __neg__ = lift_unary(operator.neg, "__neg__")

    __add__ = lift_binary(operator.add, "__add__")
    __radd__ = lift_reflected(operator.add, "__radd__")
    __iadd__ = lift_inplace(operator.add, "__iadd__")

    __sub__ = lift_binary(operator.sub, "__sub__")
    __rsub__ = lift_reflected(operator.sub, "__rsub__")
    __isub__ = lift_inplace(operator.sub, "__isub__")

    __mul__ = lift_binary(operator.mul, "__mul__")
    __rmul__ = lift_reflected(operator.mul, "__rmul__")
    __imul__ = lift_inplace(operator.mul, "__imul__")

    __truediv__ = lift_binary(operator.truediv, "__truediv__")
    __rtruediv__ = lift_reflected(operator.truediv, "__rtruediv__")
    __itruediv__ = lift_inplace(operator.truediv, "__itruediv__")

    __floordiv__ = lift_binary(operator.floordiv, "__floordiv__")
    __rfloordiv__ = lift_reflected(operator.floordiv, "__rfloordiv__")
    __ifloordiv__ = lift_inplace(operator.floordiv, "__ifloordiv__")

    # -------------------------------------------------------------------------
    # Checked: новый вектор или None
    # -------------------------------------------------------------------------

    checked_add = lift_checked(scalar_ops.checked_add, "checked_add", 2, "Покомпонентное checked-сложение.")
    checked_sub = lift_checked(scalar_ops.checked_sub, "checked_sub", 2, "Покомпонентное checked-вычитание.")
    checked_mul = lift_checked(scalar_ops.checked_mul, "checked_mul", 2, "Покомпонентное checked-умножение.")
    checked_div = lift_checked(scalar_ops.checked_div, "checked_div", 2, "Покомпонентное checked-деление.")
    checked_neg = lift_checked(scalar_ops.checked_neg, "checked_neg", 1, "Покомпонентное checked-отрицание.")

    # -------------------------------------------------------------------------
    # Try: новый вектор или CheckedArithmeticError
    # -------------------------------------------------------------------------

    try_add = lift_try(scalar_ops.try_add, "try_add", 2)
    try_sub = lift_try(scalar_ops.try_sub, "try_sub", 2)
    try_mul = lift_try(scalar_ops.try_mul, "try_mul", 2)
    try_div = lift_try(scalar_ops.try_div, "try_div", 2)
    try_neg = lift_try(scalar_ops.try_neg, "try_neg", 1)

    # -------------------------------------------------------------------------
    # Saturating / Wrapping: всегда успешны
    # -------------------------------------------------------------------------

    saturating_add = lift_named(scalar_ops.saturating_add, "saturating_add", 2)
    saturating_sub = lift_named(scalar_ops.saturating_sub, "saturating_sub", 2)
    saturating_mul = lift_named(scalar_ops.saturating_mul, "saturating_mul", 2)
    saturating_neg = lift_named(scalar_ops.saturating_neg, "saturating_neg", 1)

    wrapping_add = lift_named(scalar_ops.wrapping_add, "wrapping_add", 2)
    wrapping_sub = lift_named(scalar_ops.wrapping_sub, "wrapping_sub", 2)
    wrapping_mul = lift_named(scalar_ops.wrapping_mul, "wrapping_mul", 2)
    wrapping_neg = lift_named(scalar_ops.wrapping_neg, "wrapping_neg", 1)


# =============================================================================
# КОНКРЕТНЫЕ РАЗМЕРНОСТИ
# =============================================================================


@dataclass(eq=True, unsafe_hash=True)
class Vector2(VectorBase[T]):
    """2-мерный вектор."""

    x: T
    y: T

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y")


@dataclass(eq=True, unsafe_hash=True)
class Vector3(VectorBase[T]):
    """3-мерный вектор. Единственная размерность с векторным произведением."""

    x: T
    y: T
    z: T

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    def cross(self, rhs: Any) -> "Vector3[T]":
        """
        Векторное произведение (разложение определителя):

            (y1*z2 - z1*y2, z1*x2 - x1*z2, x1*y2 - y1*x2)

        Args:
            rhs: Vector3 или tuple/list длины 3

        Raises:
            TypeError: Для любого другого операнда
        """
        if not isinstance(rhs, (Vector3, tuple, list)):
            raise TypeError(f"cross product requires a Vector3, got {type(rhs).__name__!r}")
        x2, y2, z2 = require_operand(self, rhs, "cross")
        return Vector3(
            self.y * z2 - self.z * y2,
            self.z * x2 - self.x * z2,
            self.x * y2 - self.y * x2,
        )


@dataclass(eq=True, unsafe_hash=True)
class Vector4(VectorBase[T]):
    """
    4-мерный вектор.

    Иногда используется для однородных координат, но компонента w
    обрабатывается так же, как остальные.
    """

    x: T
    y: T
    z: T
    w: T

    _FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")


# =============================================================================
# SHORTHAND-КОНСТРУКТОРЫ
# =============================================================================


def vec2(x: T, y: T) -> Vector2[T]:
    return Vector2(x, y)


def vec3(x: T, y: T, z: T) -> Vector3[T]:
    return Vector3(x, y, z)


def vec4(x: T, y: T, z: T, w: T) -> Vector4[T]:
    return Vector4(x, y, z, w)
