"""
FixedInt — целые фиксированной разрядности

Скалярные типы I8..I64 / U8..U64 с семантикой машинных целых:
- Конструктор вне диапазона → OverflowError (fallible narrowing)
- Обычная арифметика при переполнении → OverflowError
- / — целочисленное деление с усечением к нулю
- // и % — деление с округлением вниз и остаток (семантика Python), с проверкой диапазона
- ** — OverflowError при выходе из диапазона, ValueError при отрицательной степени
- <<, >> — сдвиг на [0, BITS), вытолкнутые биты отбрасываются; иначе OverflowError
- &, |, ^, ~ — побитовые операции в пределах разрядности
- int(), round(), math.trunc() возвращают обычный int
- checked_* → None при ошибке, try_* → исключение при ошибке
- saturating_* → прижатие к [MIN, MAX], wrapping_* → по модулю 2**BITS

Это скалярный уровень: векторные и прямоугольные варианты поднимаются
из этих методов покомпонентно (см. vecrect.core.domain.lifting).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой экземпляр FixedInt лежит в [MIN, MAX]
2. saturating_* и wrapping_* никогда не бросают исключений
   (кроме TypeError для нецелого операнда)
3. Для значений в диапазоне saturating_* и wrapping_* совпадают
   с обычной арифметикой
"""

import numbers
import operator
from typing import Callable, ClassVar, Optional, TypeVar

F = TypeVar("F", bound="FixedInt")


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _as_int(value: object) -> Optional[int]:
    """Целое значение операнда или None для нецелых типов."""
    if isinstance(value, numbers.Integral):
        return int(value)
    return None


def _require_int(value: object, operation: str) -> int:
    number = _as_int(value)
    if number is None:
        raise TypeError(
            f"unsupported operand type for {operation}: {type(value).__name__!r}"
        )
    return number


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3

    Raises:
        ZeroDivisionError: Если b == 0
    """
    quotient = abs(a) // abs(b)
    if (a < 0) == (b < 0):
        return quotient
    return -quotient


def _power(base: int, exponent: int, modulo: object, cls: type) -> int:
    """
    base ** exponent (или pow(base, exponent, modulo)) в неограниченных int.

    Raises:
        ValueError: Если exponent < 0
        OverflowError: Если |base| >= 2 и exponent > BITS (результат заведомо вне диапазона)
    """
    if exponent < 0:
        raise ValueError(f"negative exponent {exponent} for {cls.__name__}")
    if modulo is not None:
        return pow(base, exponent, _require_int(modulo, "raise to a power"))
    if abs(base) > 1 and exponent > cls.BITS:
        raise OverflowError(f"attempt to raise to a power with overflow ({cls.__name__})")
    return base**exponent


_RawOp = Callable[[int, int], int]


# =============================================================================
# FIXED INT
# =============================================================================


class FixedInt(int):
    """
    Базовый класс целого фиксированной разрядности.

    Подклассы задают BITS и SIGNED; MIN и MAX вычисляются автоматически.
    Экземпляры — обычные int (сравнение, хеш, индексация), но арифметика
    возвращает тот же тип и проверяет диапазон.
    """

    BITS: ClassVar[int] = 0
    SIGNED: ClassVar[bool] = True
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.BITS <= 0:
            raise TypeError(f"{cls.__name__}.BITS must be positive, got {cls.BITS}")
        if cls.SIGNED:
            cls.MIN = -(1 << (cls.BITS - 1))
            cls.MAX = (1 << (cls.BITS - 1)) - 1
        else:
            cls.MIN = 0
            cls.MAX = (1 << cls.BITS) - 1

    def __new__(cls: type[F], value: object = 0) -> F:
        if cls.BITS <= 0:
            raise TypeError("FixedInt is abstract, use a concrete width such as I32 or U8")
        number = operator.index(value)
        if not cls.MIN <= number <= cls.MAX:
            raise OverflowError(
                f"{number} out of range for {cls.__name__} [{cls.MIN}, {cls.MAX}]"
            )
        return super().__new__(cls, number)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def wrap(cls: type[F], value: object) -> F:
        """Значение по модулю 2**BITS (дополнительный код для знаковых)."""
        number = operator.index(value)
        span = 1 << cls.BITS
        return cls((number - cls.MIN) % span + cls.MIN)

    @classmethod
    def saturate(cls: type[F], value: object) -> F:
        """Значение, прижатое к диапазону [MIN, MAX]."""
        number = operator.index(value)
        return cls(min(max(number, cls.MIN), cls.MAX))

    @classmethod
    def in_range(cls, value: int) -> bool:
        return cls.MIN <= value <= cls.MAX

    # -------------------------------------------------------------------------
    # Ядро: вычисление в неограниченных int + политика переполнения
    # -------------------------------------------------------------------------

    def _fit(self: F, raw: int, operation: str) -> F:
        cls = type(self)
        if not cls.in_range(raw):
            raise OverflowError(f"attempt to {operation} with overflow ({cls.__name__})")
        return cls(raw)

    def _binary(self: F, rhs: object, op: _RawOp, operation: str) -> F:
        return self._fit(op(int(self), _require_int(rhs, operation)), operation)

    def _checked(self: F, rhs: object, op: _RawOp, operation: str) -> Optional[F]:
        try:
            raw = op(int(self), _require_int(rhs, operation))
        except ZeroDivisionError:
            return None
        if not type(self).in_range(raw):
            return None
        return type(self)(raw)

    def _saturating(self: F, rhs: object, op: _RawOp, operation: str) -> F:
        return type(self).saturate(op(int(self), _require_int(rhs, operation)))

    def _wrapping(self: F, rhs: object, op: _RawOp, operation: str) -> F:
        return type(self).wrap(op(int(self), _require_int(rhs, operation)))

    def _reflected(self: F, lhs: object, op: _RawOp, operation: str) -> F:
        return self._fit(op(_require_int(lhs, operation), int(self)), operation)

    def _shift(self: F, amount: object, op: _RawOp, operation: str) -> F:
        # Сдвинутые за разрядность биты отбрасываются; переполнение — только сдвиг >= BITS
        count = _require_int(amount, operation)
        cls = type(self)
        if not 0 <= count < cls.BITS:
            raise OverflowError(f"attempt to {operation} with overflow ({cls.__name__})")
        return cls.wrap(op(int(self), count))

    # -------------------------------------------------------------------------
    # Обычные операторы
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.add, "add")

    def __radd__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._reflected(other, operator.add, "add")

    def __sub__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.sub, "subtract")

    def __rsub__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._reflected(other, operator.sub, "subtract")

    def __mul__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.mul, "multiply")

    def __rmul__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._reflected(other, operator.mul, "multiply")

    def __truediv__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, trunc_div, "divide")

    def __rtruediv__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._reflected(other, trunc_div, "divide")

    def __floordiv__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.floordiv, "divide")

    def __rfloordiv__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._reflected(other, operator.floordiv, "divide")

    def __mod__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.mod, "calculate the remainder")

    def __rmod__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._reflected(other, operator.mod, "calculate the remainder")

    def __divmod__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return (self // other, self % other)

    def __rdivmod__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return (other // self, other % self)

    def __pow__(self, other, modulo=None):
        if _as_int(other) is None:
            return NotImplemented
        return self._fit(_power(int(self), int(other), modulo, type(self)), "raise to a power")

    def __rpow__(self, other, modulo=None):
        if _as_int(other) is None:
            return NotImplemented
        return self._fit(_power(int(other), int(self), modulo, type(self)), "raise to a power")

    def __lshift__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._shift(other, operator.lshift, "shift left")

    def __rshift__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._shift(other, operator.rshift, "shift right")

    def __rlshift__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return type(self)(other)._shift(self, operator.lshift, "shift left")

    def __rrshift__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return type(self)(other)._shift(self, operator.rshift, "shift right")

    def __and__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.and_, "bitwise and")

    __rand__ = __and__

    def __or__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.or_, "bitwise or")

    __ror__ = __or__

    def __xor__(self, other):
        if _as_int(other) is None:
            return NotImplemented
        return self._binary(other, operator.xor, "bitwise xor")

    __rxor__ = __xor__

    def __invert__(self):
        cls = type(self)
        if cls.SIGNED:
            return cls(~int(self))
        return cls(cls.MAX - int(self))

    def __neg__(self):
        return self._fit(-int(self), "negate")

    def __pos__(self):
        return self

    def __abs__(self):
        return self._fit(abs(int(self)), "take absolute value")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__

    # -------------------------------------------------------------------------
    # Checked: None при переполнении или делении на ноль
    # -------------------------------------------------------------------------

    def checked_add(self: F, rhs: object) -> Optional[F]:
        return self._checked(rhs, operator.add, "add")

    def checked_sub(self: F, rhs: object) -> Optional[F]:
        return self._checked(rhs, operator.sub, "subtract")

    def checked_mul(self: F, rhs: object) -> Optional[F]:
        return self._checked(rhs, operator.mul, "multiply")

    def checked_div(self: F, rhs: object) -> Optional[F]:
        return self._checked(rhs, trunc_div, "divide")

    def checked_neg(self: F) -> Optional[F]:
        raw = -int(self)
        if not type(self).in_range(raw):
            return None
        return type(self)(raw)

    # -------------------------------------------------------------------------
    # Try: исключение при переполнении или делении на ноль
    # -------------------------------------------------------------------------

    def try_add(self: F, rhs: object) -> F:
        """
        Сложение с ошибкой вместо результата при переполнении.

        Raises:
            OverflowError: Если результат вне [MIN, MAX]
        """
        return self._binary(rhs, operator.add, "add")

    def try_sub(self: F, rhs: object) -> F:
        return self._binary(rhs, operator.sub, "subtract")

    def try_mul(self: F, rhs: object) -> F:
        return self._binary(rhs, operator.mul, "multiply")

    def try_div(self: F, rhs: object) -> F:
        """
        Деление с усечением к нулю.

        Raises:
            ZeroDivisionError: Если rhs == 0
            OverflowError: Если MIN / -1 для знаковых типов
        """
        return self._binary(rhs, trunc_div, "divide")

    def try_neg(self: F) -> F:
        return self._fit(-int(self), "negate")

    # -------------------------------------------------------------------------
    # Saturating / Wrapping
    # -------------------------------------------------------------------------

    def saturating_add(self: F, rhs: object) -> F:
        return self._saturating(rhs, operator.add, "add")

    def saturating_sub(self: F, rhs: object) -> F:
        return self._saturating(rhs, operator.sub, "subtract")

    def saturating_mul(self: F, rhs: object) -> F:
        return self._saturating(rhs, operator.mul, "multiply")

    def saturating_neg(self: F) -> F:
        return type(self).saturate(-int(self))

    def wrapping_add(self: F, rhs: object) -> F:
        return self._wrapping(rhs, operator.add, "add")

    def wrapping_sub(self: F, rhs: object) -> F:
        return self._wrapping(rhs, operator.sub, "subtract")

    def wrapping_mul(self: F, rhs: object) -> F:
        return self._wrapping(rhs, operator.mul, "multiply")

    def wrapping_neg(self: F) -> F:
        return type(self).wrap(-int(self))


# =============================================================================
# КОНКРЕТНЫЕ ТИПЫ
# =============================================================================


class I8(FixedInt):
    BITS = 8
    SIGNED = True


class I16(FixedInt):
    BITS = 16
    SIGNED = True


class I32(FixedInt):
    BITS = 32
    SIGNED = True


class I64(FixedInt):
    BITS = 64
    SIGNED = True


class U8(FixedInt):
    BITS = 8
    SIGNED = False


class U16(FixedInt):
    BITS = 16
    SIGNED = False


class U32(FixedInt):
    BITS = 32
    SIGNED = False


class U64(FixedInt):
    BITS = 64
    SIGNED = False
