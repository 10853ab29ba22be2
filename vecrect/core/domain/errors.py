"""
Errors — исключения доменного уровня vecrect

Два режима ошибок:
1. ConversionError — неудачная fallible-конверсия скалярного типа
2. CheckedArithmeticError — неудачная try_* арифметика

В обоих случаях ошибка описывает ПЕРВОЕ поле (порядок x, y, z, w;
для прямоугольников point0 до point1), на котором произошёл сбой.
Частичный результат никогда не строится.
"""

from typing import Any


class VecRectError(Exception):
    """Базовое исключение vecrect."""


class ConversionError(VecRectError, ValueError):
    """
    Неудачная конверсия поля вектора или прямоугольника в другой скалярный тип.

    Attributes:
        field: Имя поля ("x", "point1.y", ...)
        value: Исходное значение поля
        target: Целевой тип / конвертер
        error: Исходное скалярное исключение
    """

    def __init__(self, field: str, value: Any, target: Any, error: BaseException):
        self.field = field
        self.value = value
        self.target = target
        self.error = error
        target_name = getattr(target, "__name__", repr(target))
        super().__init__(
            f"cannot convert field {field}={value!r} to {target_name}: {error}"
        )

    def with_prefix(self, prefix: str) -> "ConversionError":
        """Копия ошибки с префиксом имени поля (например, "point0.")."""
        return ConversionError(f"{prefix}{self.field}", self.value, self.target, self.error)


class CheckedArithmeticError(VecRectError, ArithmeticError):
    """
    Неудачная покомпонентная checked-арифметика (try_*).

    Attributes:
        operation: Имя операции ("try_add", "try_div", ...)
        field: Имя поля, на котором произошёл сбой
        error: Исходное скалярное ArithmeticError
    """

    def __init__(self, operation: str, field: str, error: BaseException):
        self.operation = operation
        self.field = field
        self.error = error
        super().__init__(f"{operation} failed on field {field}: {error}")

    def with_prefix(self, prefix: str) -> "CheckedArithmeticError":
        return CheckedArithmeticError(self.operation, f"{prefix}{self.field}", self.error)
