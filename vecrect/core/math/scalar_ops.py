"""
Scalar Ops — скалярные возможности checked / try / saturating / wrapping

Единая точка разрешения скалярной семантики для поднятых операторов.

Правила разрешения (для операции name и левого операнда a):
1. Если тип a определяет метод name (например, FixedInt.checked_add) —
   используется он.
2. Если все операнды — точные неограниченные рациональные числа
   (int, Fraction, любой numbers.Rational кроме numpy-целых фиксированной
   разрядности np.int8..np.uint64): переполнения не бывает,
   saturating/wrapping совпадают с обычным оператором, checked/try
   завершаются ошибкой только при делении на ноль.
3. Иначе (float, np.int8, ...) операция не поддерживается: TypeError.

Контракт результата:
- checked_* → значение или None
- try_*     → значение или ArithmeticError (OverflowError, ZeroDivisionError, ...)
- saturating_*, wrapping_* → значение, без канала ошибок
"""

import numbers
import operator
from typing import Any, Callable, Final, Optional

import numpy as np

# Имена поддерживаемых операций (для документации и тестов)
CHECKED_OPERATIONS: Final[tuple[str, ...]] = ("add", "sub", "mul", "div", "neg")
SATURATING_OPERATIONS: Final[tuple[str, ...]] = ("add", "sub", "mul", "neg")
WRAPPING_OPERATIONS: Final[tuple[str, ...]] = ("add", "sub", "mul", "neg")


# =============================================================================
# РАЗРЕШЕНИЕ ВОЗМОЖНОСТЕЙ
# =============================================================================


def is_exact_unbounded(*values: Any) -> bool:
    """
    True если все значения — точные рациональные без ограничения разрядности.

    numpy-целые зарегистрированы как numbers.Integral, но переполняются
    по модулю, поэтому неограниченными не считаются.

    Examples:
        >>> is_exact_unbounded(1, 2)
        True
        >>> is_exact_unbounded(1, 2.0)
        False
        >>> is_exact_unbounded(np.int8(1))
        False
    """
    return all(
        isinstance(value, numbers.Rational) and not isinstance(value, np.integer)
        for value in values
    )


def _resolve(name: str, fallback: Callable[..., Any], a: Any, *args: Any) -> Any:
    method = getattr(type(a), name, None)
    if method is not None:
        return method(a, *args)
    if is_exact_unbounded(a, *args):
        return fallback(a, *args)
    raise TypeError(f"scalar type {type(a).__name__!r} does not support {name}")


def _checked(op: Callable[..., Any]) -> Callable[..., Any]:
    def fallback(*args: Any) -> Any:
        try:
            return op(*args)
        except ZeroDivisionError:
            return None

    return fallback


# =============================================================================
# CHECKED → Optional
# =============================================================================


def checked_add(a: Any, b: Any) -> Optional[Any]:
    return _resolve("checked_add", _checked(operator.add), a, b)


def checked_sub(a: Any, b: Any) -> Optional[Any]:
    return _resolve("checked_sub", _checked(operator.sub), a, b)


def checked_mul(a: Any, b: Any) -> Optional[Any]:
    return _resolve("checked_mul", _checked(operator.mul), a, b)


def checked_div(a: Any, b: Any) -> Optional[Any]:
    """
    Деление с None вместо ошибки.

    Для точных рациональных — обычный оператор / (int / int даёт float),
    None только при делении на ноль.

    Examples:
        >>> checked_div(6, 3)
        2.0
        >>> checked_div(1, 0) is None
        True
    """
    return _resolve("checked_div", _checked(operator.truediv), a, b)


def checked_neg(a: Any) -> Optional[Any]:
    return _resolve("checked_neg", _checked(operator.neg), a)


# =============================================================================
# TRY → значение или ArithmeticError
# =============================================================================


def try_add(a: Any, b: Any) -> Any:
    return _resolve("try_add", operator.add, a, b)


def try_sub(a: Any, b: Any) -> Any:
    return _resolve("try_sub", operator.sub, a, b)


def try_mul(a: Any, b: Any) -> Any:
    return _resolve("try_mul", operator.mul, a, b)


def try_div(a: Any, b: Any) -> Any:
    """
    Деление с исключением при ошибке.

    Raises:
        ZeroDivisionError: Деление на ноль
        OverflowError: Переполнение (для типов фиксированной разрядности)
    """
    return _resolve("try_div", operator.truediv, a, b)


def try_neg(a: Any) -> Any:
    return _resolve("try_neg", operator.neg, a)


# =============================================================================
# SATURATING / WRAPPING
# =============================================================================


def saturating_add(a: Any, b: Any) -> Any:
    return _resolve("saturating_add", operator.add, a, b)


def saturating_sub(a: Any, b: Any) -> Any:
    return _resolve("saturating_sub", operator.sub, a, b)


def saturating_mul(a: Any, b: Any) -> Any:
    return _resolve("saturating_mul", operator.mul, a, b)


def saturating_neg(a: Any) -> Any:
    return _resolve("saturating_neg", operator.neg, a)


def wrapping_add(a: Any, b: Any) -> Any:
    return _resolve("wrapping_add", operator.add, a, b)


def wrapping_sub(a: Any, b: Any) -> Any:
    return _resolve("wrapping_sub", operator.sub, a, b)


def wrapping_mul(a: Any, b: Any) -> Any:
    return _resolve("wrapping_mul", operator.mul, a, b)


def wrapping_neg(a: Any) -> Any:
    return _resolve("wrapping_neg", operator.neg, a)
