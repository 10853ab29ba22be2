"""
Numerical Safeguards — частичный порядок, толерантности и нейтральные элементы

Модуль содержит скалярные примитивы, на которые опираются операции над
векторами и прямоугольниками:
- Epsilon-сравнения float с учётом машинной точности
- partial_min / partial_max / sort_pair для частично упорядоченных типов
- Нейтральные элементы (аддитивный ноль, мультипликативная единица)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. partial_max(a, b) возвращает a только если a > b, иначе b
   (несравнимые значения → второй операнд)
2. partial_min(a, b) возвращает b только если b < a, иначе a
   (несравнимые значения → первый операнд)
3. sort_pair меняет местами значения только если a > b
4. Все функции чистые и не мутируют аргументы
"""

import math
from typing import Any, Final, TypeVar

T = TypeVar("T")

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для сравнений около нуля
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение скаляров с учётом машинной точности.

    Алгоритм (math.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение (любой тип, приводимый к float)
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность отрицательная

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}")

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ЧАСТИЧНЫЙ ПОРЯДОК
# =============================================================================


def partial_max(a: T, b: T) -> T:
    """
    Максимум для частично упорядоченных значений.

    Если значения несравнимы (например, NaN), возвращается второй операнд.

    Examples:
        >>> partial_max(1, 2)
        2
        >>> partial_max(3, 2)
        3
        >>> partial_max(float("nan"), 1.0)
        1.0
    """
    if a > b:
        return a
    return b


def partial_min(a: T, b: T) -> T:
    """
    Минимум для частично упорядоченных значений.

    Если значения несравнимы (например, NaN), возвращается первый операнд.

    Examples:
        >>> partial_min(1, 2)
        1
        >>> partial_min(3, 2)
        2
        >>> partial_min(1.0, float("nan"))
        1.0
    """
    if b < a:
        return b
    return a


def sort_pair(a: T, b: T) -> tuple[T, T]:
    """
    Сортировка пары по возрастанию.

    Несравнимые значения остаются в исходном порядке.

    Examples:
        >>> sort_pair(2, 0)
        (0, 2)
        >>> sort_pair(0, 2)
        (0, 2)
    """
    if a > b:
        return (b, a)
    return (a, b)


# =============================================================================
# НЕЙТРАЛЬНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def additive_identity(value: T) -> T:
    """
    Аддитивный ноль того же скалярного типа, что и value.

    Используется конструктором прямоугольника из размера: point0 помещается
    в начало координат, построенное из типа каждой компоненты размера.

    Examples:
        >>> additive_identity(5)
        0
        >>> additive_identity(2.5)
        0.0
    """
    return type(value)()


def multiplicative_identity(scalar_type: type) -> Any:
    """
    Мультипликативная единица заданного скалярного типа.

    Examples:
        >>> multiplicative_identity(int)
        1
        >>> multiplicative_identity(float)
        1.0
    """
    return scalar_type(1)
