"""
Lifting — поднятие скалярных операторов до векторов и прямоугольников

Каждый оператор реализован ОДИН раз на скалярном уровне (operator.*,
vecrect.core.math.scalar_ops) и поднимается фабриками этого модуля:

    скаляр → вектор (покомпонентно, порядок x, y, z, w)
    вектор → прямоугольник (к point0 и point1 независимо, тот же операнд)

Формы правого операнда для каждого бинарного оператора:
- broadcast: скаляр применяется к каждому полю (v * 2)
- field-wise: вектор того же класса или tuple/list длины N (v * (2, 3))

Векторы другой размерности и прямоугольники операндами не являются:
dunder-операторы возвращают NotImplemented (→ TypeError), именованные
методы бросают TypeError.

Модель владения: в Python четыре формы (owned/borrowed × owned/borrowed)
сводятся к одной — бинарный оператор никогда не мутирует операнды и всегда
возвращает новый экземпляр. Мутируют только in-place операторы (+=, ...),
и только получателя.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. checked_* → None на первом неудачном поле, частичный результат не строится
2. try_* → CheckedArithmeticError первого неудачного поля
3. In-place операторы вычисляют все поля до присваивания
   (при исключении получатель не изменяется)
"""

import logging
from typing import Any, Callable, Optional, Sequence

from vecrect.core.domain.errors import CheckedArithmeticError

logger = logging.getLogger(__name__)

ScalarFn = Callable[..., Any]


class Lifted:
    """Маркер геометрических значений: они никогда не broadcast-скаляры."""

    __slots__ = ()

    # numpy-скаляр слева уступает отражённому оператору (np.float64(2) * v → v.__rmul__)
    __array_ufunc__ = None


# =============================================================================
# РАЗРЕШЕНИЕ ОПЕРАНДОВ
# =============================================================================


def resolve_operand(vector: Any, rhs: Any) -> Optional[tuple]:
    """
    Покомпонентные значения правого операнда для вектора.

    Args:
        vector: Левый операнд (VectorBase)
        rhs: Правый операнд

    Returns:
        Кортеж длины N, либо None если операнд не поддерживается
    """
    size = len(vector._FIELDS)
    if isinstance(rhs, type(vector)):
        return rhs._values()
    if isinstance(rhs, Lifted):
        return None
    if isinstance(rhs, (tuple, list)):
        if len(rhs) != size:
            return None
        return tuple(rhs)
    return (rhs,) * size


def require_operand(vector: Any, rhs: Any, name: str) -> tuple:
    operand = resolve_operand(vector, rhs)
    if operand is None:
        raise TypeError(
            f"unsupported operand type for {type(vector).__name__}.{name}: "
            f"{type(rhs).__name__!r}"
        )
    return operand


def _field_args(vector: Any, operand: Optional[Sequence]) -> list[tuple[str, tuple]]:
    values = vector._values()
    if operand is None:
        return [(field, (value,)) for field, value in zip(vector._FIELDS, values)]
    return [
        (field, (value, other))
        for field, value, other in zip(vector._FIELDS, values, operand)
    ]


def _named(method: Callable, name: str, doc: Optional[str]) -> Callable:
    method.__name__ = name
    method.__qualname__ = name
    method.__doc__ = doc
    return method


# =============================================================================
# ВЕКТОРЫ: ОБЫЧНЫЕ ОПЕРАТОРЫ
# =============================================================================


def lift_unary(fn: ScalarFn, name: str, doc: Optional[str] = None) -> Callable:
    """Унарный оператор: fn применяется к каждому полю."""

    def method(self):
        return self._from_values([fn(value) for value in self._values()])

    return _named(method, name, doc)


def lift_binary(fn: ScalarFn, name: str, doc: Optional[str] = None) -> Callable:
    """Бинарный dunder-оператор vector ⊗ operand."""

    def method(self, rhs):
        operand = resolve_operand(self, rhs)
        if operand is None:
            return NotImplemented
        return self._from_values([fn(a, b) for a, b in zip(self._values(), operand)])

    return _named(method, name, doc)


def lift_reflected(fn: ScalarFn, name: str, doc: Optional[str] = None) -> Callable:
    """Отражённый dunder-оператор operand ⊗ vector (скаляр слева)."""

    def method(self, lhs):
        operand = resolve_operand(self, lhs)
        if operand is None:
            return NotImplemented
        return self._from_values([fn(b, a) for a, b in zip(self._values(), operand)])

    return _named(method, name, doc)


def lift_inplace(fn: ScalarFn, name: str, doc: Optional[str] = None) -> Callable:
    """In-place dunder-оператор: мутирует получателя и возвращает его."""

    def method(self, rhs):
        operand = resolve_operand(self, rhs)
        if operand is None:
            return NotImplemented
        results = [fn(a, b) for a, b in zip(self._values(), operand)]
        for field, result in zip(self._FIELDS, results):
            setattr(self, field, result)
        return self

    return _named(method, name, doc)


def lift_named(fn: ScalarFn, name: str, arity: int, doc: Optional[str] = None) -> Callable:
    """
    Именованный метод без канала ошибок (saturating_*, wrapping_*).

    Args:
        fn: Скалярная функция
        name: Имя метода
        arity: 1 для унарных, 2 для бинарных
    """
    if arity == 1:

        def unary(self):
            return self._from_values([fn(value) for value in self._values()])

        return _named(unary, name, doc)

    def binary(self, rhs):
        operand = require_operand(self, rhs, name)
        return self._from_values([fn(a, b) for a, b in zip(self._values(), operand)])

    return _named(binary, name, doc)


# =============================================================================
# ВЕКТОРЫ: CHECKED / TRY
# =============================================================================


def lift_checked(fn: ScalarFn, name: str, arity: int, doc: Optional[str] = None) -> Callable:
    """
    checked_*: новый вектор или None.

    Поля вычисляются в порядке x, y, z, w; первое None прерывает вычисление.
    """

    def evaluate(self, operand):
        results = []
        for field, args in _field_args(self, operand):
            result = fn(*args)
            if result is None:
                logger.debug("%s.%s failed on field %s with %r", type(self).__name__, name, field, args)
                return None
            results.append(result)
        return self._from_values(results)

    if arity == 1:

        def unary(self):
            return evaluate(self, None)

        return _named(unary, name, doc)

    def binary(self, rhs):
        return evaluate(self, require_operand(self, rhs, name))

    return _named(binary, name, doc)


def lift_try(fn: ScalarFn, name: str, arity: int, doc: Optional[str] = None) -> Callable:
    """
    try_*: новый вектор или CheckedArithmeticError.

    Ошибка содержит первое неудачное поле и исходное скалярное исключение
    (также доступно как __cause__).
    """

    def evaluate(self, operand):
        results = []
        for field, args in _field_args(self, operand):
            try:
                results.append(fn(*args))
            except ArithmeticError as error:
                logger.debug("%s.%s failed on field %s: %s", type(self).__name__, name, field, error)
                raise CheckedArithmeticError(name, field, error) from error
        return self._from_values(results)

    if arity == 1:

        def unary(self):
            return evaluate(self, None)

        return _named(unary, name, doc)

    def binary(self, rhs):
        return evaluate(self, require_operand(self, rhs, name))

    return _named(binary, name, doc)


# =============================================================================
# ПРЯМОУГОЛЬНИКИ: ДЕЛЕГИРОВАНИЕ УГЛАМ
# =============================================================================


def rect_accepts(rect: Any, rhs: Any) -> bool:
    """True если rhs допустим как операнд для углов прямоугольника."""
    return resolve_operand(rect.point0, rhs) is not None


def _require_rect_operand(rect: Any, rhs: Any, name: str) -> None:
    if not rect_accepts(rect, rhs):
        raise TypeError(
            f"unsupported operand type for {type(rect).__name__}.{name}: "
            f"{type(rhs).__name__!r}"
        )


def corner_unary(name: str, doc: Optional[str] = None) -> Callable:
    """Унарная операция, применённая к обоим углам."""

    def method(self):
        return type(self)(getattr(self.point0, name)(), getattr(self.point1, name)())

    return _named(method, name, doc)


def corner_binary(name: str, dunder: bool, doc: Optional[str] = None) -> Callable:
    """
    Бинарная операция rect ⊗ operand: тот же операнд для point0 и point1.

    Args:
        name: Имя метода вектора, которому делегируется операция
        dunder: True → NotImplemented для неподдерживаемого операнда,
            False → TypeError
    """

    def method(self, rhs):
        if not rect_accepts(self, rhs):
            if dunder:
                return NotImplemented
            _require_rect_operand(self, rhs, name)
        return type(self)(getattr(self.point0, name)(rhs), getattr(self.point1, name)(rhs))

    return _named(method, name, doc)


def corner_inplace(name: str, vector_name: str, doc: Optional[str] = None) -> Callable:
    """
    In-place операция над прямоугольником.

    Новые углы вычисляются через обычный оператор вектора (vector_name),
    затем присваиваются; объекты старых углов не мутируются.
    """

    def method(self, rhs):
        if not rect_accepts(self, rhs):
            return NotImplemented
        point0 = getattr(self.point0, vector_name)(rhs)
        point1 = getattr(self.point1, vector_name)(rhs)
        self.point0 = point0
        self.point1 = point1
        return self

    return _named(method, name, doc)


def corner_checked(name: str, arity: int, doc: Optional[str] = None) -> Callable:
    """checked_* для прямоугольника: None если хотя бы один угол неудачен."""

    def evaluate(self, *args):
        point0 = getattr(self.point0, name)(*args)
        if point0 is None:
            return None
        point1 = getattr(self.point1, name)(*args)
        if point1 is None:
            return None
        return type(self)(point0, point1)

    if arity == 1:

        def unary(self):
            return evaluate(self)

        return _named(unary, name, doc)

    def binary(self, rhs):
        _require_rect_operand(self, rhs, name)
        return evaluate(self, rhs)

    return _named(binary, name, doc)


def corner_try(name: str, arity: int, doc: Optional[str] = None) -> Callable:
    """try_* для прямоугольника: первая ошибка (point0 раньше point1)."""

    def evaluate(self, *args):
        corners = []
        for prefix, corner in (("point0.", self.point0), ("point1.", self.point1)):
            try:
                corners.append(getattr(corner, name)(*args))
            except CheckedArithmeticError as error:
                raise error.with_prefix(prefix) from error.error
        return type(self)(*corners)

    if arity == 1:

        def unary(self):
            return evaluate(self)

        return _named(unary, name, doc)

    def binary(self, rhs):
        _require_rect_operand(self, rhs, name)
        return evaluate(self, rhs)

    return _named(binary, name, doc)
