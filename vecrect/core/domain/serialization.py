"""
Serialization — pydantic-модели wire-представления векторов и прямоугольников

Модели повторяют раскладку полей:
- Vector2Model / Vector3Model / Vector4Model: {"x": ..., "y": ...[, "z"][, "w"]}
- Rect2Model / Rect3Model: {"point0": {...}, "point1": {...}}

Модели generic по скалярному типу (Vector2Model[int], Rect2Model[float]);
без параметра скаляр не проверяется. Immutable (frozen=True), лишние ключи
запрещены (extra="forbid").

Целые фиксированной разрядности (I8..U64) проверяются как int, затем
сужаются через try_convert: выход за диапазон → ConversionError.
"""

import json
from typing import Any, Final, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field

from vecrect.core.contracts.validators import validate_contract
from vecrect.core.domain.rect import Rect2, Rect3, RectBase
from vecrect.core.domain.vector import Vector2, Vector3, Vector4, VectorBase
from vecrect.core.math.fixed_int import FixedInt

T = TypeVar("T")

Geometry = Union[VectorBase, RectBase]


# =============================================================================
# VECTOR MODELS
# =============================================================================


class Vector2Model(BaseModel, Generic[T]):
    """Wire-модель Vector2."""

    x: T = Field(..., description="Компонента x")
    y: T = Field(..., description="Компонента y")

    model_config = {"frozen": True, "extra": "forbid"}


class Vector3Model(BaseModel, Generic[T]):
    """Wire-модель Vector3."""

    x: T = Field(..., description="Компонента x")
    y: T = Field(..., description="Компонента y")
    z: T = Field(..., description="Компонента z")

    model_config = {"frozen": True, "extra": "forbid"}


class Vector4Model(BaseModel, Generic[T]):
    """Wire-модель Vector4."""

    x: T = Field(..., description="Компонента x")
    y: T = Field(..., description="Компонента y")
    z: T = Field(..., description="Компонента z")
    w: T = Field(..., description="Компонента w")

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# RECT MODELS
# =============================================================================


class Rect2Model(BaseModel, Generic[T]):
    """
    Wire-модель Rect2.

    Порядок углов не проверяется: point1 >= point0 не является инвариантом.
    """

    point0: Vector2Model[T] = Field(..., description="Первый угол")
    point1: Vector2Model[T] = Field(..., description="Противоположный угол")

    model_config = {"frozen": True, "extra": "forbid"}


class Rect3Model(BaseModel, Generic[T]):
    """Wire-модель Rect3."""

    point0: Vector3Model[T] = Field(..., description="Первый угол")
    point1: Vector3Model[T] = Field(..., description="Противоположный угол")

    model_config = {"frozen": True, "extra": "forbid"}


# Соответствие доменного класса, модели и имени JSON Schema контракта
MODELS: Final[dict[type, type[BaseModel]]] = {
    Vector2: Vector2Model,
    Vector3: Vector3Model,
    Vector4: Vector4Model,
    Rect2: Rect2Model,
    Rect3: Rect3Model,
}

SCHEMA_NAMES: Final[dict[type, str]] = {
    Vector2: "vector2",
    Vector3: "vector3",
    Vector4: "vector4",
    Rect2: "rect2",
    Rect3: "rect3",
}


# =============================================================================
# ДОМЕН ↔ МОДЕЛЬ
# =============================================================================


def _model_class(cls: type) -> type[BaseModel]:
    try:
        return MODELS[cls]
    except KeyError:
        raise TypeError(f"no wire model for {cls.__name__!r}") from None


def _vector_fields(vector: VectorBase) -> dict[str, Any]:
    return dict(zip(vector._FIELDS, vector.to_tuple()))


def to_model(value: Geometry) -> BaseModel:
    """
    Вектор или прямоугольник → pydantic-модель (без параметра скаляра).

    Raises:
        TypeError: Для неподдерживаемого типа
    """
    model_cls = _model_class(type(value))
    if isinstance(value, RectBase):
        return model_cls.model_validate(
            {
                "point0": _vector_fields(value.point0),
                "point1": _vector_fields(value.point1),
            }
        )
    return model_cls(**_vector_fields(value))


def _vector_from_model(cls: type, model: BaseModel) -> VectorBase:
    return cls.from_tuple(tuple(getattr(model, field) for field in cls._FIELDS))


def from_model(model: BaseModel) -> Geometry:
    """
    Pydantic-модель → вектор или прямоугольник.

    Raises:
        TypeError: Если модель не из этого модуля
    """
    for cls, model_cls in MODELS.items():
        if isinstance(model, model_cls):
            if issubclass(cls, RectBase):
                return cls(
                    _vector_from_model(cls._VECTOR, model.point0),
                    _vector_from_model(cls._VECTOR, model.point1),
                )
            return _vector_from_model(cls, model)
    raise TypeError(f"unsupported model type {type(model).__name__!r}")


# =============================================================================
# DUMP / LOAD
# =============================================================================


def dump(value: Geometry) -> dict[str, Any]:
    """Вектор или прямоугольник → dict (скаляры как есть)."""
    return to_model(value).model_dump()


def dump_json(value: Geometry) -> str:
    """
    Вектор или прямоугольник → JSON строка.

    Examples:
        >>> dump_json(Vector2(1, 2))
        '{"x":1,"y":2}'
    """
    return to_model(value).model_dump_json()


def _parametrized(cls: type, scalar_type: Optional[type]) -> type[BaseModel]:
    model_cls = _model_class(cls)
    if scalar_type is None:
        return model_cls
    if issubclass(scalar_type, FixedInt):
        return model_cls[int]
    return model_cls[scalar_type]


def _narrow(value: Geometry, scalar_type: Optional[type]) -> Geometry:
    if scalar_type is not None and issubclass(scalar_type, FixedInt):
        return value.try_convert(scalar_type)
    return value


def load(cls: type, data: dict[str, Any], scalar_type: Optional[type] = None) -> Geometry:
    """
    dict → вектор или прямоугольник класса cls.

    Args:
        cls: Vector2/3/4 или Rect2/3
        data: Wire-документ
        scalar_type: Скалярный тип полей (None → без проверки)

    Raises:
        pydantic.ValidationError: Документ не соответствует модели
        ConversionError: Значение вне диапазона целого фиксированной разрядности
    """
    model = _parametrized(cls, scalar_type).model_validate(data)
    return _narrow(from_model(model), scalar_type)


def load_json(cls: type, text: Union[str, bytes], scalar_type: Optional[type] = None) -> Geometry:
    """
    JSON строка → вектор или прямоугольник класса cls.

    Документ сначала проверяется JSON Schema контрактом (jsonschema),
    затем декодируется моделью (pydantic).

    Raises:
        jsonschema.ValidationError: Документ нарушает контракт
        pydantic.ValidationError: Документ не соответствует модели
        ConversionError: Значение вне диапазона целого фиксированной разрядности
    """
    _model_class(cls)
    data = json.loads(text)
    validate_contract(SCHEMA_NAMES[cls], data)
    return load(cls, data, scalar_type)
