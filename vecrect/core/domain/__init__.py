"""
Domain types and value objects.

Векторы Vector2/3/4, прямоугольники Rect2/3, поднятые операторы,
произведения, ошибки и wire-сериализация.
"""

from vecrect.core.domain.errors import CheckedArithmeticError, ConversionError, VecRectError
from vecrect.core.domain.products import cross, dot
from vecrect.core.domain.rect import Rect2, Rect3, RectBase
from vecrect.core.domain.serialization import (
    Rect2Model,
    Rect3Model,
    Vector2Model,
    Vector3Model,
    Vector4Model,
    dump,
    dump_json,
    from_model,
    load,
    load_json,
    to_model,
)
from vecrect.core.domain.vector import (
    Vector2,
    Vector3,
    Vector4,
    VectorBase,
    vec2,
    vec3,
    vec4,
)

__all__ = [
    # Errors
    "VecRectError",
    "ConversionError",
    "CheckedArithmeticError",
    # Vectors
    "VectorBase",
    "Vector2",
    "Vector3",
    "Vector4",
    "vec2",
    "vec3",
    "vec4",
    # Rects
    "RectBase",
    "Rect2",
    "Rect3",
    # Products
    "dot",
    "cross",
    # Serialization
    "Vector2Model",
    "Vector3Model",
    "Vector4Model",
    "Rect2Model",
    "Rect3Model",
    "to_model",
    "from_model",
    "dump",
    "dump_json",
    "load",
    "load_json",
]
