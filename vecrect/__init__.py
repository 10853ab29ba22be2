"""
vecrect — обобщённые векторы Vector2/3/4 и выровненные по осям
прямоугольники Rect2/3 с checked / saturating / wrapping арифметикой.
"""

import logging

from vecrect.core.domain import (
    CheckedArithmeticError,
    ConversionError,
    Rect2,
    Rect3,
    VecRectError,
    Vector2,
    Vector3,
    Vector4,
    cross,
    dot,
    vec2,
    vec3,
    vec4,
)
from vecrect.core.math import I8, I16, I32, I64, U8, U16, U32, U64, FixedInt

# Библиотека не настраивает логирование: записи уходят только в обработчики приложения
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"

__all__ = [
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    "vec2",
    "vec3",
    "vec4",
    # Rects
    "Rect2",
    "Rect3",
    # Products
    "dot",
    "cross",
    # Errors
    "VecRectError",
    "ConversionError",
    "CheckedArithmeticError",
    # Fixed-width integers
    "FixedInt",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
]
