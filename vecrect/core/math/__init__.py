"""
Core math modules для vecrect

Скалярные примитивы: частичный порядок, толерантности, целые фиксированной
разрядности и скалярная семантика checked / saturating / wrapping.
"""

# Numerical Safeguards
from vecrect.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Partial order
    partial_max,
    partial_min,
    sort_pair,
    # Comparisons
    is_close,
    # Identities
    additive_identity,
    multiplicative_identity,
)

# Fixed-width integers
from vecrect.core.math.fixed_int import (
    FixedInt,
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    trunc_div,
)

# Scalar capabilities
from vecrect.core.math import scalar_ops

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: Partial order
    "partial_max",
    "partial_min",
    "sort_pair",
    # Numerical Safeguards: Comparisons
    "is_close",
    # Numerical Safeguards: Identities
    "additive_identity",
    "multiplicative_identity",
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
    "trunc_div",
    # Scalar capabilities
    "scalar_ops",
]
