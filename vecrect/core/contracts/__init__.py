"""
Contract Validation Module

Валидация JSON контрактов векторов и прямоугольников vecrect.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_contract,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "get_validator",
    "validate_contract",
    # Constants
    "SCHEMA_DIR",
]
