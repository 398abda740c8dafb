"""
Contract Validation Module

Модуль для валидации JSON контрактов exactprob.
"""

from .validators import (
    PROBABILITY_SPACE_SCHEMA_VERSION,
    ContractValidator,
    ProbabilitySpaceValidator,
    SchemaLoader,
    validate_probability_space,
)

__all__ = [
    # Constants
    "PROBABILITY_SPACE_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ProbabilitySpaceValidator",
    # Functions
    "validate_probability_space",
]
