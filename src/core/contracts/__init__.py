"""
Contract Validation Module

Модуль для валидации JSON контрактов, которые движок отдаёт display-слою.
"""

from .validators import (
    ContractValidator,
    MatrixProductValidator,
    MatrixValidator,
    SchemaLoader,
    matrix_to_contract,
    validate_matrix,
    validate_matrix_product,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixValidator",
    "MatrixProductValidator",
    # Functions
    "matrix_to_contract",
    "validate_matrix",
    "validate_matrix_product",
]
