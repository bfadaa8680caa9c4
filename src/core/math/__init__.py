"""
Core math modules

Целочисленные матричные примитивы и проверки параметров.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    # Constants
    INT32_MAX,
    INT32_MIN,
    # Checks
    fits_int32,
    is_strict_int,
    max_entry_magnitude,
    max_product_magnitude,
    product_fits_int32,
    # Validation
    validate_int_in_range,
    validate_non_negative_int,
    validate_positive_int,
)

# Matrix Ops
from src.core.math.matrix_ops import (
    DimensionMismatch,
    InvalidRange,
    MatrixEngineError,
    RandomSource,
    ShapeMismatch,
    add,
    create_empty_matrix,
    create_random_matrix,
    multiply,
    multiply_direct,
    outer_layer,
    reduce_layers,
    validate_dimensions,
    validate_range_bound,
)

__all__ = [
    # Integer Safeguards: Constants
    "INT32_MAX",
    "INT32_MIN",
    # Integer Safeguards: Checks
    "fits_int32",
    "is_strict_int",
    "max_entry_magnitude",
    "max_product_magnitude",
    "product_fits_int32",
    # Integer Safeguards: Validation
    "validate_int_in_range",
    "validate_non_negative_int",
    "validate_positive_int",
    # Matrix Ops: Exceptions
    "MatrixEngineError",
    "DimensionMismatch",
    "ShapeMismatch",
    "InvalidRange",
    # Matrix Ops: Types
    "RandomSource",
    # Matrix Ops: Functions
    "add",
    "create_empty_matrix",
    "create_random_matrix",
    "multiply",
    "multiply_direct",
    "outer_layer",
    "reduce_layers",
    "validate_dimensions",
    "validate_range_bound",
]
