"""
Domain models and value objects.

Contains immutable domain values: Matrix, DimensionPair.
"""

from src.core.domain.dimensions import DimensionPair
from src.core.domain.matrix import Matrix

__all__ = [
    "Matrix",
    "DimensionPair",
]
