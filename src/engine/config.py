"""Конфигурация матричного движка.

- DimensionBounds: допустимые размерности (проверяет вызывающая сторона)
- EngineConfig: range bound + границы размерностей
"""

import logging
from dataclasses import dataclass, field

from src.core.domain.dimensions import DimensionPair
from src.core.math.integer_safeguards import (
    product_fits_int32,
    validate_int_in_range,
    validate_positive_int,
)
from src.core.math.matrix_ops import validate_range_bound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensionBounds:
    """Границы размерностей матриц (включительно).

    Значения по умолчанию: строки 1..7, столбцы 1..5.
    Сами примитивы принимают любые положительные размерности, границы
    применяет только сессия.
    """

    rows_min: int = 1
    rows_max: int = 7
    columns_min: int = 1
    columns_max: int = 5

    def __post_init__(self) -> None:
        validate_positive_int(self.rows_min, "rows_min")
        validate_positive_int(self.columns_min, "columns_min")
        validate_int_in_range(self.rows_max, "rows_max", min_value=self.rows_min)
        validate_int_in_range(self.columns_max, "columns_max", min_value=self.columns_min)

    @property
    def max_shared_dimension(self) -> int:
        """Максимальная общая размерность columnsA == rowsB."""
        return min(self.rows_max, self.columns_max)

    def check(self, dimensions: DimensionPair) -> None:
        """Проверка размерностей против границ.

        Raises:
            ValueError: если хотя бы одна размерность вне границ
        """
        for name, value in (("rows_a", dimensions.rows_a), ("rows_b", dimensions.rows_b)):
            validate_int_in_range(value, name, self.rows_min, self.rows_max)
        for name, value in (
            ("columns_a", dimensions.columns_a),
            ("columns_b", dimensions.columns_b),
        ):
            validate_int_in_range(value, name, self.columns_min, self.columns_max)


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация MatrixEngine.

    Attributes:
        range_bound: элементы случайных матриц лежат в [-range_bound, range_bound)
        bounds: границы размерностей для сессий
    """

    range_bound: int = 10
    bounds: DimensionBounds = field(default_factory=DimensionBounds)

    def __post_init__(self) -> None:
        validate_range_bound(self.range_bound)

        if not product_fits_int32(self.bounds.max_shared_dimension, self.range_bound):
            logger.warning(
                "range_bound=%d with shared dimension up to %d can produce "
                "products outside int32",
                self.range_bound,
                self.bounds.max_shared_dimension,
            )
