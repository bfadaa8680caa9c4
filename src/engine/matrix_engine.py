"""MatrixEngine: фасад матричного движка.

Держит только конфигурацию и инжектированный генератор случайных чисел.
Все операции делегируются чистым функциям src.core.math.matrix_ops.

Pipeline (run):
1. validate_dimensions(columnsA, rowsB): при несовпадении DimensionMismatch,
   ни одна матрица не создаётся
2. create_random_matrix A и B
3. multiply(A, B): послойное накопление
"""

import logging
import random
from dataclasses import dataclass

from src.core.domain.dimensions import DimensionPair
from src.core.domain.matrix import Matrix
from src.core.math import matrix_ops
from src.core.math.integer_safeguards import product_fits_int32
from src.core.math.matrix_ops import DimensionMismatch, RandomSource
from src.engine.config import EngineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatrixProductResult:
    """Результат pipeline: сомножители и их произведение."""

    matrix_a: Matrix
    matrix_b: Matrix
    product: Matrix


class MatrixEngine:
    """Матричный движок с инжектируемым источником случайности.

    Не хранит матриц между вызовами: каждая операция: чистая функция над
    immutable Matrix.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: RandomSource | None = None,
    ):
        """
        Args:
            config: конфигурация движка (default: EngineConfig())
            rng: генератор с методом randrange (default: random.Random())
        """
        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int, config: EngineConfig | None = None) -> "MatrixEngine":
        """Движок с детерминированным random.Random(seed)."""
        return cls(config=config, rng=random.Random(seed))

    # -------------------------------------------------------------------------
    # Примитивы
    # -------------------------------------------------------------------------

    def validate_dimensions(self, columns_a: int, rows_b: int) -> bool:
        return matrix_ops.validate_dimensions(columns_a, rows_b)

    def create_random_matrix(
        self,
        rows: int,
        columns: int,
        range_bound: int | None = None,
    ) -> Matrix:
        """Случайная матрица из [-range, range).

        range_bound по умолчанию берётся из конфигурации.
        """
        if range_bound is None:
            range_bound = self.config.range_bound
        return matrix_ops.create_random_matrix(rows, columns, range_bound, self.rng)

    def create_empty_matrix(self, rows: int, columns: int) -> Matrix:
        return matrix_ops.create_empty_matrix(rows, columns)

    def multiply(self, matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
        return matrix_ops.multiply(matrix_a, matrix_b)

    def add(self, matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
        return matrix_ops.add(matrix_a, matrix_b)

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def run(self, dimensions: DimensionPair) -> MatrixProductResult:
        """Полный pipeline: валидация → A, B → A × B.

        Args:
            dimensions: размерности обеих матриц

        Returns:
            MatrixProductResult с A, B и произведением

        Raises:
            DimensionMismatch: если columnsA != rowsB (до создания матриц)
        """
        if not dimensions.is_multipliable:
            logger.warning(
                "The column count of matrix A (%d) does not match the row count "
                "of matrix B (%d)",
                dimensions.columns_a,
                dimensions.rows_b,
            )
            raise DimensionMismatch(dimensions.columns_a, dimensions.rows_b)

        if not product_fits_int32(dimensions.columns_a, self.config.range_bound):
            logger.warning(
                "Product entries for shared dimension %d and range_bound=%d "
                "may exceed int32",
                dimensions.columns_a,
                self.config.range_bound,
            )

        matrix_a = self.create_random_matrix(*dimensions.shape_a)
        matrix_b = self.create_random_matrix(*dimensions.shape_b)
        logger.debug("Created matrices A%s and B%s", dimensions.shape_a, dimensions.shape_b)

        product = self.multiply(matrix_a, matrix_b)
        logger.debug("Computed product %s", dimensions.product_shape)

        return MatrixProductResult(matrix_a=matrix_a, matrix_b=matrix_b, product=product)
