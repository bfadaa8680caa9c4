"""MatrixSession: жизненный цикл матриц A, B и их произведения.

Явный initialize() вместо автоматического запуска при старте хоста.
Произведение пересчитывается при любой замене A или B.

States:
- создана: входы сохранены, матриц нет
- инициализирована: A, B, product доступны
"""

import logging
from typing import Any, Dict, Optional

from src.core.contracts import matrix_to_contract, validate_matrix_product
from src.core.domain.dimensions import DimensionPair
from src.core.domain.matrix import Matrix
from src.core.math.matrix_ops import DimensionMismatch
from src.engine.config import DimensionBounds
from src.engine.matrix_engine import MatrixEngine, MatrixProductResult

logger = logging.getLogger(__name__)


class MatrixSession:
    """Сессия одного пользователя: A, B и product с пересчётом.

    Не потокобезопасна: у сессии один владелец.
    """

    def __init__(
        self,
        engine: MatrixEngine,
        dimensions: DimensionPair,
        bounds: Optional[DimensionBounds] = None,
    ):
        """
        Args:
            engine: движок для генерации и умножения
            dimensions: размерности A и B
            bounds: границы размерностей (default: engine.config.bounds)
        """
        self.engine = engine
        self.dimensions = dimensions
        self.bounds = bounds or engine.config.bounds

        self._result: Optional[MatrixProductResult] = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._result is not None

    def initialize(self) -> MatrixProductResult:
        """Проверка границ и первый запуск pipeline.

        Raises:
            ValueError: если размерности вне границ
            DimensionMismatch: если columnsA != rowsB (сессия остаётся пустой)
        """
        self.bounds.check(self.dimensions)
        self._result = self.engine.run(self.dimensions)
        logger.debug("Session initialized with %s", self.dimensions)
        return self._result

    def regenerate(self) -> MatrixProductResult:
        """Новые случайные A и B размерностей, заданных при создании сессии.

        Замены через replace_a/replace_b на эти размерности не влияют.
        """
        self._require_initialized()
        self.bounds.check(self.dimensions)
        self._result = self.engine.run(self.dimensions)
        return self._result

    def replace_a(self, matrix: Matrix) -> Matrix:
        """Замена A и пересчёт произведения.

        Returns:
            новое произведение

        Raises:
            DimensionMismatch: если matrix.columns != B.rows
        """
        current = self._require_initialized()
        return self._recompute(matrix, current.matrix_b)

    def replace_b(self, matrix: Matrix) -> Matrix:
        """Замена B и пересчёт произведения.

        Raises:
            DimensionMismatch: если A.columns != matrix.rows
        """
        current = self._require_initialized()
        return self._recompute(current.matrix_a, matrix)

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    @property
    def matrix_a(self) -> Matrix:
        return self._require_initialized().matrix_a

    @property
    def matrix_b(self) -> Matrix:
        return self._require_initialized().matrix_b

    @property
    def product(self) -> Matrix:
        return self._require_initialized().product

    @property
    def current_dimensions(self) -> DimensionPair:
        """Размерности текущих A и B (с учётом замен)."""
        current = self._require_initialized()
        return DimensionPair(
            rows_a=current.matrix_a.rows,
            columns_a=current.matrix_a.columns,
            rows_b=current.matrix_b.rows,
            columns_b=current.matrix_b.columns,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Данные для display-слоя в форме контракта matrix_product.

        Raises:
            jsonschema.ValidationError: если payload нарушает контракт
        """
        current = self._require_initialized()
        payload = {
            "matrix_a": matrix_to_contract(current.matrix_a),
            "matrix_b": matrix_to_contract(current.matrix_b),
            "product": matrix_to_contract(current.product),
        }
        validate_matrix_product(payload)
        return payload

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _require_initialized(self) -> MatrixProductResult:
        if self._result is None:
            raise RuntimeError("MatrixSession is not initialized, call initialize() first")
        return self._result

    def _recompute(self, matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
        if not self.engine.validate_dimensions(matrix_a.columns, matrix_b.rows):
            raise DimensionMismatch(matrix_a.columns, matrix_b.rows)

        product = self.engine.multiply(matrix_a, matrix_b)
        self._result = MatrixProductResult(
            matrix_a=matrix_a, matrix_b=matrix_b, product=product
        )
        logger.debug("Recomputed product %s", product.shape)
        return product
