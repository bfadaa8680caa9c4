"""Тесты MatrixEngine и конфигурации движка.

Покрывает:
- EngineConfig / DimensionBounds: defaults, валидация, int32 предупреждение
- Делегирование примитивов с инжектированным RNG
- Pipeline run(): форма, детерминизм, DimensionMismatch до создания матриц
"""

import logging
import random

import pytest

from src.core.domain import DimensionPair, Matrix
from src.core.math.matrix_ops import (
    DimensionMismatch,
    InvalidRange,
    ShapeMismatch,
    multiply_direct,
)
from src.engine import DimensionBounds, EngineConfig, MatrixEngine, MatrixProductResult


# =============================================================================
# CONFIG
# =============================================================================


class TestDimensionBounds:
    """Тесты DimensionBounds."""

    def test_defaults(self):
        bounds = DimensionBounds()
        assert (bounds.rows_min, bounds.rows_max) == (1, 7)
        assert (bounds.columns_min, bounds.columns_max) == (1, 5)
        assert bounds.max_shared_dimension == 5

    def test_invalid_bounds(self):
        with pytest.raises(ValueError):
            DimensionBounds(rows_min=0)

        with pytest.raises(ValueError):
            DimensionBounds(rows_min=3, rows_max=2)

        with pytest.raises(ValueError):
            DimensionBounds(columns_max=0)

    def test_check_within_bounds(self):
        DimensionBounds().check(
            DimensionPair(rows_a=7, columns_a=5, rows_b=7, columns_b=1)
        )

    def test_check_outside_bounds(self):
        bounds = DimensionBounds()

        with pytest.raises(ValueError, match="rows_a must be <= 7, got 8"):
            bounds.check(DimensionPair(rows_a=8, columns_a=2, rows_b=2, columns_b=2))

        with pytest.raises(ValueError, match="columns_b must be <= 5, got 6"):
            bounds.check(DimensionPair(rows_a=2, columns_a=2, rows_b=2, columns_b=6))

    def test_frozen(self):
        bounds = DimensionBounds()
        with pytest.raises(AttributeError):
            bounds.rows_max = 10  # type: ignore


class TestEngineConfig:
    """Тесты EngineConfig."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.range_bound == 10
        assert config.bounds == DimensionBounds()

    def test_negative_range(self):
        with pytest.raises(InvalidRange):
            EngineConfig(range_bound=-1)

    def test_int32_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.engine.config"):
            EngineConfig(range_bound=30000)
        assert "outside int32" in caplog.text

    def test_no_warning_for_small_range(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.engine.config"):
            EngineConfig(range_bound=100)
        assert caplog.text == ""


# =============================================================================
# ENGINE PRIMITIVES
# =============================================================================


class TestMatrixEnginePrimitives:
    """Тесты делегирования примитивов."""

    @pytest.fixture
    def engine(self) -> MatrixEngine:
        return MatrixEngine.seeded(42, EngineConfig(range_bound=5))

    def test_validate_dimensions(self, engine):
        assert engine.validate_dimensions(3, 3)
        assert not engine.validate_dimensions(3, 4)

    def test_random_matrix_uses_config_range(self, engine):
        m = engine.create_random_matrix(7, 5)
        assert all(-5 <= v < 5 for row in m.data for v in row)

    def test_random_matrix_explicit_range(self, engine):
        m = engine.create_random_matrix(3, 3, range_bound=0)
        assert m.is_zero()

    def test_random_matrix_negative_range(self, engine):
        with pytest.raises(InvalidRange):
            engine.create_random_matrix(2, 2, range_bound=-2)

    def test_seeded_engines_agree(self):
        a = MatrixEngine.seeded(7).create_random_matrix(4, 4)
        b = MatrixEngine.seeded(7).create_random_matrix(4, 4)
        assert a == b

    def test_injected_rng(self):
        rng = random.Random(99)
        expected = [rng.randrange(-10, 10) for _ in range(6)]

        engine = MatrixEngine(rng=random.Random(99))
        m = engine.create_random_matrix(2, 3)
        assert [v for row in m.data for v in row] == expected

    def test_empty_matrix(self, engine):
        assert engine.create_empty_matrix(2, 3).to_lists() == [[0, 0, 0], [0, 0, 0]]

    def test_multiply(self, engine):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert engine.multiply(a, b).to_lists() == [[19, 22], [43, 50]]

    def test_add(self, engine):
        a = Matrix.from_rows([[1, 2]])
        assert engine.add(a, a).to_lists() == [[2, 4]]

        with pytest.raises(ShapeMismatch):
            engine.add(a, Matrix.from_rows([[1], [2]]))


# =============================================================================
# PIPELINE
# =============================================================================


class TestMatrixEngineRun:
    """Тесты pipeline run()."""

    def test_run_shapes(self):
        engine = MatrixEngine.seeded(1)
        dims = DimensionPair(rows_a=3, columns_a=2, rows_b=2, columns_b=4)
        result = engine.run(dims)

        assert isinstance(result, MatrixProductResult)
        assert result.matrix_a.shape == dims.shape_a == (3, 2)
        assert result.matrix_b.shape == dims.shape_b == (2, 4)
        assert result.product.shape == dims.product_shape == (3, 4)

    def test_run_product_correct(self):
        engine = MatrixEngine.seeded(2, EngineConfig(range_bound=50))
        result = engine.run(DimensionPair(rows_a=7, columns_a=5, rows_b=5, columns_b=5))
        assert result.product == multiply_direct(result.matrix_a, result.matrix_b)

    def test_run_deterministic(self):
        dims = DimensionPair(rows_a=2, columns_a=3, rows_b=3, columns_b=2)
        first = MatrixEngine.seeded(11).run(dims)
        second = MatrixEngine.seeded(11).run(dims)
        assert first == second

    def test_run_mismatch_creates_nothing(self, caplog):
        """DimensionMismatch до любой генерации: RNG не вызывается."""

        class TrackingSource:
            calls = 0

            def randrange(self, start, stop):
                TrackingSource.calls += 1
                return 0

        engine = MatrixEngine(rng=TrackingSource())
        dims = DimensionPair(rows_a=2, columns_a=3, rows_b=4, columns_b=2)

        with caplog.at_level(logging.WARNING, logger="src.engine.matrix_engine"):
            with pytest.raises(DimensionMismatch) as exc_info:
                engine.run(dims)

        assert TrackingSource.calls == 0
        assert exc_info.value.columns_a == 3
        assert exc_info.value.rows_b == 4
        assert "does not match the row count" in caplog.text

    def test_run_ignores_config_bounds(self):
        """Границы размерностей применяет сессия, а не движок."""
        engine = MatrixEngine.seeded(3, EngineConfig(range_bound=2))
        result = engine.run(DimensionPair(rows_a=9, columns_a=8, rows_b=8, columns_b=9))
        assert result.product.shape == (9, 9)

    def test_run_int32_warning(self, caplog):
        engine = MatrixEngine.seeded(4, EngineConfig(range_bound=50000))
        with caplog.at_level(logging.WARNING, logger="src.engine.matrix_engine"):
            engine.run(DimensionPair(rows_a=1, columns_a=1, rows_b=1, columns_b=1))
        assert "may exceed int32" in caplog.text
