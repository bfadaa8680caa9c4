"""
Matrix Ops: Layered Integer Matrix Multiplication

Модуль реализует целочисленное умножение матриц через послойное накопление
rank-one вкладов:
- Проверка совместимости размерностей (columnsA == rowsB)
- Создание нулевых и случайных матриц (инжектируемый RNG)
- Rank-one слой L_k = A[:, k] ⊗ B[k, :]
- Сложение матриц
- Умножение как сумма слоёв

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несовместимые формы → exception до любого выделения памяти
2. Входные матрицы никогда не изменяются, результат всегда новый Matrix
3. Элементы случайной матрицы лежат в [-range, range)
4. Послойное и прямое умножение дают идентичный результат

ФОРМУЛЫ:
    L_k[i][j] = A[i][k] * B[k][j]
    A × B = Σ_k L_k
    (A × B)[i][j] = Σ_k A[i][k] * B[k][j]
"""

import logging
import random
from functools import reduce
from typing import Iterable, Protocol

from src.core.domain.matrix import Matrix
from src.core.math.integer_safeguards import (
    is_strict_int,
    validate_positive_int,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixEngineError(Exception):
    """Базовое исключение матричного движка."""
    pass


class DimensionMismatch(MatrixEngineError):
    """
    Умножение несовместимых матриц: columnsA != rowsB.

    Поднимается до создания каких-либо матриц. Вызывающая сторона обязана
    прервать весь pipeline и повторить вызов с исправленными размерностями.
    """

    def __init__(self, columns_a: int, rows_b: int):
        self.columns_a = columns_a
        self.rows_b = rows_b
        super().__init__(
            f"The column count of matrix A ({columns_a}) does not match "
            f"the row count of matrix B ({rows_b})"
        )


class ShapeMismatch(MatrixEngineError):
    """
    Сложение матриц разной формы.

    Нарушение внутреннего инварианта: движок сам складывает только
    аккумуляторы одинаковой формы. Это programming error, а не ошибка ввода.
    """

    def __init__(self, left_shape: tuple[int, int], right_shape: tuple[int, int]):
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"Cannot add matrices of shape {left_shape} and {right_shape}"
        )


class InvalidRange(MatrixEngineError):
    """Отрицательный range bound: интервал [-range, range) не определён."""

    def __init__(self, range_bound: int):
        self.range_bound = range_bound
        super().__init__(f"range_bound must be non-negative, got {range_bound}")


# =============================================================================
# RANDOM SOURCE
# =============================================================================


class RandomSource(Protocol):
    """Минимальный интерфейс генератора (совместим с random.Random)."""

    def randrange(self, start: int, stop: int) -> int: ...


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_dimensions(columns_a: int, rows_b: int) -> bool:
    """
    Проверка совместимости размерностей для умножения.

    Args:
        columns_a: Количество столбцов матрицы A
        rows_b: Количество строк матрицы B

    Returns:
        True если columns_a == rows_b

    Examples:
        >>> validate_dimensions(3, 3)
        True
        >>> validate_dimensions(2, 3)
        False
    """
    return columns_a == rows_b


def validate_range_bound(range_bound: int) -> None:
    """
    Валидация range bound.

    Raises:
        TypeError: Если range_bound не int
        InvalidRange: Если range_bound < 0
    """
    if not is_strict_int(range_bound):
        raise TypeError(f"range_bound must be an int, got {type(range_bound).__name__}")

    if range_bound < 0:
        raise InvalidRange(range_bound)


def _require_multipliable(matrix_a: Matrix, matrix_b: Matrix) -> None:
    if not validate_dimensions(matrix_a.columns, matrix_b.rows):
        raise DimensionMismatch(matrix_a.columns, matrix_b.rows)


# =============================================================================
# СОЗДАНИЕ МАТРИЦ
# =============================================================================


def create_empty_matrix(rows: int, columns: int) -> Matrix:
    """
    Нулевая матрица заданной формы.

    Используется как база аккумулятора при послойном умножении.

    Raises:
        ValueError: Если rows или columns не положительные
    """
    validate_positive_int(rows, "rows")
    validate_positive_int(columns, "columns")
    return Matrix.zeros(rows, columns)


def create_random_matrix(
    rows: int,
    columns: int,
    range_bound: int,
    rng: RandomSource | None = None,
) -> Matrix:
    """
    Случайная матрица с элементами из [-range, range).

    Каждый элемент: независимое равномерное целое. При range == 0 интервал
    вырожден и все элементы равны 0.

    Args:
        rows: Количество строк (> 0)
        columns: Количество столбцов (> 0)
        range_bound: Полуширина интервала (>= 0)
        rng: Генератор с методом randrange (default: новый random.Random())

    Returns:
        Новая матрица формы (rows, columns)

    Raises:
        ValueError: Если rows или columns не положительные
        InvalidRange: Если range_bound < 0

    Examples:
        >>> m = create_random_matrix(2, 3, 5, random.Random(42))
        >>> m.shape
        (2, 3)
    """
    validate_positive_int(rows, "rows")
    validate_positive_int(columns, "columns")
    validate_range_bound(range_bound)

    if range_bound == 0:
        return Matrix.zeros(rows, columns)

    source = rng if rng is not None else random.Random()

    data = tuple(
        tuple(source.randrange(-range_bound, range_bound) for _ in range(columns))
        for _ in range(rows)
    )
    return Matrix(rows=rows, columns=columns, data=data)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """
    Поэлементная сумма двух матриц одинаковой формы.

    Args:
        matrix_a: Первое слагаемое
        matrix_b: Второе слагаемое

    Returns:
        Новая матрица той же формы

    Raises:
        ShapeMismatch: Если формы различаются
    """
    if matrix_a.shape != matrix_b.shape:
        raise ShapeMismatch(matrix_a.shape, matrix_b.shape)

    data = tuple(
        tuple(a + b for a, b in zip(row_a, row_b))
        for row_a, row_b in zip(matrix_a.data, matrix_b.data)
    )
    return Matrix(rows=matrix_a.rows, columns=matrix_a.columns, data=data)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def outer_layer(matrix_a: Matrix, matrix_b: Matrix, k: int) -> Matrix:
    """
    Rank-one вклад общего индекса k.

    L_k[i][j] = A[i][k] * B[k][j], форма (rowsA, columnsB).

    Args:
        matrix_a: Левый сомножитель
        matrix_b: Правый сомножитель
        k: Общий индекс, 0 <= k < columnsA

    Returns:
        Матрица-слой L_k

    Raises:
        DimensionMismatch: Если columnsA != rowsB
        IndexError: Если k вне [0, columnsA)
    """
    _require_multipliable(matrix_a, matrix_b)

    if not 0 <= k < matrix_a.columns:
        raise IndexError(f"Layer index {k} out of bounds for {matrix_a.columns} layers")

    column = matrix_a.column(k)
    row = matrix_b.row(k)

    data = tuple(tuple(a * b for b in row) for a in column)
    return Matrix(rows=matrix_a.rows, columns=matrix_b.columns, data=data)


def reduce_layers(layers: Iterable[Matrix], rows: int, columns: int) -> Matrix:
    """
    Свёртка слоёв сложением, начиная с нулевой матрицы.

    Сложение ассоциативно и коммутативно, поэтому порядок слоёв не влияет
    на результат: слои можно вычислять независимо и сводить одним шагом.

    Args:
        layers: Слои формы (rows, columns)
        rows: Строки результата
        columns: Столбцы результата

    Returns:
        Σ layers (нулевая матрица для пустого набора)

    Raises:
        ShapeMismatch: Если форма какого-либо слоя отличается от (rows, columns)
    """
    # add(layer, acc): новый слой слева, аккумулятор справа
    return reduce(
        lambda acc, layer: add(layer, acc),
        layers,
        create_empty_matrix(rows, columns),
    )


def multiply(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """
    Произведение A × B через послойное накопление rank-one вкладов.

    Для каждого общего индекса k строится слой L_k и прибавляется к
    аккумулятору. Результат совпадает с классическим произведением.

    Args:
        matrix_a: Левый сомножитель (rowsA × columnsA)
        matrix_b: Правый сомножитель (rowsB × columnsB)

    Returns:
        Новая матрица формы (rowsA, columnsB)

    Raises:
        DimensionMismatch: Если columnsA != rowsB (до любых вычислений)

    Examples:
        >>> a = Matrix.from_rows([[1, 2], [3, 4]])
        >>> b = Matrix.from_rows([[5, 6], [7, 8]])
        >>> multiply(a, b).to_lists()
        [[19, 22], [43, 50]]
    """
    _require_multipliable(matrix_a, matrix_b)

    layers = (outer_layer(matrix_a, matrix_b, k) for k in range(matrix_a.columns))
    product = reduce_layers(layers, matrix_a.rows, matrix_b.columns)

    logger.debug(
        "Multiplied %s x %s via %d layers",
        matrix_a.shape,
        matrix_b.shape,
        matrix_a.columns,
    )
    return product


def multiply_direct(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """
    Классическое произведение через тройную сумму.

    Эталон для сверки с multiply: те же предусловия, тот же результат.

    Raises:
        DimensionMismatch: Если columnsA != rowsB
    """
    _require_multipliable(matrix_a, matrix_b)

    columns_b = tuple(matrix_b.column(j) for j in range(matrix_b.columns))
    data = tuple(
        tuple(sum(a * b for a, b in zip(row, column)) for column in columns_b)
        for row in matrix_a.data
    )
    return Matrix(rows=matrix_a.rows, columns=matrix_b.columns, data=data)
