"""
Matrix: Модель целочисленной матрицы

Immutable Pydantic модель прямоугольной row-major матрицы со знаковыми
целыми элементами. Форма (rows, columns) фиксируется при создании.

Все операции (multiply, add) создают новый экземпляр, существующие матрицы
никогда не изменяются. Display-слой читает только rows, columns и элементы
по индексу.
"""

from typing import Sequence

from pydantic import BaseModel, Field, StrictInt, model_validator


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Прямоугольная матрица знаковых целых.

    Immutable модель (frozen=True), data хранится как tuple of tuples,
    поэтому ни атрибуты, ни элементы изменить нельзя.

    Инварианты:
    - rows > 0, columns > 0
    - len(data) == rows
    - каждая строка содержит ровно columns элементов
    - элементы строго int (bool и float отвергаются)
    """

    rows: int = Field(..., gt=0, strict=True, description="Количество строк")
    columns: int = Field(..., gt=0, strict=True, description="Количество столбцов")
    data: tuple[tuple[StrictInt, ...], ...] = Field(
        ..., description="Элементы матрицы (row-major)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_shape(self) -> "Matrix":
        """Проверка соответствия data заявленной форме."""
        if len(self.data) != self.rows:
            raise ValueError(
                f"Matrix declares {self.rows} rows but data has {len(self.data)}"
            )
        for index, row in enumerate(self.data):
            if len(row) != self.columns:
                raise ValueError(
                    f"Row {index} has {len(row)} elements, expected {self.columns}"
                )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows_data: Sequence[Sequence[int]]) -> "Matrix":
        """
        Создание матрицы из вложенных последовательностей с выводом формы.

        Args:
            rows_data: Непустая последовательность непустых строк

        Returns:
            Новая матрица

        Raises:
            ValueError: Если rows_data пустая или первая строка пустая
            pydantic.ValidationError: Если строки разной длины
        """
        if len(rows_data) == 0 or len(rows_data[0]) == 0:
            raise ValueError("Matrix requires at least one row and one column")

        return cls(
            rows=len(rows_data),
            columns=len(rows_data[0]),
            data=tuple(tuple(row) for row in rows_data),
        )

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """Нулевая матрица заданной формы."""
        return cls(
            rows=rows,
            columns=columns,
            data=tuple((0,) * columns for _ in range(rows)),
        )

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """Форма матрицы (rows, columns)."""
        return (self.rows, self.columns)

    def entry(self, row: int, column: int) -> int:
        """
        Элемент по индексу.

        Отрицательные индексы не поддерживаются: display-слой адресует
        элементы только в диапазоне [0, rows) x [0, columns).

        Raises:
            IndexError: Если индекс вне матрицы
        """
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"Index ({row}, {column}) out of bounds for shape {self.shape}"
            )
        return self.data[row][column]

    def __getitem__(self, key: tuple[int, int]) -> int:
        """
        Элемент по паре индексов: m[row, column].

        Raises:
            TypeError: Если key не пара (row, column)
            IndexError: Если индекс вне матрицы
        """
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix index must be (row, column)")
        row, column = key
        return self.entry(row, column)

    def row(self, index: int) -> tuple[int, ...]:
        """Строка матрицы по индексу."""
        if not 0 <= index < self.rows:
            raise IndexError(f"Row {index} out of bounds for {self.rows} rows")
        return self.data[index]

    def column(self, index: int) -> tuple[int, ...]:
        """Столбец матрицы по индексу."""
        if not 0 <= index < self.columns:
            raise IndexError(f"Column {index} out of bounds for {self.columns} columns")
        return tuple(row[index] for row in self.data)

    def to_lists(self) -> list[list[int]]:
        """Копия элементов как list of lists (для сериализации и сравнения)."""
        return [list(row) for row in self.data]

    def is_zero(self) -> bool:
        """True если все элементы равны нулю."""
        return all(value == 0 for row in self.data for value in row)
