"""
DimensionPair: размерности двух матриц-сомножителей

Immutable Pydantic модель (rowsA, columnsA, rowsB, columnsB).

Модель принимает любые положительные int. Совместимость для умножения
(columnsA == rowsB) здесь только сообщается, а не требуется: ошибка
DimensionMismatch поднимается движком до создания матриц.
"""

from pydantic import BaseModel, Field


class DimensionPair(BaseModel):
    """Размерности матриц A и B."""

    rows_a: int = Field(..., gt=0, strict=True, description="Строки матрицы A")
    columns_a: int = Field(..., gt=0, strict=True, description="Столбцы матрицы A")
    rows_b: int = Field(..., gt=0, strict=True, description="Строки матрицы B")
    columns_b: int = Field(..., gt=0, strict=True, description="Столбцы матрицы B")

    model_config = {"frozen": True}

    @property
    def shape_a(self) -> tuple[int, int]:
        return (self.rows_a, self.columns_a)

    @property
    def shape_b(self) -> tuple[int, int]:
        return (self.rows_b, self.columns_b)

    @property
    def is_multipliable(self) -> bool:
        """True если columnsA == rowsB."""
        return self.columns_a == self.rows_b

    @property
    def product_shape(self) -> tuple[int, int]:
        """
        Форма произведения (rowsA, columnsB).

        Raises:
            ValueError: Если матрицы несовместимы для умножения
        """
        if not self.is_multipliable:
            raise ValueError(
                f"No product shape: columns_a={self.columns_a} != rows_b={self.rows_b}"
            )
        return (self.rows_a, self.columns_b)
