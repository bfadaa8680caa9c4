"""
Integer Safeguards: проверки целочисленных параметров

Модуль обеспечивает корректность входных параметров матричного движка:
- Валидация размерностей (строго положительные int)
- Валидация range bound (неотрицательный int)
- Оценка худшего случая |элемент произведения| и проверка на int32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается за int (True/False отвергаются)
2. Python int не переполняется; int32-проверки нужны только для интеропа
   с display-слоем, который хранит значения в 32-bit signed int
3. Все проверки выполняются до любых вычислений
"""

from typing import Final

# =============================================================================
# INT32 ГРАНИЦЫ
# =============================================================================

# Минимальное значение 32-bit signed int
INT32_MIN: Final[int] = -(2**31)

# Максимальное значение 32-bit signed int
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """
    Проверка, является ли значение int (bool исключается).

    Examples:
        >>> is_strict_int(3)
        True
        >>> is_strict_int(True)
        False
        >>> is_strict_int(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def fits_int32(value: int) -> bool:
    """
    Проверка, помещается ли значение в 32-bit signed int.

    Args:
        value: Проверяемое значение

    Returns:
        True если INT32_MIN <= value <= INT32_MAX
    """
    return INT32_MIN <= value <= INT32_MAX


# =============================================================================
# ОЦЕНКА ХУДШЕГО СЛУЧАЯ
# =============================================================================


def max_entry_magnitude(range_bound: int) -> int:
    """
    Максимальный |элемент| случайной матрицы.

    Элементы лежат в [-range, range), поэтому худший случай = range
    (достигается только отрицательной границей).
    """
    validate_non_negative_int(range_bound, "range_bound")
    return range_bound


def max_product_magnitude(shared_dimension: int, range_bound: int) -> int:
    """
    Худший случай |элемент произведения| для случайных матриц.

    Каждый элемент произведения: сумма shared_dimension слагаемых вида
    a[i][k] * b[k][j], где |a|, |b| <= range.

    Формула:
        max|product[i][j]| = shared_dimension * range^2

    Args:
        shared_dimension: Общая размерность (columnsA == rowsB)
        range_bound: Полуширина интервала случайных значений

    Returns:
        Верхняя граница абсолютного значения элемента произведения

    Examples:
        >>> max_product_magnitude(5, 10)
        500
        >>> max_product_magnitude(3, 0)
        0
    """
    validate_positive_int(shared_dimension, "shared_dimension")
    magnitude = max_entry_magnitude(range_bound)
    return shared_dimension * magnitude * magnitude


def product_fits_int32(shared_dimension: int, range_bound: int) -> bool:
    """
    Проверка, что любое произведение случайных матриц помещается в int32.

    Args:
        shared_dimension: Общая размерность (columnsA == rowsB)
        range_bound: Полуширина интервала случайных значений

    Returns:
        True если худший случай не выходит за границы int32
    """
    return fits_int32(max_product_magnitude(shared_dimension, range_bound))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение: положительный int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value <= 0
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение: неотрицательный int.

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value < 0
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_int_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что int лежит в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне диапазона
    """
    if not is_strict_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
