"""
JSON Schema Contract Validators

Модуль для валидации данных, которые движок отдаёт display-слою, согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- matrix.json         : одна матрица {rows, columns, data}
- matrix_product.json : сомножители A, B и их произведение

matrix_product.json ссылается на matrix.json через $ref, ссылки между
файлами разрешаются через общий Registry загрузчика.

JSON Schema не умеет выразить "каждая строка содержит columns элементов",
этот инвариант обеспечивает модель Matrix.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource

from src.core.domain.matrix import Matrix


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Registry | None = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Registry всех схем каталога, ключ: $id схемы.

        Нужен валидатору для разрешения $ref между файлами
        (matrix_product.json -> matrix.json).
        """
        if self._registry is None:
            resources = []
            for schema_path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(schema_path.stem)
                resources.append((schema["$id"], Resource.from_contents(schema)))
            self._registry = Registry().with_resources(resources)
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, registry=_SCHEMA_LOADER.registry()
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class MatrixValidator(ContractValidator):
    """Валидатор для matrix контракта."""

    def __init__(self):
        super().__init__("matrix")


class MatrixProductValidator(ContractValidator):
    """Валидатор для matrix_product контракта."""

    def __init__(self):
        super().__init__("matrix_product")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def matrix_to_contract(matrix: Matrix) -> Dict[str, Any]:
    """
    Сериализация Matrix в форму контракта matrix.json.

    Returns:
        {"rows": int, "columns": int, "data": list[list[int]]}
    """
    return {
        "rows": matrix.rows,
        "columns": matrix.columns,
        "data": matrix.to_lists(),
    }


def validate_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация matrix данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixValidator().validate(data)


def validate_matrix_product(data: Dict[str, Any]) -> None:
    """
    Валидация matrix_product данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixProductValidator().validate(data)

