"""Engine: матричный движок и сессии поверх чистых примитивов src.core.math.

- MatrixEngine: валидация, генерация, послойное умножение, сложение
- MatrixSession: A, B, product с явной инициализацией и пересчётом
- EngineConfig / DimensionBounds: конфигурация
"""

from .config import DimensionBounds, EngineConfig
from .matrix_engine import MatrixEngine, MatrixProductResult
from .session import MatrixSession

__all__ = [
    "DimensionBounds",
    "EngineConfig",
    "MatrixEngine",
    "MatrixProductResult",
    "MatrixSession",
]
