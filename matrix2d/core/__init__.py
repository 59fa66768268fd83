
from matrix2d.core.logger_mixin import (
    InstanceLogger, LoggerMixin, table_matrix
)
from matrix2d.core.point import Point2D, Vector2
from matrix2d.core.matrix import AffineTransform2D, Matrix3x2

__all__ = [
    'AffineTransform2D',
    'InstanceLogger',
    'LoggerMixin',
    'Matrix3x2',
    'Point2D',
    'Vector2',
    'table_matrix',
]
