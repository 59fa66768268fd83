
from matrix2d.core import (
    AffineTransform2D, Matrix3x2, Point2D, Vector2, table_matrix
)

__version__ = '0.1.0'

__all__ = [
    'AffineTransform2D',
    'Matrix3x2',
    'Point2D',
    'Vector2',
    'table_matrix',
]
