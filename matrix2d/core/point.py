
from dataclasses import dataclass


@dataclass
class Point2D:
    """A mutable point (or vector) in the plane.

    Instances are changed in place by :meth:`Matrix3x2.apply`, so callers
    that need the original coordinates afterwards should :meth:`copy` first.

    Parameters
    ----------
    x, y : :any:`float`, default=0.0
        Coordinates of the point.

    Examples
    --------
    >>> from matrix2d import Point2D
    >>> p = Point2D(1.0, 2.0)
    >>> x, y = p
    >>> p.as_tuple()
    (1.0, 2.0)
    """

    x: float = 0.0
    y: float = 0.0

    def copy(self):
        """Return an independent point with the same coordinates."""
        return Point2D(self.x, self.y)

    def as_tuple(self):
        """The coordinates as an :python:`(x, y)` tuple."""
        return self.x, self.y

    def __iter__(self):
        yield self.x
        yield self.y


Vector2 = Point2D
""" Alias of :py:class:`Point2D` for code that treats the value as a
direction rather than a position. """
