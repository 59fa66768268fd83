
from unittest import TestCase

from matrix2d import Point2D, Vector2


class TestPoint2D(TestCase):

    def test_defaults(self):
        self.assertEqual(Point2D().as_tuple(), (0.0, 0.0))

    def test_unpack(self):
        x, y = Point2D(1.5, -2)
        self.assertEqual((x, y), (1.5, -2))

    def test_copy(self):
        p = Point2D(1, 2)
        q = p.copy()
        q.x = 10
        self.assertEqual(p, Point2D(1, 2))
        self.assertIsNot(p, q)

    def test_alias(self):
        self.assertIs(Vector2, Point2D)
