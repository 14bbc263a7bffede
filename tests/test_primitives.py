"""Tests for models/primitives.py."""
import pytest
from pydantic import ValidationError

from models import Point2D, Rectangle


class TestPoint2D:

    def test_frozen(self):
        p = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            p.x = 5.0

    def test_str(self):
        assert str(Point2D(x=1, y=2)) == "Point2D(x=1.00, y=2.00)"


class TestRectangle:
    """Tests for Rectangle geometry."""

    def test_edges_and_center(self):
        rect = Rectangle(x=10, y=20, width=30, height=40)
        assert (rect.left, rect.top, rect.right, rect.bottom) == (10, 20, 40, 60)
        assert rect.center == Point2D(x=25, y=40)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_size_rejected(self, width, height):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=width, height=height)

    def test_from_bounds(self):
        rect = Rectangle.from_bounds(10, 10, 30, 50)
        assert rect.as_tuple() == (10, 10, 20, 40)

    def test_contains_point_inclusive(self):
        rect = Rectangle(x=0, y=0, width=10, height=10)
        assert rect.contains_point(Point2D(x=10, y=10))
        assert not rect.contains_point(Point2D(x=10.1, y=5))


class TestIntersects:
    """Strict overlap tests."""

    def test_overlap(self):
        a = Rectangle.from_bounds(10, 10, 30, 50)
        b = Rectangle.from_bounds(15, 15, 45, 45)
        assert a.intersects(b)
        assert b.intersects(a)

    def test_containment(self):
        outer = Rectangle.from_bounds(0, 0, 100, 100)
        inner = Rectangle.from_bounds(40, 40, 60, 60)
        assert outer.intersects(inner)

    @pytest.mark.parametrize("other", [
        (30, 10, 40, 50),   # shares right edge
        (0, 10, 10, 50),    # shares left edge
        (10, 50, 30, 60),   # shares bottom edge
        (10, 0, 30, 10),    # shares top edge
        (30, 50, 40, 60),   # shares a corner
    ])
    def test_touching_is_not_intersecting(self, other):
        a = Rectangle.from_bounds(10, 10, 30, 50)
        assert not a.intersects(Rectangle.from_bounds(*other))

    def test_disjoint(self):
        a = Rectangle.from_bounds(0, 0, 10, 10)
        assert not a.intersects(Rectangle.from_bounds(20, 20, 30, 30))
