"""
Shared primitive data types for the game engine.

This module provides the basic geometric types used throughout the
codebase: entity positions, bounding boxes and collision tests.
"""

from pydantic import BaseModel, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and offsets.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Used for bounding boxes and collision detection.
    Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=100.0, y=100.0, width=50.0, height=50.0)
        >>> rect.right
        150.0
        >>> rect.contains_point(Point2D(x=125.0, y=125.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @classmethod
    def from_bounds(cls, left: float, top: float, right: float, bottom: float) -> 'Rectangle':
        """Build a rectangle from its edges.

        Examples:
            >>> Rectangle.from_bounds(10, 10, 30, 50).height
            40.0
        """
        return cls(x=left, y=top, width=right - left, height=bottom - top)

    @computed_field
    @property
    def center(self) -> Point2D:
        """Calculate the center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside or on the boundary of the rectangle.

        Examples:
            >>> rect = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect.contains_point(Point2D(x=150.0, y=50.0))
            False
        """
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another.

        Rectangles that only share an edge do not intersect.

        Examples:
            >>> a = Rectangle.from_bounds(10, 10, 30, 50)
            >>> b = Rectangle.from_bounds(15, 15, 45, 45)
            >>> a.intersects(b)
            True
            >>> a.intersects(Rectangle.from_bounds(30, 10, 40, 50))
            False
        """
        return (self.left < other.right and other.left < self.right and
                self.top < other.bottom and other.top < self.bottom)

    def as_tuple(self) -> tuple:
        """Return (x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
