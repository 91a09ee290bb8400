"""Core 2D geometric types.

This module defines the planar types shared by layout and tessellation:
- Point: A 2D point in layout units
- Contour: A closed polyline ring produced by flattening a subpath
- WindingDirection: Enum for ring winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class WindingDirection(Enum):
    """Ring winding direction in a y-up coordinate system."""

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D layout space.

    Immutable and hashable, copied freely by value.

    Attributes:
        x: X coordinate in layout units
        y: Y coordinate in layout units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a copy moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass
class Contour:
    """A closed ring of points.

    The closing edge from the last point back to the first is implicit;
    the first point is not repeated at the end.

    Attributes:
        points: List of points forming the ring
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the ring
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    @property
    def direction(self) -> WindingDirection | None:
        """Winding direction, or None for a zero-area ring."""
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def is_degenerate(self) -> bool:
        """Check if the ring encloses no area.

        A figure-eight can have zero signed area while still enclosing two
        lobes, so the test is collinearity rather than the area sum.

        Returns:
            True for rings with fewer than 3 points or all points on one line
        """
        if len(self.points) < 3:
            return True

        origin = self.points[0]
        for i in range(1, len(self.points) - 1):
            a = self.points[i]
            b = self.points[i + 1]
            cross = (a.x - origin.x) * (b.y - origin.y) - (b.x - origin.x) * (a.y - origin.y)
            if cross != 0.0:
                return False
        return True

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the ring.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def coords(self) -> list[tuple[float, float]]:
        """Ring coordinates as plain tuples, without the closing point."""
        return [p.to_tuple() for p in self.points]
