"""Two-dimensional point domain.

Positions are the scalar projection of ``value - start`` onto the
``start -> end`` axis, divided by the axis length. The component orthogonal
to the axis is discarded, so only points on the line through ``start`` and
``end`` survive a value -> position -> value round trip unchanged.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .base import domain_for


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Point":
        """Build a point from an ``[x, y]`` pair."""
        if len(values) != 2:
            raise ValueError(f"Point requires exactly 2 coordinates, got {len(values)}")
        x, y = values
        return cls(float(x), float(y))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())


@dataclass(frozen=True)
class PointDomain:
    """Projection of points onto the line through two boundary points."""

    def unit_position(self, value: Point, start: Point, end: Point) -> float:
        """Scalar projection of value onto the start -> end axis, in axis lengths."""
        ax, ay = value.x - start.x, value.y - start.y
        bx, by = end.x - start.x, end.y - start.y
        return (ax * bx + ay * by) / (bx * bx + by * by)

    def value_at_unit_position(self, position: float, start: Point, end: Point) -> Point:
        """Componentwise start * (1 - p) + end * p."""
        position = float(position)
        return Point(
            start.x * (1.0 - position) + end.x * position,
            start.y * (1.0 - position) + end.y * position,
        )


POINT = PointDomain()


@domain_for.register(Point)
def _point_domain(value) -> PointDomain:
    return POINT
