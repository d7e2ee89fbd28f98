"""Type definitions for geoshape geometry."""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from .constants import EPSILON


class InvalidInputError(ValueError):
    """Raised when a geometry operation is given input it cannot work with."""


@dataclass(frozen=True, eq=False)
class Point:
    """Geographic point in degrees (longitude first)."""
    lng: float
    lat: float

    def equals(self, other: "Point") -> bool:
        """True if both coordinates are within EPSILON of ``other``'s."""
        return (abs(self.lat - other.lat) <= EPSILON and
                abs(self.lng - other.lng) <= EPSILON)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    # Approximate equality is not transitive, so points can't be hashed
    __hash__ = None

    def __iter__(self):
        yield self.lng
        yield self.lat


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in (lng, lat) space."""
    south_west: Point
    north_east: Point

    def contains(self, point: Point) -> bool:
        from .containment import point_in_rect
        return point_in_rect(point, self)


@dataclass(frozen=True)
class Circle:
    """Great-circle disc with a radius in meters."""
    center: Point
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            raise InvalidInputError(
                f"circle radius must be non-negative, got {self.radius}"
            )

    def contains(self, point: Point) -> bool:
        from .containment import point_in_circle
        return point_in_circle(point, self)


@dataclass(frozen=True)
class Polyline:
    """Ordered, immutable sequence of points.

    The same type doubles as a polygon ring: polygon operations connect
    the last point back to the first.
    """
    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def bounds(self) -> Rect:
        from .bounds import bounds
        return bounds(self.points)

    def length(self) -> float:
        from .polygon import polyline_length
        return polyline_length(self.points)

    def area(self) -> float:
        from .polygon import polygon_area
        return polygon_area(self.points)


PointSequence = Union[Polyline, Sequence[Point]]


def as_points(shape: PointSequence) -> List[Point]:
    """Return the points of a Polyline or any sequence of points as a list."""
    if isinstance(shape, Polyline):
        return list(shape.points)
    return list(shape)
