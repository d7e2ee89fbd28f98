"""Geometry on longitude/latitude coordinates."""

from .constants import EARTH_RADIUS, EPSILON
from .types import Point, Rect, Circle, Polyline, InvalidInputError
from .distance import (
    degrees_to_radians,
    radians_to_degrees,
    normalize_longitude,
    clamp_latitude,
    normalize,
    distance,
)
from .bounds import bounds
from .containment import point_in_rect, point_in_circle, point_on_polyline
from .polygon import (
    point_in_polygon,
    polyline_length,
    polygon_area,
    select_angle_sum,
    AngleSumChoice,
)

__all__ = [
    "EARTH_RADIUS",
    "EPSILON",
    "Point",
    "Rect",
    "Circle",
    "Polyline",
    "InvalidInputError",
    "degrees_to_radians",
    "radians_to_degrees",
    "normalize_longitude",
    "clamp_latitude",
    "normalize",
    "distance",
    "bounds",
    "point_in_rect",
    "point_in_circle",
    "point_on_polyline",
    "point_in_polygon",
    "polyline_length",
    "polygon_area",
    "select_angle_sum",
    "AngleSumChoice",
]
