"""geoshape: distances, containment and areas on geographic coordinates."""

__version__ = "0.1.0"

from .geometry import (
    Point,
    Rect,
    Circle,
    Polyline,
    InvalidInputError,
    degrees_to_radians,
    radians_to_degrees,
    normalize,
    distance,
    bounds,
    point_in_rect,
    point_in_circle,
    point_on_polyline,
    point_in_polygon,
    polyline_length,
    polygon_area,
)

__all__ = [
    "Point",
    "Rect",
    "Circle",
    "Polyline",
    "InvalidInputError",
    "degrees_to_radians",
    "radians_to_degrees",
    "normalize",
    "distance",
    "bounds",
    "point_in_rect",
    "point_in_circle",
    "point_on_polyline",
    "point_in_polygon",
    "polyline_length",
    "polygon_area",
]
