"""Bounding box calculation."""

from .types import InvalidInputError, Point, PointSequence, Rect, as_points


def bounds(shape: PointSequence) -> Rect:
    """Axis-aligned envelope of a point sequence.

    Raises InvalidInputError for an empty sequence.
    """
    points = as_points(shape)
    if not points:
        raise InvalidInputError("cannot compute bounds of an empty point sequence")

    min_lat = min(p.lat for p in points)
    max_lat = max(p.lat for p in points)
    min_lng = min(p.lng for p in points)
    max_lng = max(p.lng for p in points)

    return Rect(
        south_west=Point(min_lng, min_lat),
        north_east=Point(max_lng, max_lat),
    )
