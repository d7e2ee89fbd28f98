"""Point-in-rectangle, point-in-circle and point-on-polyline tests."""

from .bounds import bounds
from .constants import EPSILON
from .distance import distance
from .types import Circle, Point, PointSequence, Rect, as_points


def point_in_rect(point: Point, rect: Rect) -> bool:
    """Check if a point is inside a rectangle (edges included).

    Raw coordinate comparison, no normalization.
    """
    sw = rect.south_west
    ne = rect.north_east
    return (sw.lng <= point.lng <= ne.lng and
            sw.lat <= point.lat <= ne.lat)


def point_in_circle(point: Point, circle: Circle) -> bool:
    """Check if a point is within ``circle.radius`` meters of its center."""
    return distance(point, circle.center) <= circle.radius


def point_on_polyline(point: Point, polyline: PointSequence) -> bool:
    """Check if a point lies on any segment of a polyline.

    A point Q is on segment P1P2 when it sits inside the segment's
    bounding box and (P1 - Q) x (P2 - Q) is zero within EPSILON.
    """
    pts = as_points(polyline)
    if not point_in_rect(point, bounds(pts)):
        return False

    for cur, nxt in zip(pts, pts[1:]):
        if not (min(cur.lng, nxt.lng) <= point.lng <= max(cur.lng, nxt.lng) and
                min(cur.lat, nxt.lat) <= point.lat <= max(cur.lat, nxt.lat)):
            continue

        cross = ((cur.lng - point.lng) * (nxt.lat - point.lat) -
                 (nxt.lng - point.lng) * (cur.lat - point.lat))
        if -EPSILON < cross < EPSILON:
            return True

    return False
