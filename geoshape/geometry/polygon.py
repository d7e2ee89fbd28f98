"""Polygon operations for geoshape.

Polygons are point rings: the last vertex connects back to the first.
Area is measured on a sphere of radius EARTH_RADIUS.
"""

import math
from typing import List, NamedTuple, Tuple

from .bounds import bounds
from .constants import AREA_SELECTION_THRESHOLD, EARTH_RADIUS, EPSILON
from .containment import point_in_rect
from .distance import distance
from .types import Point, PointSequence, as_points

Vector = Tuple[float, float, float]


def point_in_polygon(point: Point, polygon: PointSequence) -> bool:
    """Check if a point is inside a polygon using ray casting.

    Vertices and edges count as inside. Based on
    http://paulbourke.net/geometry/insidepoly/ with explicit handling of
    horizontal/vertical edges and rays passing through a vertex.
    """
    pts = as_points(polygon)
    if not point_in_rect(point, bounds(pts)):
        return False

    n = len(pts)
    crossings = 0
    p1 = pts[0]

    for i in range(1, n + 1):
        if point.equals(p1):
            return True

        p2 = pts[i % n]
        lat_lo, lat_hi = min(p1.lat, p2.lat), max(p1.lat, p2.lat)

        if point.lat < lat_lo or point.lat > lat_hi:
            p1 = p2
            continue

        if lat_lo < point.lat < lat_hi:
            if point.lng <= max(p1.lng, p2.lng):
                # Horizontal edge
                if p1.lat == p2.lat and point.lng >= min(p1.lng, p2.lng):
                    return True

                if p1.lng == p2.lng:
                    # Vertical edge
                    if p1.lng == point.lng:
                        return True
                    crossings += 1
                else:
                    x_intersect = (point.lat - p1.lat) * (p2.lng - p1.lng) / (p2.lat - p1.lat) + p1.lng
                    if abs(point.lng - x_intersect) < EPSILON:
                        return True
                    if point.lng < x_intersect:
                        crossings += 1
        elif point.lat == p2.lat and point.lng <= p2.lng:
            # Ray passes through p2: one crossing if the ring goes across
            # the ray there, two if it only touches it
            p3 = pts[(i + 1) % n]
            if min(p1.lat, p3.lat) <= point.lat <= max(p1.lat, p3.lat):
                crossings += 1
            else:
                crossings += 2

        p1 = p2

    return crossings % 2 == 1


def polyline_length(polyline: PointSequence) -> float:
    """Sum of great-circle distances between consecutive points (meters)."""
    pts = as_points(polyline)
    if len(pts) < 2:
        return 0.0

    total = 0.0
    for cur, nxt in zip(pts, pts[1:]):
        total += distance(cur, nxt)
    return total


class AngleSumChoice(NamedTuple):
    """Which candidate angle sum was chosen (1 or 2) and its value."""
    branch: int
    total: float


def select_angle_sum(sum1: float, count1: int,
                     sum2: float, count2: int, n: int) -> AngleSumChoice:
    """Resolve the orientation ambiguity of the tangent-plane angle sums.

    Each vertex angle was filed under sum1 or sum2 by the sign of its
    orientation value. One group holds interior angles and the other
    holds their complements to 2*pi; which is which depends on winding.
    The candidate built from the larger raw sum is preferred as long as
    it lies within AREA_SELECTION_THRESHOLD of the planar sum (n - 2) * pi.
    """
    candidate1 = sum1 + (2 * math.pi * count2 - sum2)
    candidate2 = (2 * math.pi * count1 - sum1) + sum2
    planar = (n - 2) * math.pi

    if sum1 > sum2:
        if candidate1 - planar < AREA_SELECTION_THRESHOLD:
            return AngleSumChoice(1, candidate1)
        return AngleSumChoice(2, candidate2)

    if candidate2 - planar < AREA_SELECTION_THRESHOLD:
        return AngleSumChoice(2, candidate2)
    return AngleSumChoice(1, candidate1)


def polygon_area(polygon: PointSequence) -> float:
    """Area of a polygon on the sphere, in square meters.

    Not valid for self-intersecting polygons. A closing vertex repeating
    the first one, and any vertex repeating its predecessor, is dropped.
    Returns 0 for fewer than 3 distinct vertices. The result does not
    depend on winding direction.
    """
    pts = _ring_vertices(as_points(polygon))
    n = len(pts)
    if n < 3:
        return 0.0

    vectors = [_unit_vector(p) for p in pts]

    sum1 = sum2 = 0.0
    count1 = count2 = 0
    for i in range(n):
        angle, orientation = _vertex_angle(vectors[i - 1], vectors[i], vectors[(i + 1) % n])
        if orientation > 0:
            sum1 += angle
            count1 += 1
        else:
            sum2 += angle
            count2 += 1

    choice = select_angle_sum(sum1, count1, sum2, count2, n)
    return (choice.total - (n - 2) * math.pi) * EARTH_RADIUS * EARTH_RADIUS


def _ring_vertices(pts: List[Point]) -> List[Point]:
    """Drop repeated consecutive vertices, including a closing copy of the first."""
    ring: List[Point] = []
    for p in pts:
        if not ring or not p.equals(ring[-1]):
            ring.append(p)
    if len(ring) > 1 and ring[-1].equals(ring[0]):
        ring.pop()
    return ring


def _unit_vector(point: Point) -> Vector:
    x = point.lng * math.pi / 180
    y = point.lat * math.pi / 180
    return (math.cos(y) * math.cos(x), math.cos(y) * math.sin(x), math.sin(y))


def _dot(u: Vector, v: Vector) -> float:
    return u[0] * v[0] + u[1] * v[1] + u[2] * v[2]


def _tangent(m: Vector, x: Vector) -> Vector:
    """Project x along the ray from the origin onto the tangent plane at m,
    as a vector relative to m."""
    k = _dot(m, m) / _dot(m, x)
    return (k * x[0] - m[0], k * x[1] - m[1], k * x[2] - m[2])


def _vertex_angle(low: Vector, middle: Vector, high: Vector) -> Tuple[float, float]:
    """Angle at ``middle`` between its neighbours, plus an orientation value.

    The orientation value is positive when the normal of the two tangent
    vectors points the same way as ``middle``.
    """
    lt = _tangent(middle, low)
    ht = _tangent(middle, high)

    cos_angle = _dot(ht, lt) / (math.sqrt(_dot(ht, ht)) * math.sqrt(_dot(lt, lt)))
    angle = math.acos(max(-1.0, min(1.0, cos_angle)))

    normal = (
        ht[1] * lt[2] - ht[2] * lt[1],
        -(ht[0] * lt[2] - ht[2] * lt[0]),
        ht[0] * lt[1] - ht[1] * lt[0],
    )

    if middle[0] != 0:
        orientation = normal[0] / middle[0]
    elif middle[1] != 0:
        orientation = normal[1] / middle[1]
    else:
        orientation = normal[2] / middle[2]

    return angle, orientation
