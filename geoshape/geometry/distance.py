"""Coordinate normalization and great-circle distance."""

import math

from .constants import (
    EARTH_RADIUS,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from .types import Point


def degrees_to_radians(degree: float) -> float:
    return math.pi * degree / 180


def radians_to_degrees(rad: float) -> float:
    return (180 * rad) / math.pi


def normalize_longitude(lng: float) -> float:
    """Wrap a longitude into [-180, 180] by whole turns."""
    span = MAX_LONGITUDE - MIN_LONGITUDE
    while lng > MAX_LONGITUDE:
        lng -= span
    while lng < MIN_LONGITUDE:
        lng += span
    return lng


def clamp_latitude(lat: float) -> float:
    """Clamp a latitude into [-74, 74]. Out-of-band values are truncated."""
    return min(max(lat, MIN_LATITUDE), MAX_LATITUDE)


def normalize(point: Point) -> Point:
    """Return a copy of ``point`` with longitude wrapped and latitude clamped."""
    return Point(normalize_longitude(point.lng), clamp_latitude(point.lat))


def distance(point1: Point, point2: Point) -> float:
    """Great-circle distance in meters between two points.

    Both points are normalized first (see :func:`normalize`); the inputs
    themselves are left untouched.
    """
    a = normalize(point1)
    b = normalize(point2)
    if a.lng == b.lng and a.lat == b.lat:
        return 0.0

    x1 = degrees_to_radians(a.lng)
    y1 = degrees_to_radians(a.lat)
    x2 = degrees_to_radians(b.lng)
    y2 = degrees_to_radians(b.lat)

    cos_angle = math.sin(y1) * math.sin(y2) + math.cos(y1) * math.cos(y2) * math.cos(x2 - x1)
    # Rounding can push nearly identical points just past 1
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return EARTH_RADIUS * math.acos(cos_angle)
