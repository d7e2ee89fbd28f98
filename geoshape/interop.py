"""Conversions between geoshape types, numpy arrays and shapely geometries.

Shapely works in (x, y) order, which maps to (lng, lat) here.
"""

from typing import List

import numpy as np
from shapely.geometry import LineString, Polygon as ShapelyPolygon

from .geometry import InvalidInputError, Point, Polyline
from .geometry.types import PointSequence, as_points


def points_from_array(coords) -> List[Point]:
    """Build points from an (N, 2) array-like of (lng, lat) pairs."""
    arr = np.asarray(coords, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInputError(
            f"expected an (N, 2) array of lng/lat pairs, got shape {arr.shape}"
        )
    return [Point(float(lng), float(lat)) for lng, lat in arr]


def to_linestring(polyline: PointSequence) -> LineString:
    return LineString([tuple(p) for p in as_points(polyline)])


def to_polygon(polygon: PointSequence) -> ShapelyPolygon:
    return ShapelyPolygon([tuple(p) for p in as_points(polygon)])


def from_shapely(geom) -> Polyline:
    """Convert a shapely LineString or Polygon to a Polyline.

    For polygons the exterior ring is used and its closing vertex (a copy
    of the first) is dropped, since rings here are implicitly closed.
    Holes are ignored.
    """
    if geom.geom_type == 'LineString':
        coords = list(geom.coords)
    elif geom.geom_type == 'Polygon':
        coords = list(geom.exterior.coords)
        if len(coords) > 1 and coords[0] == coords[-1]:
            coords = coords[:-1]
    else:
        raise InvalidInputError(f"unsupported geometry type: {geom.geom_type}")

    return Polyline([Point(float(c[0]), float(c[1])) for c in coords])
