"""Point list input/output utilities for geoshape."""

import re
import sys
from typing import List, Optional

from .geometry import InvalidInputError, Point

_SEPARATOR = re.compile(r'[,\s]+')


def parse_points(text: str) -> List[Point]:
    """Parse one ``lng,lat`` (or ``lng lat``) pair per line.

    Blank lines and ``#`` comments are skipped.
    """
    points: List[Point] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue

        fields = _SEPARATOR.split(line)
        if len(fields) != 2:
            raise InvalidInputError(
                f"line {lineno}: expected 'lng,lat', got {raw.strip()!r}"
            )
        try:
            lng, lat = float(fields[0]), float(fields[1])
        except ValueError:
            raise InvalidInputError(
                f"line {lineno}: coordinates must be numbers, got {raw.strip()!r}"
            ) from None

        points.append(Point(lng, lat))

    return points


def read_points(path: Optional[str] = None) -> List[Point]:
    """Read points from a file or stdin."""
    if path is None:
        return parse_points(sys.stdin.read())
    with open(path, 'r', encoding='utf-8') as f:
        return parse_points(f.read())


def format_point(point: Point, precision: int = 6) -> str:
    return f"{point.lng:.{precision}f},{point.lat:.{precision}f}"
