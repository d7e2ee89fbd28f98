"""Command-line interface for geoshape."""

import sys
import time
import click

from .geometry import (
    Circle,
    InvalidInputError,
    Point,
    bounds,
    distance,
    point_in_circle,
    point_in_polygon,
    point_in_rect,
    point_on_polyline,
    polygon_area,
    polyline_length,
)
from .points_io import format_point, read_points

_precision_option = click.option(
    '--precision', default=2, type=click.IntRange(min=0),
    help='Decimal places in printed numbers (default: 2)')
_verbose_option = click.option(
    '--verbose', '-v', is_flag=True, help='Print timing and statistics')


@click.group()
@click.version_option()
def main():
    """geoshape: distances, containment and areas on lng/lat coordinates.

    Shape commands read one point per line ("lng,lat") from INPUT, a file
    path or - for stdin (default).

    Examples:

        geoshape distance 116.30 40.05 116.31 40.06

        geoshape area field.txt

        cat route.txt | geoshape length --precision 1
    """
    pass


def _load(input, verbose):
    """Read INPUT, exiting with an error message on failure."""
    try:
        points = read_points(input if input != '-' else None)
    except (OSError, InvalidInputError) as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Read {len(points)} points", err=True)
    return points


def _fail(e):
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@main.command('distance')
@click.argument('lng1', type=float)
@click.argument('lat1', type=float)
@click.argument('lng2', type=float)
@click.argument('lat2', type=float)
@_precision_option
def distance_cmd(lng1, lat1, lng2, lat2, precision):
    """Great-circle distance in meters between two points."""
    d = distance(Point(lng1, lat1), Point(lng2, lat2))
    click.echo(f"{d:.{precision}f}")


@main.command('bounds')
@click.argument('input', default='-', required=False)
@_verbose_option
def bounds_cmd(input, verbose):
    """Bounding box of the points in INPUT."""
    points = _load(input, verbose)
    try:
        rect = bounds(points)
    except InvalidInputError as e:
        _fail(e)

    click.echo(f"south_west {format_point(rect.south_west)}")
    click.echo(f"north_east {format_point(rect.north_east)}")


@main.command('length')
@click.argument('input', default='-', required=False)
@_precision_option
@_verbose_option
def length_cmd(input, precision, verbose):
    """Length in meters of the polyline in INPUT."""
    points = _load(input, verbose)
    start_time = time.time()

    total = polyline_length(points)
    click.echo(f"{total:.{precision}f}")

    if verbose:
        click.echo(f"Completed in {time.time() - start_time:.3f}s", err=True)


@main.command('area')
@click.argument('input', default='-', required=False)
@_precision_option
@_verbose_option
def area_cmd(input, precision, verbose):
    """Area in square meters of the polygon in INPUT."""
    points = _load(input, verbose)
    if verbose and len(points) < 3:
        click.echo("Fewer than 3 points, area is 0", err=True)
    start_time = time.time()

    total = polygon_area(points)
    click.echo(f"{total:.{precision}f}")

    if verbose:
        click.echo(f"Completed in {time.time() - start_time:.3f}s", err=True)


@main.command('contains')
@click.argument('lng', type=float)
@click.argument('lat', type=float)
@click.argument('input', default='-', required=False)
@click.option('--shape', '-s', default='polygon',
              type=click.Choice(['polygon', 'polyline', 'rect']),
              help='How to interpret the points in INPUT (default: polygon)')
@_verbose_option
def contains_cmd(lng, lat, input, shape, verbose):
    """Check whether point LNG LAT lies in the shape from INPUT.

    With --shape rect the shape is the bounding box of INPUT.
    """
    points = _load(input, verbose)
    point = Point(lng, lat)

    try:
        if shape == 'polygon':
            inside = point_in_polygon(point, points)
        elif shape == 'polyline':
            inside = point_on_polyline(point, points)
        else:
            inside = point_in_rect(point, bounds(points))
    except InvalidInputError as e:
        _fail(e)

    click.echo('true' if inside else 'false')


@main.command('circle')
@click.argument('lng', type=float)
@click.argument('lat', type=float)
@click.argument('center_lng', type=float)
@click.argument('center_lat', type=float)
@click.argument('radius', type=float)
@_verbose_option
def circle_cmd(lng, lat, center_lng, center_lat, radius, verbose):
    """Check whether point LNG LAT is within RADIUS meters of the center."""
    try:
        circle = Circle(Point(center_lng, center_lat), radius)
    except InvalidInputError as e:
        _fail(e)

    point = Point(lng, lat)
    if verbose:
        d = distance(point, circle.center)
        click.echo(f"Distance to center: {d:.2f}m", err=True)

    click.echo('true' if point_in_circle(point, circle) else 'false')


if __name__ == '__main__':
    main()
