"""Tests for the geometry value types."""

import pytest
from geoshape.geometry import Circle, InvalidInputError, Point, Polyline, Rect


def test_point_equals():
    pt1 = Point(lng=22.4, lat=22.3)
    pt2 = Point(lng=22.4, lat=22.3)
    pt3 = Point(lng=22.6, lat=22.3)

    assert pt1.equals(pt2)
    assert pt1 == pt2
    assert not pt1.equals(pt3)
    assert pt1 != pt3


def test_point_equality_is_approximate():
    """Differences up to 2e-10 on each axis still compare equal."""
    assert Point(10, 20) == Point(10 + 1e-10, 20 - 1e-10)
    assert Point(10, 20) != Point(10 + 1e-9, 20)


def test_point_is_immutable_and_unhashable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.lng = 3
    with pytest.raises(TypeError):
        hash(p)


def test_point_unpacks_lng_first():
    lng, lat = Point(116.4, 39.9)
    assert (lng, lat) == (116.4, 39.9)


def test_point_not_equal_to_other_types():
    assert Point(1, 2) != (1, 2)


def test_circle_rejects_negative_radius():
    with pytest.raises(InvalidInputError):
        Circle(Point(80, 22), -1)


def test_rect_contains():
    rect = Rect(Point(80, 22), Point(84, 25))
    assert rect.contains(Point(82, 22))
    assert not rect.contains(Point(85, 22))


def test_circle_contains():
    circle = Circle(Point(80, 22), 100)
    assert circle.contains(Point(80.0007, 22.0001))


def test_polyline_sequence_protocol():
    line = Polyline([Point(0, 0), Point(1, 1), Point(2, 0)])
    assert len(line) == 3
    assert line[1] == Point(1, 1)
    assert [p.lng for p in line] == [0, 1, 2]


def test_polyline_defaults_to_empty():
    assert len(Polyline()) == 0
    assert Polyline().length() == 0.0
    assert Polyline().area() == 0.0


def test_polyline_is_immutable():
    source = [Point(0, 0), Point(1, 1)]
    line = Polyline(source)
    source.append(Point(2, 2))

    assert isinstance(line.points, tuple)
    assert len(line) == 2
    with pytest.raises(AttributeError):
        line.points = ()


def test_polyline_equality():
    assert Polyline([Point(0, 0), Point(1, 1)]) == Polyline((Point(0, 0), Point(1, 1)))
    assert Polyline([Point(0, 0)]) != Polyline([Point(1, 1)])
