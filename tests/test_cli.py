"""Tests for the geoshape command-line interface."""

import pytest
from click.testing import CliRunner
from geoshape.cli import main


BLOCK = """\
# lng,lat
116.395,39.910
116.394,39.918
116.396,39.919
116.404,39.920
116.406,39.913
"""


@pytest.fixture
def runner():
    return CliRunner()


def test_distance(runner):
    result = runner.invoke(main, ['distance', '82', '22', '82', '22'])
    assert result.exit_code == 0
    assert result.output.strip() == '0.00'


def test_distance_precision(runner):
    result = runner.invoke(main, ['distance', '0', '0', '1', '0', '--precision', '0'])
    assert result.exit_code == 0
    assert result.output.strip() == '111195'


def test_area_from_stdin(runner):
    result = runner.invoke(main, ['area', '--precision', '4'], input=BLOCK)
    assert result.exit_code == 0
    assert float(result.output) == pytest.approx(810876.60, abs=0.1)


def test_area_from_file(runner, tmp_path):
    path = tmp_path / 'block.txt'
    path.write_text(BLOCK)

    result = runner.invoke(main, ['area', str(path)])
    assert result.exit_code == 0
    assert float(result.output) == pytest.approx(810876.60, abs=0.1)


def test_length(runner):
    result = runner.invoke(main, ['length'], input="0 0\n1 0\n")
    assert result.exit_code == 0
    assert float(result.output) == pytest.approx(111194.87, abs=0.01)


def test_bounds(runner):
    result = runner.invoke(main, ['bounds'], input=BLOCK)
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines == [
        'south_west 116.394000,39.910000',
        'north_east 116.406000,39.920000',
    ]


def test_bounds_empty_input(runner):
    result = runner.invoke(main, ['bounds'], input="# nothing here\n")
    assert result.exit_code == 1
    assert 'Error' in result.output


@pytest.mark.parametrize('shape,lng,lat,expected', [
    ('polygon', '116.40', '39.915', 'true'),
    ('polygon', '116.40', '39.95', 'false'),
    ('polyline', '116.395', '39.910', 'true'),
    ('rect', '116.394', '39.920', 'true'),
])
def test_contains(runner, shape, lng, lat, expected):
    result = runner.invoke(main, ['contains', lng, lat, '-', '--shape', shape], input=BLOCK)
    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_circle(runner):
    result = runner.invoke(main, ['circle', '80.0007', '22.0001', '80', '22', '100'])
    assert result.exit_code == 0
    assert result.output.strip() == 'true'

    result = runner.invoke(main, ['circle', '80.001', '22.001', '80', '22', '100'])
    assert result.output.strip() == 'false'


def test_circle_negative_radius(runner):
    result = runner.invoke(main, ['circle', '80', '22', '80', '22', '--', '-5'])
    assert result.exit_code == 1
    assert 'Error' in result.output


def test_malformed_input(runner):
    result = runner.invoke(main, ['area'], input="116.395,39.910\nnot a point\n")
    assert result.exit_code == 1
    assert 'line 2' in result.output


def test_missing_file(runner, tmp_path):
    result = runner.invoke(main, ['area', str(tmp_path / 'missing.txt')])
    assert result.exit_code == 1
    assert 'Error reading input' in result.output


def test_area_closed_ring(runner, tmp_path):
    path = tmp_path / 'closed.txt'
    path.write_text(BLOCK + "116.395,39.910\n")

    result = runner.invoke(main, ['area', str(path)])
    assert result.exit_code == 0
    assert float(result.output) == pytest.approx(810876.60, abs=0.1)


def test_area_closed_triangle_matches_open(runner):
    open_ring = "116.395,39.910\n116.394,39.918\n116.404,39.920\n"
    closed_ring = open_ring + "116.395,39.910\n"

    open_result = runner.invoke(main, ['area'], input=open_ring)
    closed_result = runner.invoke(main, ['area'], input=closed_ring)
    assert closed_result.exit_code == 0
    assert closed_result.output == open_result.output
    assert float(closed_result.output) > 0
