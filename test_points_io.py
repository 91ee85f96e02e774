import logging

import pytest

from geometry import Point
from points_io import (
    DISTRIBUTIONS, PointFormatError, format_hull, format_point, generate_random_points,
    hull_report, parse_points, read_points, write_points
)


def test_parse_points():
    text = "3\n0 0\n4 0\n0 3\n"
    assert parse_points(text) == [Point(0, 0), Point(4, 0), Point(0, 3)]


def test_parse_points_any_whitespace():
    assert parse_points("2 -1 5\t\n 7   8") == [Point(-1, 5), Point(7, 8)]
    assert parse_points("0") == []


@pytest.mark.parametrize("text", [
    "",
    "   \n",
    "two 1 2 3 4",
    "-1",
    "3 0 0 1 1",
    "2 0 0 1.5 1",
    "1 0 x",
])
def test_parse_points_malformed(text):
    with pytest.raises(PointFormatError):
        parse_points(text)


def test_parse_points_trailing_tokens(caplog):
    with caplog.at_level(logging.WARNING):
        points = parse_points("1 2 3 4 5")
    assert points == [Point(2, 3)]
    assert "Ignoring 2 tokens" in caplog.text


def test_read_write_points(tmp_path):
    filename = tmp_path / "polygon.txt"
    points = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0), Point(1, 1)]
    write_points(filename, points)

    assert filename.read_text(encoding="utf-8").splitlines()[0] == "5"
    assert read_points(filename) == points


def test_read_points_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_points(tmp_path / "missing.txt")


def test_formatting():
    assert format_point(Point(3, -4)) == "(3; -4)"
    assert format_hull([Point(0, 0), Point(4, 0), Point(0, 3)]) == "(0; 0) (4; 0) (0; 3)"
    assert format_hull([]) == ""


def test_hull_report():
    hull = [Point(0, 0), Point(4, 0), Point(0, 3)]
    assert hull_report(hull, 6.0) == "ConvexHull : (0; 0) (4; 0) (0; 3)\nVolume = 6"
    assert hull_report([Point(0, 0), Point(1, 0), Point(0, 1)], 0.5).endswith("Volume = 0.5")


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_generate_random_points(distribution):
    points = generate_random_points(200, distribution, low=0, high=1000, seed=7)
    assert len(points) == 200
    assert all(isinstance(p.x, int) and isinstance(p.y, int) for p in points)
    assert points == generate_random_points(200, distribution, low=0, high=1000, seed=7)


def test_generate_uniform_points_within_bounds():
    points = generate_random_points(500, "uniform", low=-10, high=10, seed=1)
    assert all(-10 <= p.x <= 10 and -10 <= p.y <= 10 for p in points)


def test_generate_random_points_invalid():
    with pytest.raises(ValueError):
        generate_random_points(10, "triangle")
    with pytest.raises(ValueError):
        generate_random_points(-1)
