import numpy as np

from os import PathLike
from typing import Iterable, Sequence

from geometry import Point
from logger import get_logger

log = get_logger(__name__)

DISTRIBUTIONS = ('uniform', 'gaussian', 'circle', 'clusters')


class PointFormatError(ValueError):
    """
    Raised when point data does not follow the `count x1 y1 x2 y2 ...` layout.
    """


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PointFormatError(f'Expected integer {what}, got {token!r}') from None


def parse_points(text: str) -> list[Point]:
    """
    Parse the number of points followed by that many `x y` pairs.
    Tokens may be separated by any whitespace, including newlines.
    """
    tokens = text.split()
    if not tokens:
        raise PointFormatError('Missing number of points')

    n = _to_int(tokens[0], 'number of points')
    if n < 0:
        raise PointFormatError(f'Number of points must be non-negative, got {n}')

    coords = tokens[1:]
    if len(coords) < 2 * n:
        raise PointFormatError(
            f'Expected {n} points, got {len(coords) // 2} complete coordinate pairs'
        )
    if len(coords) > 2 * n:
        log.warning('Ignoring %d tokens after the last point', len(coords) - 2 * n)

    points = []
    for i in range(n):
        x = _to_int(coords[2 * i], f'x of point {i + 1}')
        y = _to_int(coords[2 * i + 1], f'y of point {i + 1}')
        points.append(Point(x, y))
    return points


def read_points(filename: str | PathLike) -> list[Point]:
    with open(filename, 'r', encoding='utf-8') as f:
        points = parse_points(f.read())
    log.info('Loaded %d points from %s', len(points), filename)
    return points


def write_points(filename: str | PathLike, points: Sequence[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f'{len(points)}\n')
        for p in points:
            f.write(f'{p.x} {p.y}\n')


def format_point(p: Point) -> str:
    return str(p)


def format_hull(hull: Iterable[Point]) -> str:
    return ' '.join(format_point(p) for p in hull)


def hull_report(hull: Sequence[Point], area: float) -> str:
    return f'ConvexHull : {format_hull(hull)}\nVolume = {area:g}'


def generate_random_points(
    n: int,
    distribution: str = 'uniform',
    low: int = 0,
    high: int = 1000,
    seed: int | None = 42,
) -> list[Point]:
    """
    Generate n integer points for experiments.

    `uniform` fills the square [low, high]^2, `gaussian` and `circle` are centred
    in it, `clusters` scatters points around five random centres.
    """
    if distribution not in DISTRIBUTIONS:
        raise ValueError(
            f'Unknown distribution {distribution!r}, expected one of {", ".join(DISTRIBUTIONS)}'
        )
    if n < 0:
        raise ValueError(f'Number of points must be non-negative, got {n}')

    rng = np.random.default_rng(seed)
    center = (low + high) / 2
    radius = (high - low) / 2

    if distribution == 'uniform':
        xs = rng.integers(low, high, size=n, endpoint=True)
        ys = rng.integers(low, high, size=n, endpoint=True)
    elif distribution == 'gaussian':
        xs = rng.normal(center, radius / 3, size=n)
        ys = rng.normal(center, radius / 3, size=n)
    elif distribution == 'circle':
        angle = rng.uniform(0, 2 * np.pi, size=n)
        r = radius * np.sqrt(rng.uniform(0, 1, size=n))
        xs = center + r * np.cos(angle)
        ys = center + r * np.sin(angle)
    else:
        n_clusters = 5
        centers = rng.uniform(low + radius / 5, high - radius / 5, size=(n_clusters, 2))
        labels = rng.integers(0, n_clusters, size=n)
        xs = rng.normal(centers[labels, 0], radius / 10)
        ys = rng.normal(centers[labels, 1], radius / 10)

    xs = np.rint(xs).astype(np.int64)
    ys = np.rint(ys).astype(np.int64)
    return [Point(int(x), int(y)) for x, y in zip(xs, ys)]
