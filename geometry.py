from dataclasses import dataclass
from typing import Iterable, Sequence


class PreconditionError(ValueError):
    """
    Raised when an operation receives an empty point set.
    """


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __lt__(self, other):
        # lowest first, then leftmost
        return (self.y, self.x) < (other.y, other.x)

    def __str__(self):
        return f'({self.x}; {self.y})'


def cross(o: Point, a: Point, b: Point) -> int:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def is_left_turn(base: Point, first: Point, second: Point) -> bool:
    """
    True iff base -> first -> second turns counter-clockwise.
    Collinear triples are not a left turn.
    """
    return cross(base, first, second) > 0


def squared_distance(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def down_left_point(points: Iterable[Point]) -> Point:
    """
    Point with minimal y coordinate, ties broken by minimal x.
    Such a point always lies on the convex hull.
    """
    best = None
    for p in points:
        if best is None or p < best:
            best = p
    if best is None:
        raise PreconditionError('Point set is empty')
    return best


def segment_area(first: Point, second: Point, base: Point) -> int:
    """
    Doubled signed area of the trapezoid between segment [first, second]
    and the horizontal line through base.
    """
    return (first.x - second.x) * (
        2 * (min(first.y, second.y) - base.y) + abs(first.y - second.y)
    )


def polygon_area(polygon: Sequence[Point]) -> float:
    """
    Area of a simple polygon given by its vertices in traversal order.

    Contributions are summed as exact integers relative to the down-left
    vertex; the sum is halved only once at the end.
    """
    if len(polygon) <= 2:
        return 0.0

    base = down_left_point(polygon)

    volume = 0
    for i in range(1, len(polygon)):
        volume += segment_area(polygon[i - 1], polygon[i], base)
    volume += segment_area(polygon[-1], polygon[0], base)

    return abs(volume) / 2


def convex_hull_andrew(points: Iterable[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Returns the hull counter-clockwise starting from the leftmost-lowest point,
    without collinear vertices. Time complexity: O(n*log(n)).
    """
    points = sorted(set(points), key=lambda p: (p.x, p.y))
    if len(points) <= 2:
        return points

    lower = []  # lower hull
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []  # upper hull
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]
