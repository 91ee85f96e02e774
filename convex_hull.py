from functools import cmp_to_key
from typing import Iterable

from geometry import (
    Point, PreconditionError, down_left_point, is_left_turn, squared_distance
)
from logger import get_logger

log = get_logger(__name__)


class GrahamScan:
    @staticmethod
    def angular_sort(pivot: Point, points: Iterable[Point]) -> list[Point]:
        """
        Sort points by polar angle around pivot, counter-clockwise.
        Every copy of the pivot is left out; the input is not modified.

        The pivot is the down-left point, so all other points lie in the
        half-plane above it and the orientation test is a total order on rays.
        Points on the same ray are ordered by distance from the pivot,
        farthest last.
        """
        def compare(a: Point, b: Point) -> int:
            if is_left_turn(pivot, a, b):
                return -1
            if is_left_turn(pivot, b, a):
                return 1
            return squared_distance(pivot, a) - squared_distance(pivot, b)

        rest = [p for p in points if p != pivot]
        return sorted(rest, key=cmp_to_key(compare))

    def compute_hull(self, points: Iterable[Point]) -> list[Point]:
        """
        Graham scan. Returns hull vertices counter-clockwise,
        starting from the down-left point, without collinear vertices.

        Sets of at most two distinct points are returned as is.
        Time complexity: O(n*log(n)).
        """
        distinct = list(dict.fromkeys(points))
        if not distinct:
            raise PreconditionError('Cannot build convex hull of an empty point set')
        if len(distinct) <= 2:
            return distinct

        pivot = down_left_point(distinct)
        ordered = self.angular_sort(pivot, distinct)
        log.debug('Scanning %d points around pivot %s', len(distinct), pivot)

        stack = [pivot]
        for p in ordered:
            # keep the chain strictly convex
            while len(stack) >= 2 and not is_left_turn(stack[-2], stack[-1], p):
                stack.pop()
            stack.append(p)

        log.debug('Convex hull has %d of %d points', len(stack), len(distinct))
        return stack


def compute_convex_hull(points: Iterable[Point]) -> list[Point]:
    return GrahamScan().compute_hull(points)
