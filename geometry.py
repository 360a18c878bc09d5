from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Callable

NEGATIVE_INFINITY = float('-inf')
POSITIVE_INFINITY = float('inf')

Slope = Fraction | float


@total_ordering
@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self):
        return f'({self.x}, {self.y})'

    def __lt__(self, other):
        return self.compare_to(other) < 0

    def compare_to(self, other: 'Point') -> int:
        """
        Natural order: by y, ties broken by x.
        """
        if self.y != other.y:
            return -1 if self.y < other.y else 1
        if self.x != other.x:
            return -1 if self.x < other.x else 1
        return 0

    def slope_to(self, other: 'Point') -> Slope:
        """
        Slope of the line through this point and `other`.

        Finite slopes are exact rationals, so equal slopes compare equal
        without any tolerance. A point has slope -inf to itself, vertical
        lines have slope +inf, and horizontal lines have slope 0.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        if dx == 0 and dy == 0:
            return NEGATIVE_INFINITY
        if dx == 0:
            return POSITIVE_INFINITY
        if dy == 0:
            return Fraction(0)
        return Fraction(dy, dx)

    def slope_order(self) -> Callable[['Point', 'Point'], int]:
        """
        Comparator ordering two points by the slope they make with this one.
        """
        def compare(a: Point, b: Point) -> int:
            slope_a = self.slope_to(a)
            slope_b = self.slope_to(b)
            return (slope_a > slope_b) - (slope_a < slope_b)

        return compare


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    def __post_init__(self):
        assert self.start <= self.end, f'Segment endpoints out of order: {self.start}, {self.end}'

    def __str__(self):
        return f'{self.start} -> {self.end}'


def cross(o: Point, a: Point, b: Point) -> int:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def collinear(p: Point, p0: Point | None, p1: Point | None) -> bool:
    """
    Collinearity check for segments [p, p0] and [p, p1].
    Coordinates are integers, so the test is exact.
    """
    if p0 is None or p1 is None:
        return False
    return cross(p, p0, p1) == 0
