import logging

from typing import Iterable

from geometry import Point, LineSegment
from merge_sort import merge_sort
from settings import MIN_SEGMENT_POINTS
from validation import validate_points

logger = logging.getLogger(__name__)


def extract_segments(pivot: Point, others: list[Point]) -> list[LineSegment]:
    """
    Find segments through `pivot` in `others`, which must be sorted by slope
    to `pivot` and must not contain `pivot` itself.

    Every maximal run of at least MIN_SEGMENT_POINTS - 1 points with equal
    slope forms a segment together with the pivot. A segment is reported only
    from its smallest point, so each one comes out exactly once when every
    point of the set takes its turn as pivot.
    """
    segments = []
    n = len(others)
    i = 0
    while i < n:
        slope = pivot.slope_to(others[i])
        offset = 1
        while i + offset < n and pivot.slope_to(others[i + offset]) == slope:
            offset += 1

        if offset < MIN_SEGMENT_POINTS - 1:
            i += 1
            continue

        # run is in slope order, not natural order
        lowest = highest = pivot
        for p in others[i:i + offset]:
            if p < lowest:
                lowest = p
            elif p > highest:
                highest = p

        if lowest == pivot:
            segments.append(LineSegment(lowest, highest))
        i += offset

    return segments


class FastCollinearPoints:
    """
    Sorting-based search for maximal segments of 4 or more collinear points.

    For each point p, the other points are stably sorted by the slope they
    make with p; points collinear with p then sit next to each other.

    Time complexity: O(n^2*log(n))
    """

    def __init__(self, points: Iterable[Point] | None):
        self._segments: list[LineSegment] = self.compute_segments(points)

    def number_of_segments(self) -> int:
        return len(self._segments)

    def segments(self) -> list[LineSegment]:
        return list(self._segments)

    @staticmethod
    def compute_segments(points: Iterable[Point] | None) -> list[LineSegment]:
        points = validate_points(points)
        if len(points) < MIN_SEGMENT_POINTS:
            return []

        ordered = merge_sort(points)

        segments = []
        for idx, pivot in enumerate(ordered):
            others = ordered[:idx] + ordered[idx + 1:]
            by_slope = merge_sort(others, pivot.slope_order())
            segments.extend(extract_segments(pivot, by_slope))

        logger.debug(f"Scanned {len(ordered)} pivots, found {len(segments)} segments")
        return segments


def detect(points: Iterable[Point] | None) -> tuple[int, list[LineSegment]]:
    detector = FastCollinearPoints(points)
    return detector.number_of_segments(), detector.segments()
