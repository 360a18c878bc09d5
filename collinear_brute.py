import itertools
import logging

from typing import Iterable

from geometry import Point, LineSegment, collinear
from settings import MIN_SEGMENT_POINTS
from validation import validate_points

logger = logging.getLogger(__name__)


class BruteCollinearPoints:
    """
    Reference detector: checks every combination of 4 points.

    Time complexity: O(n^5)
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

        found = {}
        for quad in itertools.combinations(points, MIN_SEGMENT_POINTS):
            p, rest = quad[0], quad[1:]
            slope = p.slope_to(rest[0])
            if any(p.slope_to(q) != slope for q in rest[1:]):
                continue

            # extend to every input point on the same line
            on_line = [q for q in points if collinear(p, rest[0], q)]
            segment = LineSegment(min(on_line), max(on_line))
            found.setdefault(segment, None)

        logger.debug(f"Checked {len(points)} points, found {len(found)} segments")
        return list(found)


def detect(points: Iterable[Point] | None) -> tuple[int, list[LineSegment]]:
    detector = BruteCollinearPoints(points)
    return detector.number_of_segments(), detector.segments()
