"""
Input validation for the collinear detectors.

Every failure here is fatal to the detection call: no partial result is
produced and nothing is skipped.
"""

from typing import Iterable

from geometry import Point
from merge_sort import merge_sort


class InvalidInputError(ValueError):
    """Base class for malformed detector input."""
    pass


class NullCollectionError(InvalidInputError):
    pass


class NullPointError(InvalidInputError):
    pass


class DuplicatePointError(InvalidInputError):
    pass


def validate_points(points: Iterable[Point] | None) -> list[Point]:
    """
    Check the point collection and return it as a new list.

    Raises:
        NullCollectionError: if `points` is None
        NullPointError: if any element is None
        DuplicatePointError: if two points have equal coordinates
    """
    if points is None:
        raise NullCollectionError('points cannot be None')

    points = list(points)
    for i, p in enumerate(points):
        if p is None:
            raise NullPointError(f'point at index {i} is None')

    ordered = merge_sort(points)
    for prev, cur in zip(ordered, ordered[1:]):
        if prev == cur:
            raise DuplicatePointError(f'duplicate point found: {cur}')

    return points
