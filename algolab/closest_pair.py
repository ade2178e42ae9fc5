"""Find the closest pair among points on a plane."""

from __future__ import annotations

import math
from itertools import chain, combinations
from typing import Sequence

from algolab.point import Point

__all__ = ["closest_pair", "native", "divide_and_conquer", "closest_pair_between"]

PointPair = tuple[Point, Point]


def _pair_distance(pair: PointPair) -> float:
    return pair[0].distance(pair[1])


def closest_pair(points: Sequence[Point]) -> PointPair:
    """Return the two points that are closest to each other.

    Raises ValueError when fewer than two points are given.
    """
    points = list(points)
    if len(points) < 2:
        raise ValueError("Not enough points")
    return divide_and_conquer(points)


def native(points: Sequence[Point]) -> PointPair:
    """Compare every pair of points and return the closest one."""
    points = list(points)
    if len(points) < 2:
        raise ValueError("Not enough points")
    result: PointPair = (Point(), Point())
    minimal = math.inf
    for first, second in combinations(points, 2):
        distance = first.distance(second)
        if distance < minimal:
            minimal = distance
            result = (first, second)
    return result


def closest_pair_between(
    left_points: Sequence[Point], right_points: Sequence[Point], distance: float
) -> PointPair:
    """Look for a closer pair in the stripe around the middle of two point groups."""
    result: PointPair = (left_points[-1], right_points[0])
    median = (left_points[-1].x + right_points[0].x) / 2
    in_range = sorted(
        (point for point in chain(left_points, right_points) if abs(median - point.x) < distance),
        key=lambda point: point.y,
    )

    best = _pair_distance(result)
    for index, first in enumerate(in_range):
        for second in in_range[index + 1:]:
            if abs(first.y - second.y) > distance:
                break
            current = first.distance(second)
            if current < best:
                result = (first, second)
                best = current
    return result


def divide_and_conquer(points: Sequence[Point]) -> PointPair:
    """Split the points by x, solve both halves and check the stripe between them."""
    if len(points) <= 3:
        return native(points)

    ordered = sorted(points, key=lambda point: point.x)
    half = len(ordered) // 2
    lower, upper = ordered[:half], ordered[half:]

    lower_pair = divide_and_conquer(lower)
    upper_pair = divide_and_conquer(upper)
    lower_distance = _pair_distance(lower_pair)
    upper_distance = _pair_distance(upper_pair)

    middle_pair = closest_pair_between(upper, lower, min(lower_distance, upper_distance))
    middle_distance = _pair_distance(middle_pair)

    if upper_distance >= lower_distance and lower_distance <= middle_distance:
        return lower_pair
    if lower_distance >= upper_distance and upper_distance <= middle_distance:
        return upper_pair
    return middle_pair