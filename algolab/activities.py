"""Activity selection: choose a largest set of mutually compatible activities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

__all__ = ["Activity", "get_max_activities", "native", "greedy"]


@dataclass(frozen=True, order=True)
class Activity:
    """A time interval; ordering is by start time, then by finish time."""

    start: int = 0
    finish: int = 0


def get_max_activities(activities: Sequence[Activity]) -> list[Activity]:
    """Return a subset of mutually compatible activities of maximum size."""
    return greedy(activities)


def _overlap(first: Activity, second: Activity) -> bool:
    return first.finish > second.start and second.finish > first.start


def native(activities: Sequence[Activity]) -> list[Activity]:
    """Find the answer by checking every subset of the activities."""
    items = list(activities)
    result: list[Activity] = []
    for mask in range(1, 1 << len(items)):
        subset = [item for bit, item in enumerate(items) if mask & (1 << bit)]
        if len(subset) <= len(result):
            continue
        compatible = all(
            not _overlap(first, second)
            for index, first in enumerate(subset)
            for second in subset[index + 1:]
        )
        if compatible:
            result = subset
    return result


def greedy(activities: Sequence[Activity]) -> list[Activity]:
    """Find the answer by repeatedly taking the earliest-finishing compatible activity."""
    if not activities:
        return []

    ordered = sorted(activities, key=lambda activity: activity.finish)
    first = ordered[0]

    compatible_index = next(
        (index for index in range(1, len(ordered)) if first.finish <= ordered[index].start),
        None,
    )
    if compatible_index is None or ordered[compatible_index] == first:
        return [first]

    last = ordered[compatible_index]
    result = [first, last]
    for candidate in ordered[compatible_index:]:
        if last.finish <= candidate.start:
            result.append(candidate)
            last = candidate
    return result