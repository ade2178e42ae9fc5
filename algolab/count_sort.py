"""Counting sort for integers within a known range."""

from __future__ import annotations

from typing import Iterable

__all__ = ["count_sort"]


def count_sort(array: Iterable[int], minimum: int, maximum: int) -> list[int]:
    """Return the items sorted, given that each lies in [minimum, maximum].

    Raises ValueError for an item outside that range.
    """
    counts = [0] * (max(maximum - minimum, 0) + 1)
    for item in array:
        offset = item - minimum
        if not 0 <= offset < len(counts):
            raise ValueError(f"item {item} is outside the range [{minimum}, {maximum}]")
        counts[offset] += 1

    result: list[int] = []
    for offset, count in enumerate(counts):
        if count:
            result.extend([offset + minimum] * count)
    return result