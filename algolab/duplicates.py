"""Detect and list repeated values."""

from __future__ import annotations

from typing import Sequence

__all__ = ["has_duplicates", "get_duplicates"]


def has_duplicates(data: Sequence[int]) -> bool:
    """Return True if some value occurs more than once."""
    seen = set()
    for item in data:
        if item in seen:
            return True
        seen.add(item)
    return False


def get_duplicates(data: Sequence[int], naive: bool = False) -> list[int]:
    """Return each value that occurs more than once, listed once.

    With ``naive`` the values come in order of first appearance, found by
    comparing every pair; otherwise they come sorted, found after sorting.
    """
    result: list[int] = []
    if not data:
        return result

    if naive:
        for index, first in enumerate(data):
            if first in result:
                continue
            if any(first == second for second in data[index + 1:]):
                result.append(first)
        return result

    ordered = sorted(data)
    for current, following in zip(ordered, ordered[1:]):
        if current == following and (not result or result[-1] != current):
            result.append(current)
    return result