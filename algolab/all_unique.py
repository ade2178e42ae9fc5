"""Check that a sequence holds no repeated items."""

from __future__ import annotations

from typing import Sequence

__all__ = ["all_unique"]


def all_unique(items: Sequence[int]) -> bool:
    """Return True if the sequence is non-empty and no item repeats."""
    if not items:
        return False
    seen = set()
    for item in items:
        if item in seen:
            return False
        seen.add(item)
    return True