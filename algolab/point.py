"""Points on a plane, compared with a small tolerance."""

from __future__ import annotations

import math

__all__ = ["Point", "EPS"]

EPS = 1e-8


def _equal(a: float, b: float) -> bool:
    return abs(a - b) < EPS


class Point:
    """A point with coordinates compared up to ``EPS``.

    Ordering is by x first, then by y. Because equality is tolerant,
    points are not hashable.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def distance(self, other: Point) -> float:
        """Return the Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return _equal(self.x, other.x) and _equal(self.y, other.y)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not _equal(self.x, other.x) or not _equal(self.y, other.y)

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x < other.x or (_equal(self.x, other.x) and self.y < other.y)

    def __le__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x < other.x or (
            _equal(self.x, other.x) and (self.y < other.y or _equal(self.y, other.y))
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"