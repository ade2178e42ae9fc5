"""Timing of container operations and of sorting."""

from __future__ import annotations

import random
import sys
import time
from collections import deque
from typing import Sequence

__all__ = [
    "shuffled_sequence",
    "random_sequence",
    "run_containers",
    "measure_sort",
    "containers_main",
    "sort_timing_main",
]

_SEED = 1


def shuffled_sequence(size: int, start: int = 0) -> list[int]:
    """Return the numbers start .. start + size - 1 in random order."""
    if size < 0:
        raise ValueError("size must not be negative")
    result = list(range(start, start + size))
    random.shuffle(result)
    return result


def random_sequence(size: int, maximum: int) -> list[int]:
    """Return ``size`` numbers from 0 to ``maximum``; the same on every call."""
    if size < 0:
        raise ValueError("size must not be negative")
    generator = random.Random(_SEED)
    return [generator.randint(0, maximum) for _ in range(size)]


def _timed(action) -> float:
    begin = time.perf_counter()
    action()
    return time.perf_counter() - begin


def run_containers(n: int) -> list[str]:
    """Time insertion and search in a list, a deque and a set; return report lines."""
    items = shuffled_sequence(n)
    lines: list[str] = []

    vector: list[int] = []
    lines.append(f"vector insert back time: {_timed(lambda: [vector.append(i) for i in items]):.6f}")
    vector.clear()
    lines.append(f"vector insert begin time: {_timed(lambda: [vector.insert(0, i) for i in items]):.6f}")

    linked: deque[int] = deque()
    lines.append(f"list insert back time: {_timed(lambda: [linked.append(i) for i in items]):.6f}")
    linked.clear()
    lines.append(f"list insert begin time: {_timed(lambda: [linked.appendleft(i) for i in items]):.6f}")

    tree: set[int] = set()
    lines.append(f"set insert time: {_timed(lambda: [tree.add(i) for i in items]):.6f}")

    m = n // 10
    wanted = random_sequence(m, 2 * m)
    for name, container, kind in (
        ("vector", vector, "linear"),
        ("list", linked, "linear"),
        ("set", tree, "binary"),
    ):
        found = 0

        def search(container=container) -> None:
            nonlocal found
            found = sum(1 for item in wanted if item in container)

        elapsed = _timed(search)
        lines.append(f"{name} {kind} search time: {elapsed:.6f}")
        lines.append(f"{name} {kind} search found {found} items")
    return lines


def measure_sort(size: int) -> float:
    """Sort ``size`` random numbers and return the seconds it took."""
    if size < 0:
        raise ValueError("size must not be negative")
    data = [random.randrange(2 ** 31) for _ in range(size)]
    begin = time.perf_counter()
    data.sort()
    return time.perf_counter() - begin


def containers_main(argv: Sequence[str] | None = None) -> int:
    """Print container timings for N items (first argument, default 10)."""
    args = list(sys.argv[1:] if argv is None else argv)
    n = int(args[0]) if args else 10
    for line in run_containers(n):
        print(line)
    return 0


def sort_timing_main(argv: Sequence[str] | None = None) -> int:
    """Print sort timings for 10 up to 10**max_power items (default 6)."""
    args = list(sys.argv[1:] if argv is None else argv)
    max_power = int(args[0]) if args else 6
    for power in range(1, max_power + 1):
        size = 10 ** power
        print(f"N: {size}, time: {measure_sort(size)}")
    return 0