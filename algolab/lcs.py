"""Longest common subsequence of two strings."""

from __future__ import annotations

__all__ = ["lcs", "native", "dynamic"]


def lcs(first: str, second: str) -> str:
    """Return a longest common subsequence of the two strings."""
    return dynamic(first, second)


def native(first: str, second: str) -> str:
    """Find the longest common subsequence by plain recursion."""
    if not first or not second:
        return ""
    if first[0] == second[0]:
        return first[0] + native(first[1:], second[1:])
    first_pattern = native(first[1:], second)
    second_pattern = native(first, second[1:])
    return first_pattern if len(first_pattern) > len(second_pattern) else second_pattern


def dynamic(first: str, second: str) -> str:
    """Find the longest common subsequence with a table of prefix lengths."""
    if not first or not second:
        return ""

    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for row, first_char in enumerate(first, 1):
        previous, current = table[row - 1], table[row]
        for column, second_char in enumerate(second, 1):
            if first_char == second_char:
                current[column] = previous[column - 1] + 1
            else:
                current[column] = max(previous[column], current[column - 1])

    result = []
    row, column = len(first), len(second)
    while row and column:
        if first[row - 1] == second[column - 1]:
            result.append(first[row - 1])
            row -= 1
            column -= 1
        elif table[row - 1][column] == table[row][column]:
            row -= 1
        else:
            column -= 1
    return "".join(reversed(result))