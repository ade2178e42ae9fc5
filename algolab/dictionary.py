"""A hash table mapping strings to strings, with separate chaining."""

from __future__ import annotations

from typing import Callable

__all__ = ["hash_1", "hash_2", "hash_3", "Dictionary", "HashFunction"]

HashFunction = Callable[[str], int]

_MASK = 0xFFFFFFFF


def _char_values(text: str) -> list[int]:
    # Bytes are taken as signed chars, then widened to 32 unsigned bits.
    return [(byte - 256 if byte > 127 else byte) & _MASK for byte in text.encode("utf-8")]


def hash_1(text: str) -> int:
    """Sum of the character codes."""
    return sum(_char_values(text)) & _MASK


def hash_2(text: str) -> int:
    """Sum of the character codes weighted by powers of two."""
    result = 0
    for index, value in enumerate(_char_values(text)):
        weight = 1 << index if index < 32 else 0
        result = (result + value * weight) & _MASK
    return result


def hash_3(text: str) -> int:
    """Rotating-shift hash seeded with 7."""
    result = 7
    for value in _char_values(text):
        result = ((((result << 3) | (result >> 2)) & _MASK) + value) & _MASK
    return result


class Dictionary:
    """String-to-string hash table; missing keys read as an empty string."""

    def __init__(self, hash_function: HashFunction | None = None, num_of_buckets: int = 1000) -> None:
        self._hash_function: HashFunction = hash_function if hash_function is not None else hash
        self._buckets: list[list[list[str]]] = []
        self.clear(num_of_buckets)

    def _bucket(self, key: str) -> list[list[str]]:
        return self._buckets[self._hash_function(key) % len(self._buckets)]

    def set(self, key: str, value: str) -> None:
        """Store the value under the key, replacing any previous value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: str) -> str:
        """Return the value stored under the key, or an empty string."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return ""

    def clear(self, num_of_buckets: int = 1000) -> None:
        """Remove every entry and start again with the given number of buckets."""
        if num_of_buckets <= 0:
            raise ValueError("number of buckets must be positive")
        self._buckets = [[] for _ in range(num_of_buckets)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)