"""Recover a password from its SHA-256 hash by exhaustive search."""

from __future__ import annotations

from itertools import product

from algolab.sha256 import sha256

__all__ = ["bruteforce"]


def bruteforce(password_hash: str, alphabet: str, max_length: int) -> str:
    """Try every string over the alphabet of length 1..max_length.

    Returns the string whose hash equals ``password_hash``, or an empty
    string if none does.
    """
    if not alphabet:
        return ""
    for length in range(1, max_length + 1):
        for letters in product(alphabet, repeat=length):
            candidate = "".join(letters)
            if sha256(candidate) == password_hash:
                return candidate
    return ""