"""Random strings over an alphabet."""

from __future__ import annotations

import random

__all__ = ["DEFAULT_ALPHABET", "random_string"]

DEFAULT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def random_string(size: int, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Return a string of ``size`` characters drawn at random from the alphabet.

    A size of zero or less gives an empty string. Raises ValueError for an
    empty alphabet when characters are needed.
    """
    if size <= 0:
        return ""
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return "".join(random.choices(alphabet, k=size))