"""Huffman coding of text over a weighted alphabet."""

from __future__ import annotations

import heapq
import sys
from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import Mapping, Sequence

__all__ = [
    "Alphabet",
    "CodeTable",
    "default_alphabet",
    "get_alphabet",
    "TreeNode",
    "build_tree",
    "code_table",
    "HuffmanCoder",
    "main",
]

Alphabet = dict[str, float]
CodeTable = dict[str, str]


def default_alphabet() -> Alphabet:
    """Return a universal alphabet: lower case letters weigh most, then upper case."""
    alphabet: Alphabet = {}
    for code in range(ord("a"), ord("z") + 1):
        alphabet[chr(code)] = 5.0
    for code in range(ord("A"), ord("Z") + 1):
        alphabet[chr(code)] = 2.0
    for symbol in " \"'0123456789!?@#$%^&*()-+,.~<>`\t\n\r":
        alphabet[symbol] = 1.0
    return alphabet


def get_alphabet(text: str) -> Alphabet:
    """Return the alphabet of the text, weighted by how often each symbol occurs."""
    return {symbol: float(weight) for symbol, weight in sorted(Counter(text).items())}


@dataclass
class TreeNode:
    """A node of a Huffman tree; leaves carry a symbol."""

    symbol: str = ""
    weight: float = 0.0
    left: TreeNode | None = None
    right: TreeNode | None = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None


def build_tree(alphabet: Mapping[str, float]) -> TreeNode | None:
    """Build a Huffman tree from the alphabet; None for an empty alphabet.

    A single-symbol alphabet gets a root with the symbol as its left child,
    so that the symbol has a one-bit code.
    """
    if not alphabet:
        return None
    order = count()
    heap = [(weight, next(order), TreeNode(symbol, weight)) for symbol, weight in sorted(alphabet.items())]
    heapq.heapify(heap)
    if len(heap) == 1:
        leaf = heap[0][2]
        return TreeNode("", leaf.weight, left=leaf)
    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        weight = left_weight + right_weight
        heapq.heappush(heap, (weight, next(order), TreeNode("", weight, left, right)))
    return heap[0][2]


def code_table(root: TreeNode | None) -> CodeTable:
    """Return the code of every leaf symbol: '0' for a left turn, '1' for a right turn."""
    table: CodeTable = {}
    stack = [(root, "")] if root is not None else []
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            table[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return table


class HuffmanCoder:
    """Encode and decode strings with the Huffman code of an alphabet."""

    def __init__(self, alphabet: Mapping[str, float] | None = None) -> None:
        self._tree = build_tree(default_alphabet() if alphabet is None else alphabet)
        self._table = code_table(self._tree)

    @classmethod
    def from_text(cls, text: str) -> HuffmanCoder:
        """Return a coder for the alphabet of the given text."""
        return cls(get_alphabet(text))

    @property
    def table(self) -> CodeTable:
        """The code of every symbol."""
        return dict(self._table)

    def encode(self, text: str) -> str:
        """Return the code string of the text.

        Raises ValueError for a symbol outside the alphabet.
        """
        try:
            return "".join(self._table[symbol] for symbol in text)
        except KeyError as error:
            raise ValueError(f"Cannot encode character {error.args[0]}") from None

    def decode(self, code: str) -> str:
        """Return the text for a code string.

        Raises ValueError for a character other than '0' or '1', or a code
        that leads outside the tree. Trailing bits that end inside the tree
        are ignored.
        """
        if not code:
            return ""
        if self._tree is None:
            raise ValueError("Failed to decode")
        result = []
        current = self._tree
        for bit in code:
            if bit == "0":
                following = current.left
            elif bit == "1":
                following = current.right
            else:
                raise ValueError(f"Incorrect code character: {bit}")
            if following is None:
                raise ValueError("Failed to decode")
            current = following
            if current.is_leaf():
                result.append(current.symbol)
                current = self._tree
        return "".join(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Read lines from standard input and show each one encoded and decoded."""
    coder = HuffmanCoder()
    while True:
        print("Input the string to encode: ", end="", flush=True)
        line = sys.stdin.readline()
        text = line[:-1] if line.endswith("\n") else line
        if not text:
            break
        try:
            encoded = coder.encode(text)
            print(f"Encoded string is: {encoded}")
            decoded = coder.decode(encoded)
            print(f"Decoded string is: {decoded}")
        except ValueError as error:
            print(f"Error: {error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())