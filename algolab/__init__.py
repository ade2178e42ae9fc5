"""Classic algorithms and data structures in plain Python: greedy and dynamic
programming, hashing, graphs, Huffman coding, travelling salesman tours and
small timing tools."""

__version__ = "0.1.0"