"""Unbounded Huffman code lengths as a baseline.

Classic Huffman coding over symbol frequencies gives an optimal prefix code
without any limit on code-word length. Package-merge with a limit of at
least ``n - 1`` bits can never be forced below Huffman's depth, so both must
reach the same expected code length; this module provides that reference.

Example
-------
>>> from packmerge.huffman import huffman_code_lengths
>>> huffman_code_lengths([1, 32, 16, 4, 8, 2, 1])
[6, 1, 2, 4, 3, 5, 6]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence
import heapq
from itertools import count

from packmerge.errors import EmptyInputError


@dataclass(order=False)
class HuffmanNode:
    """A node in the Huffman tree.

    Leaf nodes have a non-None ``symbol`` and ``left = right = None``.
    Internal nodes have ``symbol=None`` and two children.
    """

    symbol: Optional[int]
    frequency: float
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None


def build_huffman_tree(frequencies: Sequence[float]) -> HuffmanNode:
    """Build a Huffman tree with a min-heap; ties resolve by insertion order."""

    if len(frequencies) == 0:
        raise EmptyInputError()
    tie_counter = count()
    heap: list[tuple[float, int, HuffmanNode]] = []
    for sym, freq in enumerate(frequencies):
        node = HuffmanNode(symbol=sym, frequency=float(freq))
        heap.append((node.frequency, next(tie_counter), node))
    heapq.heapify(heap)

    while len(heap) > 1:
        freq_a, _, a = heapq.heappop(heap)
        freq_b, _, b = heapq.heappop(heap)
        parent = HuffmanNode(symbol=None, frequency=freq_a + freq_b, left=a, right=b)
        heapq.heappush(heap, (parent.frequency, next(tie_counter), parent))

    return heap[0][2]


def huffman_code_lengths(frequencies: Sequence[float]) -> list[int]:
    """Return unbounded Huffman code lengths, indexed like ``frequencies``.

    A single symbol sits at the root and gets length 0.
    """

    root = build_huffman_tree(frequencies)
    lengths = [0] * len(frequencies)
    # Iterative DFS; degenerate trees can be as deep as n - 1.
    stack: list[tuple[HuffmanNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.symbol is not None:
            lengths[node.symbol] = depth
            continue
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return lengths


__all__ = ["HuffmanNode", "build_huffman_tree", "huffman_code_lengths"]
