"""
tree.py

Huffman tree construction from a frequency table.
"""


import heapq
from typing import List, Sequence, Tuple

from .models import HuffmanInternal, HuffmanLeaf, HuffmanNode
from .settings import ALPH_SIZE


def make_tree_from_counts(counts: Sequence[int]) -> HuffmanNode:
    """
    Build a Huffman tree from per-symbol counts.

    Heap entries are ordered by weight, then by an order key: a leaf's key is
    its symbol and the n-th merged node's key is ALPH_SIZE + 1 + n, so leaves
    sort before internal nodes of equal weight and internal nodes sort by
    creation. The first node popped becomes the left child.

    Args:
        counts (Sequence[int]): Counts indexed by symbol.

    Returns:
        HuffmanNode: The root. A lone HuffmanLeaf when only one symbol has a
        non-zero count.

    Raises:
        ValueError: If no symbol has a non-zero count.
    """
    heap: List[Tuple[int, int, HuffmanNode]] = [
        (int(count), symbol, HuffmanLeaf(symbol, int(count)))
        for symbol, count in enumerate(counts)
        if count > 0
    ]
    if not heap:
        raise ValueError("At least one symbol must have a non-zero count")
    heapq.heapify(heap)

    next_order = ALPH_SIZE + 1
    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        weight = left_weight + right_weight
        heapq.heappush(heap, (weight, next_order, HuffmanInternal(weight, left, right)))
        next_order += 1

    return heap[0][2]
