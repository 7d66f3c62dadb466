"""
codes.py

Code table generation from a Huffman tree.
"""


from typing import Dict, List, Tuple

from .models import CodeTable, HuffmanNode


def make_codings_from_tree(root: HuffmanNode) -> CodeTable:
    """
    Walk the tree depth first and record each leaf's path ('0' = left,
    '1' = right) as the code of its symbol. A tree made of a single leaf
    gets the one-bit code '0'.

    Args:
        root (HuffmanNode): The root of the tree.

    Returns:
        CodeTable: Symbol to code mapping.
    """
    if root.is_leaf:
        return CodeTable({root.symbol: "0"})

    codes: Dict[int, str] = {}
    stack: List[Tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
        else:
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
    return CodeTable(codes)
