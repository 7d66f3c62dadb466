"""
header.py

Serialization of the Huffman tree that prefixes every compressed payload.

The tree is written in preorder. An internal node is a single 0 bit followed
by its left then right subtree; a leaf is a single 1 bit followed by its
symbol as a SYMBOL_BITS wide unsigned integer.
"""


from typing import List, Optional

from .bitstreams import BitInputStream, BitOutputStream
from .errors import CorruptHeaderError, TruncatedHeaderError
from .logger import HeaderLog, Logger
from .models import HuffmanInternal, HuffmanLeaf, HuffmanNode
from .settings import PSEUDO_EOF, SYMBOL_BITS


def write_header(root: HuffmanNode, bit_out: BitOutputStream, logger: Optional[Logger] = None) -> None:
    """
    Write the tree rooted at root to bit_out.

    Args:
        root (HuffmanNode): The root of the tree.
        bit_out (BitOutputStream): The output bit stream.
        logger (Optional[Logger]): Logger instance for logging.
    """
    bits_before = bit_out.bits_written
    leaf_count = 0
    stack: List[HuffmanNode] = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            bit_out.write(1)
            bit_out.write_bits(SYMBOL_BITS, node.symbol)
            leaf_count += 1
        else:
            bit_out.write(0)
            stack.append(node.right)
            stack.append(node.left)

    if logger is not None:
        logger.log(HeaderLog(leaf_count, bit_out.bits_written - bits_before))


def read_header(bit_in: BitInputStream, logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Read a tree written by write_header. Rebuilt nodes carry weight 0.

    Args:
        bit_in (BitInputStream): The input bit stream, positioned at the header.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanNode: The root of the rebuilt tree.

    Raises:
        TruncatedHeaderError: If the stream ends inside the header.
        CorruptHeaderError: If a leaf symbol is greater than PSEUDO_EOF.
    """
    bits_before = bit_in.bits_read
    leaf_count = 0
    # Children collected so far for each internal node still being read.
    pending: List[List[HuffmanNode]] = []
    while True:
        bit = bit_in.read()
        if bit == -1:
            raise TruncatedHeaderError("Input ended while reading the tree header")
        if bit == 0:
            pending.append([])
            continue

        symbol = bit_in.read_bits(SYMBOL_BITS)
        if symbol == -1:
            raise TruncatedHeaderError("Input ended while reading a leaf symbol")
        if symbol > PSEUDO_EOF:
            raise CorruptHeaderError(f"Leaf symbol {symbol} is outside the alphabet")
        leaf_count += 1

        node: HuffmanNode = HuffmanLeaf(symbol)
        while pending:
            pending[-1].append(node)
            if len(pending[-1]) < 2:
                break
            left, right = pending.pop()
            node = HuffmanInternal(0, left, right)
        else:
            if logger is not None:
                logger.log(HeaderLog(leaf_count, bit_in.bits_read - bits_before))
            return node
