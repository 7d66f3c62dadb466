"""
settings.py

Format constants and codec settings for huffcodec.
"""


BITS_PER_WORD = 8
BITS_PER_INT = 32

ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE

# One bit wider than a word so that PSEUDO_EOF fits.
SYMBOL_BITS = BITS_PER_WORD + 1

HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4


class HuffmanCodecSettings:
    """
    Settings for the Huffman codec.
    """

    def __init__(self, magic: int = HUFF_TREE, debug_level: int = 0) -> None:
        if not isinstance(magic, int) or not 0 <= magic < (1 << BITS_PER_INT):
            raise ValueError("magic must be an unsigned 32-bit integer")
        if not isinstance(debug_level, int) or debug_level < 0:
            raise ValueError("debug_level must be a non-negative integer")
        self.magic: int = magic
        self.debug_level: int = debug_level
