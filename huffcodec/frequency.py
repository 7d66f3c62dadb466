"""
frequency.py

Symbol frequency counting for the first compression pass.
"""


import numpy as np

from .bitstreams import BitInputStream
from .settings import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF

# Words buffered before they are added to the running counts.
COUNT_CHUNK_SIZE = 4096


def count_bytes(data: bytes) -> np.ndarray:
    """
    Count the occurrences of every byte value in data.

    Args:
        data (bytes): The input data.

    Returns:
        np.ndarray: Counts indexed by symbol, of length ALPH_SIZE + 1. The
        PSEUDO_EOF slot is always 1.
    """
    counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=ALPH_SIZE + 1).astype(np.int64)
    counts[PSEUDO_EOF] = 1
    return counts


def _add_chunk(counts: np.ndarray, chunk: bytearray) -> None:
    counts += np.bincount(np.frombuffer(bytes(chunk), dtype=np.uint8), minlength=ALPH_SIZE + 1)


def read_for_counts(bit_in: BitInputStream) -> np.ndarray:
    """
    Read 8-bit words from bit_in until it is exhausted and count them.
    Words are counted COUNT_CHUNK_SIZE at a time, so only one chunk of the
    input is held in memory. The stream is left at its end; call reset()
    before reading it again.

    Args:
        bit_in (BitInputStream): The input positioned at its start.

    Returns:
        np.ndarray: Counts indexed by symbol, as returned by count_bytes.
    """
    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    chunk = bytearray()
    word = bit_in.read_bits(BITS_PER_WORD)
    while word != -1:
        chunk.append(word)
        if len(chunk) == COUNT_CHUNK_SIZE:
            _add_chunk(counts, chunk)
            chunk.clear()
        word = bit_in.read_bits(BITS_PER_WORD)
    _add_chunk(counts, chunk)
    counts[PSEUDO_EOF] = 1
    return counts
