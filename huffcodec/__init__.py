"""
huffcodec: A Python library for lossless two-pass Huffman compression and decompression.
"""

from .codec import (
    HuffmanCodec,
    HuffmanCodecFile,
)

from .bitstreams import (
    BitOutputStream,
    BitInputStream,
)

from .models import (
    HuffmanNode,
    HuffmanLeaf,
    HuffmanInternal,
    CodeTable,
)

from .frequency import (
    count_bytes,
    read_for_counts,
)

from .tree import make_tree_from_counts

from .codes import make_codings_from_tree

from .header import (
    write_header,
    read_header,
)

from .errors import (
    HuffmanFormatError,
    BadMagicError,
    TruncatedStreamError,
    TruncatedHeaderError,
    TruncatedPayloadError,
    CorruptHeaderError,
)

from .settings import (
    ALPH_SIZE,
    PSEUDO_EOF,
    HUFF_TREE,
    HuffmanCodecSettings,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    HeaderLog,
    CodeLengthLog,
    CodingLog,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "HuffmanCodec",
    "HuffmanCodecFile",

    "BitOutputStream",
    "BitInputStream",

    "HuffmanNode",
    "HuffmanLeaf",
    "HuffmanInternal",
    "CodeTable",

    "count_bytes",
    "read_for_counts",
    "make_tree_from_counts",
    "make_codings_from_tree",
    "write_header",
    "read_header",

    "HuffmanFormatError",
    "BadMagicError",
    "TruncatedStreamError",
    "TruncatedHeaderError",
    "TruncatedPayloadError",
    "CorruptHeaderError",

    "ALPH_SIZE",
    "PSEUDO_EOF",
    "HUFF_TREE",
    "HuffmanCodecSettings",

    "Logger",
    "Log",
    "LogLevel",
    "HeaderLog",
    "CodeLengthLog",
    "CodingLog",
    "CodingProgressStep",
]
