"""
errors.py

Format errors raised while decoding a huffcodec artifact.
"""


class HuffmanFormatError(ValueError):
    """Base class for every malformed-artifact condition."""

    kind = "format"


class BadMagicError(HuffmanFormatError):
    """The leading 32 bits are not the expected magic number."""

    kind = "bad_magic"

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Illegal header starts with {found:#010x}, expected {expected:#010x}")


class TruncatedStreamError(HuffmanFormatError):
    """The stream ended before decoding reached a terminal state."""

    kind = "truncated"


class TruncatedHeaderError(TruncatedStreamError):
    kind = "truncated_header"


class TruncatedPayloadError(TruncatedStreamError):
    kind = "truncated_payload"


class CorruptHeaderError(HuffmanFormatError):
    """The tree header names a symbol outside the alphabet."""

    kind = "corrupt_header"
