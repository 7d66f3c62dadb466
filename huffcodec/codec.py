"""
codec.py

Two-pass Huffman compression and decompression drivers.
"""


from io import BytesIO
from typing import Dict, Optional, Tuple

from .bitstreams import BitInputStream, BitOutputStream
from .codes import make_codings_from_tree
from .errors import BadMagicError, HuffmanFormatError, TruncatedHeaderError, TruncatedPayloadError
from .frequency import read_for_counts
from .header import read_header, write_header
from .logger import CodeLengthLog, CodingLog, CodingProgressStep, Log, LogLevel, Logger
from .models import CodeTable, HuffmanNode
from .settings import BITS_PER_INT, BITS_PER_WORD, DEBUG_HIGH, DEBUG_LOW, PSEUDO_EOF, HuffmanCodecSettings
from .tree import make_tree_from_counts
from .validators import validate_bit_streams, validate_paths, validate_type


def _split_code(code: str) -> Tuple[Tuple[int, int], ...]:
    """Split a code string into (bit count, value) pieces of at most BITS_PER_INT bits."""
    return tuple(
        (len(code[i:i + BITS_PER_INT]), int(code[i:i + BITS_PER_INT], 2))
        for i in range(0, len(code), BITS_PER_INT)
    )


class HuffmanCodec:
    """
    Compresses a byte stream into a self-describing Huffman artifact and back.

    Artifact layout: the 32-bit magic number, the tree header, the code of
    every input byte in order, the PSEUDO_EOF code, then zero padding up to
    the next byte boundary.
    """

    def __init__(self, settings: Optional[HuffmanCodecSettings] = None, logger: Optional[Logger] = None) -> None:
        if settings is None:
            settings = HuffmanCodecSettings()
        validate_type(settings, "Settings", HuffmanCodecSettings)
        if logger is not None:
            validate_type(logger, "Logger", Logger)
        self.settings: HuffmanCodecSettings = settings
        self.logger: Optional[Logger] = logger

    def compress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Compress bit_in into bit_out. bit_in is read twice, so it must support
        reset(). bit_out is closed on return, including when an error is raised.

        Args:
            bit_in (BitInputStream): The data to compress.
            bit_out (BitOutputStream): Receives the compressed artifact.
        """
        validate_bit_streams(bit_in, bit_out)
        self._compress(bit_in, bit_out)

    def _compress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        try:
            counts = read_for_counts(bit_in)
            root = make_tree_from_counts(counts)
            codings = make_codings_from_tree(root)
            self._log_code_lengths(codings, counts)

            bit_out.write_bits(BITS_PER_INT, self.settings.magic)
            write_header(root, bit_out, self.logger)

            bit_in.reset()
            self._write_compressed_bits(codings, bit_in, bit_out, int(counts.sum()) - 1)
        finally:
            bit_out.close()

        if self.logger is not None:
            self.logger.log(CodingLog(bit_in.bits_read, bit_out.bits_written))

    def decompress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Decompress an artifact written by compress(). bit_out is closed on
        return, including when an error is raised.

        Args:
            bit_in (BitInputStream): The compressed artifact.
            bit_out (BitOutputStream): Receives the original data.

        Raises:
            BadMagicError: If the artifact does not start with the magic number.
                Input shorter than 32 bits never raises this; it is reported
                as a TruncatedHeaderError, even for two zero bytes.
            TruncatedStreamError: If the artifact ends before PSEUDO_EOF is decoded.
            CorruptHeaderError: If the tree header names an invalid symbol.
        """
        validate_bit_streams(bit_in, bit_out)
        self._decompress(bit_in, bit_out)

    def _decompress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        try:
            magic = bit_in.read_bits(BITS_PER_INT)
            if magic == -1:
                raise TruncatedHeaderError("Input ended before the magic number could be read")
            if magic != self.settings.magic:
                raise BadMagicError(magic, self.settings.magic)
            root = read_header(bit_in, self.logger)
            self._read_compressed_bits(root, bit_in, bit_out)
        except HuffmanFormatError as e:
            if self.logger is not None:
                self.logger.log(Log("Format_error", LogLevel.ERROR, str(e)))
            raise
        finally:
            bit_out.close()

        if self.logger is not None:
            self.logger.log(CodingLog(bit_in.bits_read, bit_out.bits_written))

    def compress_bytes(self, data: bytes) -> bytes:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.

        Returns:
            bytes: The compressed artifact.
        """
        validate_type(data, "Data", bytes)
        out = BytesIO()
        with BitInputStream(BytesIO(data)) as bit_in:
            self._compress(bit_in, BitOutputStream(out, close_underlying=False))
        return out.getvalue()

    def decompress_bytes(self, data: bytes) -> bytes:
        """
        Decompress an artifact produced by compress_bytes().

        Args:
            data (bytes): The compressed artifact.

        Returns:
            bytes: The original data.
        """
        validate_type(data, "Data", bytes)
        out = BytesIO()
        with BitInputStream(BytesIO(data)) as bit_in:
            self._decompress(bit_in, BitOutputStream(out, close_underlying=False))
        return out.getvalue()

    def _log_code_lengths(self, codings: CodeTable, counts) -> None:
        if self.logger is None or self.settings.debug_level < DEBUG_LOW:
            return
        for symbol in sorted(codings):
            self.logger.log(CodeLengthLog(symbol, int(counts[symbol]), len(codings[symbol])))

    def _write_compressed_bits(self, codings: CodeTable, bit_in: BitInputStream, bit_out: BitOutputStream, total_symbols: int) -> None:
        pieces: Dict[int, Tuple[Tuple[int, int], ...]] = {
            symbol: _split_code(code) for symbol, code in codings.items()
        }
        report_progress = self.logger is not None and self.settings.debug_level >= DEBUG_HIGH

        while True:
            word = bit_in.read_bits(BITS_PER_WORD)
            if word == -1:
                break
            for n, value in pieces[word]:
                bit_out.write_bits(n, value)
            if report_progress:
                self.logger.log(CodingProgressStep("Encoding symbols", total_symbols))

        for n, value in pieces[PSEUDO_EOF]:
            bit_out.write_bits(n, value)

    def _read_compressed_bits(self, root: HuffmanNode, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        report_progress = self.logger is not None and self.settings.debug_level >= DEBUG_HIGH

        # A single-leaf tree spends one bit per symbol and never descends.
        current = root
        while True:
            bit = bit_in.read()
            if bit == -1:
                raise TruncatedPayloadError("Input ended before PSEUDO_EOF was decoded")
            if not root.is_leaf:
                current = current.right if bit else current.left

            if current.is_leaf:
                if current.symbol == PSEUDO_EOF:
                    break
                bit_out.write_bits(BITS_PER_WORD, current.symbol)
                current = root
                if report_progress:
                    self.logger.log(CodingProgressStep("Decoding symbols"))


class HuffmanCodecFile(HuffmanCodec):
    def compress(self, input_path: str, output_path: str) -> None:
        """
        Compress the input file and write the artifact to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
        """
        validate_paths(input_path, output_path)

        with open(input_path, "rb") as inp, open(output_path, "wb") as out:
            with BitInputStream(inp) as bit_in:
                self._compress(bit_in, BitOutputStream(out))

    def decompress(self, compressed_file_path: str, output_file_path: str) -> None:
        """
        Decompress the input file and write the original data to an output file.
        The output file is only created once the whole artifact has decoded, so
        a failed call leaves no partial output behind.

        Args:
            compressed_file_path (str): Path to the compressed file.
            output_file_path (str): Path to the output file.
        """
        validate_paths(compressed_file_path, output_file_path)

        decoded = BytesIO()
        with open(compressed_file_path, "rb") as inp:
            with BitInputStream(inp) as bit_in:
                self._decompress(bit_in, BitOutputStream(decoded, close_underlying=False))

        with open(output_file_path, "wb") as out:
            out.write(decoded.getvalue())
