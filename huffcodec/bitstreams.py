"""
bitstreams.py

Bit-level readers and writers over byte-oriented binary streams.
"""


from typing import IO

from .settings import BITS_PER_INT


def _check_width(n: int) -> None:
    if not isinstance(n, int) or not 1 <= n <= BITS_PER_INT:
        raise ValueError(f"Bit count must be between 1 and {BITS_PER_INT}")


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes], close_underlying: bool = True) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
            close_underlying (bool): Whether close() also closes the output stream.
        """
        self.out: IO[bytes] = out
        self.close_underlying: bool = close_underlying
        self.current_byte: int = 0
        self.num_bits_filled: int = 0
        self.bits_written: int = 0
        self.closed: bool = False

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_bits(self, n: int, value: int) -> None:
        """
        Write the low n bits of value, most significant bit first.

        Args:
            n (int): Number of bits, 1 to 32.
            value (int): The value holding the bits.
        """
        _check_width(n)
        for shift in range(n - 1, -1, -1):
            self.write((value >> shift) & 1)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream. Calling it twice is a no-op.
        """
        if self.closed:
            return
        self.closed = True
        self.finish()
        if self.close_underlying:
            self.out.close()

    def __enter__(self) -> "BitOutputStream":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes], close_underlying: bool = True) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream. Must be seekable for reset().
            close_underlying (bool): Whether close() also closes the input stream.
        """
        self.inp: IO[bytes] = inp
        self.close_underlying: bool = close_underlying
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0
        self.bits_read: int = 0
        self.closed: bool = False

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        self.bits_read += 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def read_bits(self, n: int) -> int:
        """
        Read the next n bits as an unsigned integer, most significant bit first.

        Args:
            n (int): Number of bits, 1 to 32.

        Returns:
            int: The value read, or -1 if fewer than n bits remain.
        """
        _check_width(n)
        value = 0
        for _ in range(n):
            bit = self.read()
            if bit == -1:
                return -1
            value = (value << 1) | bit
        return value

    def reset(self) -> None:
        """
        Rewind to the start of the underlying stream.
        """
        self.inp.seek(0)
        self.current_byte = 0
        self.num_bits_remaining = 0
        self.bits_read = 0

    def close(self) -> None:
        """
        Close the underlying input stream. Calling it twice is a no-op.
        """
        if self.closed:
            return
        self.closed = True
        if self.close_underlying:
            self.inp.close()

    def __enter__(self) -> "BitInputStream":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
