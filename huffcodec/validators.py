"""
validators.py

Argument checks shared by the huffcodec drivers. Failures raise ValueError,
kept apart from the HuffmanFormatError family raised for bad artifacts.
"""

import os
from typing import Any

from .bitstreams import BitInputStream, BitOutputStream

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")

def validate_bit_streams(bit_in: Any, bit_out: Any) -> None:
    """Validate the input and output of a stream codec call."""
    validate_type(bit_in, "Input stream", BitInputStream)
    validate_type(bit_out, "Output stream", BitOutputStream)
    if bit_out.closed:
        raise ValueError("Output stream is already closed")

def validate_paths(input_path: Any, output_path: Any) -> None:
    """
    Validate the paths of a file codec call. Both must be strings and the
    input file must exist. The output file is not checked; it is overwritten.
    """
    validate_type(input_path, "Input path", str)
    validate_type(output_path, "Output path", str)
    if not os.path.isfile(input_path):
        raise ValueError(f"Input file does not exist: {input_path}")
