"""
File: CodingErrors.py
Author: Hannes Stalder
Description: Exceptions raised by the Huffman encoder, decoder and tree codec.
"""

from typing import Optional


class HuffmanError(ValueError):
    """Base class for all errors caused by bad input to the coder."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class EncodingError(HuffmanError):
    """A symbol of the text has no codeword in the code table."""

    def __init__(self, symbol: str, position: Optional[int] = None):
        message = f"Symbol {symbol!r} is not in the code table"
        if position is not None:
            message += f" (position {position})"
        super().__init__(message, position)
        self.symbol = symbol


class DecodingError(HuffmanError):
    """A bit-string or a serialized tree is truncated, corrupted or malformed."""
