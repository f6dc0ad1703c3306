"""
Exceptions raised by the HFM Huffman compressor.
"""


class HuffmanError(Exception):
    """Base class for every error raised while encoding or decoding."""


class InvalidInputError(HuffmanError, ValueError):
    """
    The frequency table cannot produce a code: it is empty,
    every count is zero or a symbol is not a byte value.
    """


class FormatError(HuffmanError, ValueError):
    """The container is not an HFM file or its contents are inconsistent."""


class TruncatedStreamError(HuffmanError, EOFError):
    """The container ended before all of its data could be read."""


class UnknownSymbolError(HuffmanError, KeyError):
    """A symbol has no codeword in the table it was looked up in."""

    def __str__(self):
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""
