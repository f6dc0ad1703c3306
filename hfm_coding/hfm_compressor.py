"""
HFM Huffman compressor.

The container stores symbol frequencies, not codewords: the decoder
rebuilds exactly the encoder's code table from them.
"""

from typing import BinaryIO

from hfm_coding.bit_utils.bit_reader import END_OF_STREAM, BitReader
from hfm_coding.bit_utils.bit_writer import BitWriter
from hfm_coding.compressor_ABC import Compressor
from hfm_coding.container import (
    HEADER_SIZE,
    ENTRY_SIZE,
    read_dictionary,
    read_header,
    write_dictionary,
    write_header,
)
from hfm_coding.errors import TruncatedStreamError
from hfm_coding.frequency import count_frequencies
from hfm_coding.huffman_builder import build_from_frequencies
from hfm_coding.huffman_table import ROOT


class HuffmanCompressor(Compressor):
    """Whole-buffer Huffman compressor writing the HFM container format."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.log = []

    def _report(self, message: str) -> None:
        self.log.append(message)
        if self.verbose:
            print(message)

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Compresses everything left in input_stream into output_stream.
        Returns log information.
        """
        self.log = []
        data = input_stream.read()

        freqs = count_frequencies(data)
        table = build_from_frequencies(freqs)
        code_map = table.build_code_map()
        self._report(f"Original size: {len(data)} bytes, {len(table)} distinct symbols")

        write_header(output_stream, len(data), len(table))
        write_dictionary(output_stream, table)
        with BitWriter(output_stream) as writer:
            for byte in data:
                writer.write_bits(code_map[byte])

        compressed_size = HEADER_SIZE + len(table) * ENTRY_SIZE + writer.bytes_written
        self._report(
            f"Payload: {writer.bits_written} bits in {writer.bytes_written} bytes"
        )
        self._report(f"Compressed size: {compressed_size} bytes")
        diff = len(data) - compressed_size
        if diff > 0:
            ratio = diff / len(data) * 100
            self._report(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            self._report(f"Size increased by {-diff} bytes")
        return '\n'.join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Decompresses an HFM container from input_stream into output_stream.
        Nothing is written unless the whole payload decodes.
        Returns log information.
        """
        self.log = []
        header = read_header(input_stream)
        freqs = read_dictionary(input_stream, header.dict_size)
        table = build_from_frequencies(freqs)
        trie = table.build_decode_trie()
        self._report(
            f"Original size: {header.original_size} bytes, "
            f"{header.dict_size} distinct symbols"
        )

        decoded = bytearray()
        node = ROOT
        with BitReader(input_stream) as reader:
            while len(decoded) < header.original_size:
                bit = reader.read_bit()
                if bit is END_OF_STREAM:
                    raise TruncatedStreamError(
                        f"Payload ended after {len(decoded)} of "
                        f"{header.original_size} bytes"
                    )
                node = trie.step(node, bit)
                if trie.is_leaf(node):
                    decoded.append(trie.symbol[node])
                    node = ROOT

        output_stream.write(decoded)
        self._report(f"Decoded {len(decoded)} bytes from {reader.bits_read} payload bits")
        return '\n'.join(self.log)


def encode(data: bytes) -> bytes:
    """Compresses bytes into an HFM container."""
    compressed, _ = HuffmanCompressor().compress_bytes(data)
    return compressed


def decode(container: bytes) -> bytes:
    """Restores the original bytes from an HFM container."""
    decompressed, _ = HuffmanCompressor().decompress_bytes(container)
    return decompressed
