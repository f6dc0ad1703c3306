"""
HFM container layout.

Header (big-endian):
magic(3) version(1) original_size(u64) dict_size(i32)
followed by dict_size entries of symbol(u8) frequency(u64)
and the bit-packed payload.
"""

import struct
from typing import BinaryIO, Dict, NamedTuple

from hfm_coding.errors import FormatError, TruncatedStreamError
from hfm_coding.huffman_table import HuffmanTable

MAGIC = b"HFM"  # 3 bytes
VERSION = 1  # 1 byte
MAX_SYMBOLS = 256

HEADER_FMT = ">3sBQi"
HEADER_SIZE = struct.calcsize(HEADER_FMT)
ENTRY_FMT = ">BQ"
ENTRY_SIZE = struct.calcsize(ENTRY_FMT)


class ContainerHeader(NamedTuple):
    version: int
    original_size: int
    dict_size: int


def write_header(f: BinaryIO, original_size: int, dict_size: int) -> None:
    f.write(struct.pack(HEADER_FMT, MAGIC, VERSION, original_size, dict_size))


def read_header(f: BinaryIO) -> ContainerHeader:
    signature = f.read(len(MAGIC) + 1)
    if len(signature) < len(MAGIC) + 1 or signature[:len(MAGIC)] != MAGIC:
        raise FormatError("Bad magic number (not an HFM file)")
    if signature[len(MAGIC)] != VERSION:
        raise FormatError(f"Unsupported version: {signature[len(MAGIC)]}")

    rest = f.read(HEADER_SIZE - len(signature))
    if len(rest) != HEADER_SIZE - len(signature):
        raise TruncatedStreamError("Malformed stream: header too short")
    _, version, original_size, dict_size = struct.unpack(
        HEADER_FMT, signature + rest
    )
    if not 0 < dict_size <= MAX_SYMBOLS:
        raise FormatError(f"Invalid dictionary size: {dict_size}")
    return ContainerHeader(version, original_size, dict_size)


def write_dictionary(f: BinaryIO, table: HuffmanTable) -> None:
    """Writes (symbol, frequency) pairs in the table's symbol order."""
    for symbol, freq, _ in table:
        f.write(struct.pack(ENTRY_FMT, symbol, freq))


def read_dictionary(f: BinaryIO, dict_size: int) -> Dict[int, int]:
    data = f.read(dict_size * ENTRY_SIZE)
    if len(data) != dict_size * ENTRY_SIZE:
        raise TruncatedStreamError(
            f"Malformed stream: dictionary needs {dict_size * ENTRY_SIZE} bytes, "
            f"got {len(data)}"
        )
    freqs = {}
    for symbol, freq in struct.iter_unpack(ENTRY_FMT, data):
        if symbol in freqs:
            raise FormatError(f"Symbol {symbol} appears twice in the dictionary")
        if freq == 0:
            raise FormatError(f"Symbol {symbol} has zero frequency")
        freqs[symbol] = freq
    return freqs
