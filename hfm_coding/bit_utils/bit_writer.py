from typing import BinaryIO, Iterable, Optional

from bitarray import bitarray


class BitWriter:
    """
    A class for writing bits MSB-first into a byte stream.
    Complete bytes are sent to the stream as soon as they are filled,
    the last partial byte is padded with zeros on close.
    """

    def __init__(self, out_stream: BinaryIO) -> None:
        """
        Initialize a new BitWriter over a writable binary stream.

        Args:
            out_stream: Stream that receives the packed bytes
        """
        self.out_stream = out_stream
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.bytes_written = 0
        self.closed = False

    def write_bit(self, bit: int) -> None:
        """
        Write a single bit.

        Args:
            bit: 0 or 1

        Raises:
            ValueError: If bit is not 0 or 1
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.bits.append(bit)
        self.bits_written += 1
        if len(self.bits) == 8:
            self._emit_full_bytes()

    def write_bits(self, bits: Iterable, length: Optional[int] = None) -> None:
        """
        Write the first length bits of a bit sequence.

        Args:
            bits: bitarray or any sequence of 0/1 (or booleans)
            length: Number of bits to take, the whole sequence by default

        Raises:
            ValueError: If length is negative or longer than the sequence
        """
        if not isinstance(bits, bitarray):
            bits = bitarray([bool(b) for b in bits], endian="big")
        if length is None:
            length = len(bits)
        if length < 0:
            raise ValueError("Length cannot be negative")
        if length > len(bits):
            raise ValueError(
                f"Length {length} exceeds sequence of {len(bits)} bits"
            )
        if length == 0:
            return
        self.bits.extend(bits[:length])
        self.bits_written += length
        if len(self.bits) >= 8:
            self._emit_full_bytes()

    def _emit_full_bytes(self) -> None:
        full = len(self.bits) // 8 * 8
        chunk = self.bits[:full].tobytes()
        self.out_stream.write(chunk)
        self.bytes_written += len(chunk)
        del self.bits[:full]

    def byte_align(self) -> None:
        """Pad the pending bits with zeros up to a byte boundary and emit them."""
        if len(self.bits) == 0:
            return
        self.bits.fill()
        self._emit_full_bytes()

    def close(self) -> None:
        """
        Flush the last partial byte. The underlying stream stays open,
        it belongs to whoever created it.
        """
        if self.closed:
            return
        self.byte_align()
        self.closed = True

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
