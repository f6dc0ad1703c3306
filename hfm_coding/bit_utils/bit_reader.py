from typing import BinaryIO, Optional

from bitarray import bitarray

# returned by read_bit once the source is exhausted
END_OF_STREAM = None


class BitReader:
    """
    A class for reading single bits MSB-first from a byte stream.
    The stream is consumed one byte at a time; once it runs out every
    further read returns END_OF_STREAM.
    """

    def __init__(self, in_stream: BinaryIO) -> None:
        """
        Initialize a BitReader over a readable binary stream.

        Args:
            in_stream: Stream positioned at the first payload byte
        """
        self.in_stream = in_stream
        self.bits = bitarray(endian="big")
        self.pos = 0
        self.bits_read = 0
        self.end_of_stream = False

    def read_bit(self) -> Optional[int]:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1), or END_OF_STREAM when the stream is exhausted
        """
        if self.end_of_stream:
            return END_OF_STREAM
        if self.pos == len(self.bits):
            byte = self.in_stream.read(1)
            if not byte:
                self.end_of_stream = True
                return END_OF_STREAM
            self.bits.clear()
            self.bits.frombytes(byte)
            self.pos = 0
        val = self.bits[self.pos]
        self.pos += 1
        self.bits_read += 1
        return val

    def __enter__(self) -> "BitReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        # nothing buffered to release; the stream is owned by the caller
        pass
