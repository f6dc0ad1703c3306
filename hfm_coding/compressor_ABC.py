from abc import ABC, abstractmethod
import io
import os
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface for compressing and decompressing data streams,
    with helpers for whole files and in-memory bytes.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads all bytes from the input stream, compresses them
        and writes the compressed data to the output stream.

        Args:
            input_stream: Input stream with the original data
            output_stream: Output stream for the compressed data

        Returns:
            String with log information
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads compressed data from the input stream, decompresses it
        and writes the original bytes to the output stream.

        Args:
            input_stream: Input stream with the compressed data
            output_stream: Output stream for the decompressed data

        Returns:
            String with log information
        """
        pass

    def _run_on_files(self, operation, input_file: str, output_file: str) -> str:
        # a failed run must not leave an output file that looks valid
        with open(input_file, 'rb') as in_file:
            try:
                with open(output_file, 'wb') as out_file:
                    return operation(in_file, out_file)
            except BaseException:
                if os.path.exists(output_file):
                    os.remove(output_file)
                raise

    def compress_file(self, input_file: str, output_file: str) -> str:
        """
        Helper for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Compression log information
        """
        return self._run_on_files(self.compress, input_file, output_file)

    def decompress_file(self, input_file: str, output_file: str) -> str:
        """
        Helper for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Decompression log information
        """
        return self._run_on_files(self.decompress, input_file, output_file)

    def compress_bytes(self, data: bytes) -> Tuple[bytes, str]:
        """
        Helper for compressing bytes.

        Args:
            data: Input data

        Returns:
            Tuple (compressed data, log information)
        """
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = self.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    def decompress_bytes(self, data: bytes) -> Tuple[bytes, str]:
        """
        Helper for decompressing bytes.

        Args:
            data: Compressed data

        Returns:
            Tuple (decompressed data, log information)
        """
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = self.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
