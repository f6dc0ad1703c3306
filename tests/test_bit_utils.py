import io

import pytest
from bitarray import bitarray

from hfm_coding.bit_utils.bit_reader import END_OF_STREAM, BitReader
from hfm_coding.bit_utils.bit_writer import BitWriter


def test_partial_byte_is_left_aligned_and_zero_padded():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bit(1)
        writer.write_bit(0)
        writer.write_bit(1)
        assert out.getvalue() == b""
    assert out.getvalue() == b"\xa0"
    assert writer.bits_written == 3
    assert writer.bytes_written == 1


def test_full_byte_is_emitted_before_close():
    out = io.BytesIO()
    writer = BitWriter(out)
    writer.write_bits(bitarray("11001010"))
    assert out.getvalue() == b"\xca"
    writer.close()
    writer.close()
    assert out.getvalue() == b"\xca"


def test_write_bits_takes_prefix_of_sequence():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits([True, True, False, True, True], 4)
        writer.write_bits(bitarray("1111"), 4)
        writer.write_bits([1, 0, 1], 0)
    assert out.getvalue() == b"\xdf"


def test_byte_aligned_stream_gets_no_padding_byte():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits(bitarray("0000000111111110"))
    assert out.getvalue() == b"\x01\xfe"


@pytest.mark.parametrize("bit", [2, -1, "1"])
def test_write_bit_rejects_non_bits(bit):
    with pytest.raises(ValueError):
        BitWriter(io.BytesIO()).write_bit(bit)


def test_write_bits_rejects_bad_length():
    writer = BitWriter(io.BytesIO())
    with pytest.raises(ValueError):
        writer.write_bits([1, 1], 3)
    with pytest.raises(ValueError):
        writer.write_bits([1, 1], -1)


def test_reader_msb_first_then_end_of_stream_forever():
    reader = BitReader(io.BytesIO(b"\xa0\x01"))
    bits = [reader.read_bit() for _ in range(16)]
    assert bits == [1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]
    assert reader.read_bit() is END_OF_STREAM
    assert reader.read_bit() is END_OF_STREAM
    assert reader.bits_read == 16


def test_reader_on_empty_source():
    with BitReader(io.BytesIO(b"")) as reader:
        assert reader.read_bit() is END_OF_STREAM


def test_reader_reads_back_writer_output():
    pattern = bitarray("1011001110001")
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits(pattern)
    reader = BitReader(io.BytesIO(out.getvalue()))
    read = [reader.read_bit() for _ in range(16)]
    assert read[:13] == pattern.tolist()
    assert read[13:] == [0, 0, 0]
