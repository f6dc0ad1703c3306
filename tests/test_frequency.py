import pytest

from hfm_coding.errors import InvalidInputError
from hfm_coding.frequency import count_frequencies, sorted_symbols, symbol_order_key


def test_count_frequencies():
    assert count_frequencies(b"abracadabra") == {
        ord("a"): 5, ord("b"): 2, ord("r"): 2, ord("c"): 1, ord("d"): 1,
    }


def test_count_frequencies_empty():
    assert count_frequencies(b"") == {}


def test_sorted_by_count_descending_then_symbol_ascending():
    freqs = {0x42: 3, 0x41: 3, 0x10: 1, 0xFF: 7, 0x00: 1}
    assert sorted_symbols(freqs) == [
        (0xFF, 7), (0x41, 3), (0x42, 3), (0x00, 1), (0x10, 1),
    ]


def test_order_does_not_depend_on_insertion_order():
    a = {1: 4, 2: 4, 3: 9}
    b = {3: 9, 2: 4, 1: 4}
    assert sorted_symbols(a) == sorted_symbols(b)


def test_order_key():
    assert symbol_order_key((7, 10)) < symbol_order_key((3, 2))
    assert symbol_order_key((3, 2)) < symbol_order_key((4, 2))


def test_non_positive_counts_are_dropped():
    assert sorted_symbols({1: 0, 2: 5, 3: -1}) == [(2, 5)]


@pytest.mark.parametrize("symbol", [-1, 256])
def test_symbol_outside_byte_range(symbol):
    with pytest.raises(InvalidInputError):
        sorted_symbols({symbol: 1})
