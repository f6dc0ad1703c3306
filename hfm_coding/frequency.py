"""
Symbol frequency counting and the symbol ordering shared
by the encoder and the decoder.
"""

from collections import Counter
from typing import Dict, Iterable, List, Mapping, Tuple

from hfm_coding.errors import InvalidInputError

MAX_SYMBOL = 255


def count_frequencies(data: Iterable[int]) -> Dict[int, int]:
    """
    Function builds dictionary with frequency
    of each byte value in given data.

    :param data: bytes (or any iterable of byte values)
    :return: dict, {symbol: count}, only symbols that occur
    """
    return dict(Counter(data))


def symbol_order_key(entry: Tuple[int, int]) -> Tuple[int, int]:
    """
    Sort key for (symbol, count) pairs: count descending,
    then symbol ascending. Decoding rebuilds the code with this same
    order, so it must be the only ordering used for code construction.
    """
    symbol, count = entry
    return -count, symbol


def sorted_symbols(freqs: Mapping[int, int]) -> List[Tuple[int, int]]:
    """
    Function orders a frequency dictionary for code construction.

    :param freqs: dict, {symbol: count}
    :return: list of (symbol, count) pairs with positive counts,
        ordered by symbol_order_key
    """
    entries = []
    for symbol, count in freqs.items():
        if not 0 <= symbol <= MAX_SYMBOL:
            raise InvalidInputError(f"Symbol {symbol} is not a byte value")
        if count > 0:
            entries.append((symbol, count))
    entries.sort(key=symbol_order_key)
    return entries
