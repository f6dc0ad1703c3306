"""
Huffman code construction over a sorted frequency array.

Instead of a priority queue of tree nodes, the frequencies are kept in
one array ordered by non-increasing frequency. Each step merges the two
last (smallest) entries, inserts their sum back into the array keeping
the order ("up"), and once two entries remain they get the codes 0 and 1.
The steps are then undone in reverse ("down"): the code of the inserted
sum is removed from its slot and given, extended by 0 and by 1, to the
two entries it replaced.
"""

from typing import List, Mapping

from bitarray import bitarray

from hfm_coding.errors import InvalidInputError
from hfm_coding.frequency import sorted_symbols
from hfm_coding.huffman_table import HuffmanTable


class HuffmanBuilder:
    """
    Builds codewords for a frequency array sorted by non-increasing frequency.
    """

    def __init__(self, frequencies: List[int]):
        """
        :param frequencies: list of int, sorted by non-increasing value;
            it is used as scratch space and changed in place
        """
        self.freqs = frequencies
        self.codes = [bitarray(endian="big") for _ in frequencies]

    def up(self, length: int, q: int) -> int:
        """
        Inserts q into the first length slots of the frequency array.
        Entries smaller than q move one slot to the right; the scan
        from the right stops at the first entry >= q.

        :param length: int, size of the sorted part of the array
        :param q: int, merged frequency
        :return: int, index where q was placed
        """
        freqs = self.freqs
        j = 0
        for i in range(length - 1, 0, -1):
            if freqs[i - 1] < q:
                freqs[i] = freqs[i - 1]
            else:
                j = i
                break
        freqs[j] = q
        return j

    def down(self, n: int, j: int) -> None:
        """
        Turns the codes for n - 1 entries into codes for n entries.
        The code at index j belonged to the merged pair: it is removed,
        the codes after it move one slot left, and the two last slots get
        the removed code followed by 0 and by 1.

        :param n: int, number of entries after the split
        :param j: int, index returned by up for this step
        """
        codes = self.codes
        merged = codes[j]
        codes[j:n - 1] = codes[j + 1:n]
        codes[n - 2] = merged + bitarray("0", endian="big")
        codes[n - 1] = merged + bitarray("1", endian="big")

    def build(self) -> List[bitarray]:
        """
        Function runs the construction and returns the codeword of every
        array slot (slot i keeps the symbol it had in the sorted input).
        """
        n = len(self.freqs)
        if n == 0:
            raise InvalidInputError("Cannot build a code for an empty alphabet")
        if n == 1:
            # one symbol still needs one bit per occurrence
            self.codes[0] = bitarray("0", endian="big")
            return self.codes

        inserted_at = []
        for k in range(n, 2, -1):
            q = self.freqs[k - 2] + self.freqs[k - 1]
            inserted_at.append(self.up(k - 1, q))

        self.codes[0] = bitarray("0", endian="big")
        self.codes[1] = bitarray("1", endian="big")

        for k in range(3, n + 1):
            self.down(k, inserted_at.pop())
        return self.codes


def build_from_frequencies(freqs: Mapping[int, int]) -> HuffmanTable:
    """
    Builds the Huffman table for a {symbol: count} dictionary.
    The encoder and the decoder both call this on the same counts
    and get the same table.

    :param freqs: dict, {symbol: count}
    :return: HuffmanTable
    """
    if not freqs:
        raise InvalidInputError("Frequency table is empty")
    entries = sorted_symbols(freqs)
    if not entries:
        raise InvalidInputError("All frequencies are zero")

    symbols = [symbol for symbol, _ in entries]
    counts = [count for _, count in entries]
    codes = HuffmanBuilder(list(counts)).build()
    return HuffmanTable(symbols, counts, codes)
