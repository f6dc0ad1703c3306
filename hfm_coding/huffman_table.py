"""
Huffman code table - the result of code construction.
Maps every symbol of the alphabet to its codeword and
builds the trie used by the decoder.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from bitarray import bitarray, frozenbitarray

from hfm_coding.errors import FormatError, UnknownSymbolError

ROOT = 0
NO_CHILD = -1


class DecodeTrie:
    """
    Binary trie for bit-by-bit symbol recovery. Nodes live in
    parallel lists and are addressed by index, node 0 is the root.
    Leaves hold a symbol, internal nodes hold None.
    """

    def __init__(self):
        self.zero: List[int] = [NO_CHILD]
        self.one: List[int] = [NO_CHILD]
        self.symbol: List[Optional[int]] = [None]

    def __len__(self):
        return len(self.symbol)

    def _new_node(self) -> int:
        self.zero.append(NO_CHILD)
        self.one.append(NO_CHILD)
        self.symbol.append(None)
        return len(self.symbol) - 1

    def insert(self, symbol: int, code: Sequence[int]) -> None:
        """
        Adds the path for one codeword, creating missing nodes.

        :param symbol: int, symbol stored in the leaf
        :param code: codeword bits, root first
        """
        if len(code) == 0:
            raise FormatError("Codeword cannot be empty")
        node = ROOT
        for bit in code:
            if self.symbol[node] is not None:
                raise FormatError(
                    f"Codeword for symbol {symbol} extends the codeword "
                    f"of symbol {self.symbol[node]}"
                )
            children = self.one if bit else self.zero
            child = children[node]
            if child == NO_CHILD:
                child = self._new_node()
                children[node] = child
            node = child
        if self.symbol[node] is not None or self.zero[node] != NO_CHILD \
                or self.one[node] != NO_CHILD:
            raise FormatError(f"Codeword for symbol {symbol} is not prefix-free")
        self.symbol[node] = symbol

    def step(self, node: int, bit: int) -> int:
        """Follows one bit from node and returns the child index."""
        child = self.one[node] if bit else self.zero[node]
        if child == NO_CHILD:
            raise FormatError("Payload contains a bit sequence with no codeword")
        return child

    def is_leaf(self, node: int) -> bool:
        return self.symbol[node] is not None


class HuffmanTable:
    """
    Immutable code table: symbols in the order the code was built for,
    their frequencies and their codewords.
    """

    def __init__(
        self,
        symbols: Sequence[int],
        frequencies: Sequence[int],
        codes: Sequence[bitarray],
    ):
        if not len(symbols) == len(frequencies) == len(codes):
            raise ValueError("Symbols, frequencies and codes differ in length")
        self._symbols = tuple(symbols)
        self._frequencies = tuple(frequencies)
        self._codes = tuple(frozenbitarray(code) for code in codes)
        self._index = {symbol: i for i, symbol in enumerate(self._symbols)}

    def __len__(self):
        return len(self._symbols)

    def __iter__(self) -> Iterator[Tuple[int, int, frozenbitarray]]:
        return iter(zip(self._symbols, self._frequencies, self._codes))

    @property
    def symbols(self) -> Tuple[int, ...]:
        return self._symbols

    @property
    def frequencies(self) -> Tuple[int, ...]:
        return self._frequencies

    @property
    def codes(self) -> Tuple[frozenbitarray, ...]:
        return self._codes

    def encode_lookup(self, symbol: int) -> frozenbitarray:
        """
        Returns the codeword of a symbol.

        Raises:
            UnknownSymbolError: If the symbol was not in the frequency table
        """
        try:
            return self._codes[self._index[symbol]]
        except KeyError:
            raise UnknownSymbolError(
                f"Symbol {symbol} not found in Huffman table"
            ) from None

    def code_length(self, symbol: int) -> int:
        return len(self.encode_lookup(symbol))

    def build_code_map(self) -> Dict[int, frozenbitarray]:
        """Symbol -> codeword dictionary for the encoding direction."""
        return dict(zip(self._symbols, self._codes))

    def build_decode_trie(self) -> DecodeTrie:
        trie = DecodeTrie()
        for symbol, code in zip(self._symbols, self._codes):
            trie.insert(symbol, code)
        return trie

    def encoded_bit_length(self) -> int:
        """Payload size in bits (before padding) for the counted data."""
        return sum(
            freq * len(code) for freq, code in zip(self._frequencies, self._codes)
        )
