"""
File: HuffmanTree.py
Author: Hannes Stalder
Description: Static Huffman code built once over a whole text, with encode, decode and tree serialization.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

import numpy as np

from huffman_tree.FrequencyCounter import FrequencyCounter
from huffman_tree.TreeBuilder import TreeBuilder
from huffman_tree.CodeTableBuilder import CodeTableBuilder
from huffman_tree.TreeCodec import TreeCodec
from huffman_tree.EntropyCalculator import EntropyCalculator
from huffman_tree.HuffmanNode import HuffmanNode, tree_height, same_shape
from huffman_tree.CodingErrors import EncodingError, DecodingError


class HuffmanTree:
    """Huffman tree and code table for one text.

    A tree is created either from a text (``HuffmanTree(text)``) or from a
    serialized token sequence (``HuffmanTree.from_tokens(tokens)``). In the
    second case the frequencies are unknown, but the code table is rebuilt so
    both encode and decode work. A tree never changes after it was created.

    Parameters:
    -----------
    text : str
        The text the code is built for. Only its symbols can be encoded later.
    debug : bool
        Print a short summary of what was built (default: False)
    """

    def __init__(self, text: str = "", debug: bool = False):
        counter = FrequencyCounter(text)
        root = TreeBuilder(counter.frequencies).build()
        self._setup(root, counter.frequencies, debug)

        if self.debug:
            print(f"HuffmanTree: built {len(self)} symbols from {counter.total} chars, height {self.height()}")

    @classmethod
    def from_tokens(cls, tokens: Optional[Iterable[str]], max_depth: int = 512, debug: bool = False) -> "HuffmanTree":
        """Rebuild a tree from the output of serialize (None gives the empty tree)."""
        root = TreeCodec(max_depth=max_depth).deserialize(tokens) if tokens is not None else None

        tree = cls.__new__(cls)
        tree._setup(root, {}, debug)

        if tree.debug:
            print(f"HuffmanTree: reconstructed {len(tree)} symbols, height {tree.height()}")
        return tree

    def _setup(self, root: Optional[HuffmanNode], frequencies: Mapping[str, int], debug: bool):
        self._root = root
        self._frequencies = MappingProxyType(dict(frequencies))
        self._codes = MappingProxyType(CodeTableBuilder(root).build())
        self.debug = debug

    # ---------------------------------------------------------------------------------------------
    # inspection

    @property
    def root(self) -> Optional[HuffmanNode]:
        return self._root

    @property
    def code_table(self) -> Mapping[str, str]:
        return self._codes

    @property
    def frequencies(self) -> Mapping[str, int]:
        # empty for reconstructed trees
        return self._frequencies

    @property
    def symbols(self) -> List[str]:
        return list(self._codes.keys())

    def __len__(self):
        return len(self._codes)

    def __contains__(self, symbol):
        return symbol in self._codes

    def height(self) -> int:
        return tree_height(self._root)

    def same_shape(self, other: "HuffmanTree") -> bool:
        return same_shape(self._root, other._root)

    # ---------------------------------------------------------------------------------------------
    # encoding

    def encode_symbols(self, text: str) -> List[str]:
        """Codeword of every symbol of the text, in order.

        Raises:
            EncodingError: for the first symbol that has no codeword.
        """
        codes = self._codes
        encoded = []
        for position, char in enumerate(text):
            code = codes.get(char)
            if code is None:
                raise EncodingError(char, position)
            encoded.append(code)
        return encoded

    def encode(self, text: str) -> str:
        return "".join(self.encode_symbols(text))

    def encode_to_array(self, text: str) -> np.ndarray:
        bit_string = self.encode(text)
        return np.array([int(b) for b in bit_string], dtype=np.int8)

    def encoded_length(self, text: str) -> int:
        return sum(len(code) for code in self.encode_symbols(text))

    # ---------------------------------------------------------------------------------------------
    # decoding

    def decode(self, bits: str, length: Optional[int] = None) -> str:
        """Decode a bit-string of '0' and '1' characters back to text.

        The codeword of a tree with a single symbol is empty, so the number of
        symbols cannot be recovered from the bits. For that case the caller has
        to pass ``length``, and only the empty bit-string is accepted. For all
        other trees ``length`` is optional and, if given, checked.

        Raises:
            DecodingError: if the bits contain anything but '0' and '1', stop in
                the middle of a codeword, do not fit the tree, or decode to a
                different number of symbols than ``length``.
        """
        if length is not None and length < 0:
            raise ValueError(f"Length must not be negative, got {length}")

        root = self._root

        if root is None:
            if bits:
                raise DecodingError("Cannot decode bits without a tree", 0)
            if length:
                raise DecodingError(f"Empty tree cannot produce {length} symbols")
            return ""

        if root.is_leaf():
            if bits:
                raise DecodingError(
                    f"Tree has the single symbol {root.char!r} with an empty codeword, "
                    "bits cannot be decoded; pass the empty bit-string and a length",
                    0,
                )
            return root.char * (length or 0)

        decoded = []
        current_node = root
        codeword_start = 0
        for position, bit in enumerate(bits):
            if bit == "0":
                current_node = current_node.left
            elif bit == "1":
                current_node = current_node.right
            else:
                raise DecodingError(f"Invalid bit {bit!r}, expected '0' or '1'", position)

            # reached a leaf, emit the symbol and start again at the root
            if current_node.is_leaf():
                decoded.append(current_node.char)
                current_node = root
                codeword_start = position + 1

        if current_node is not root:
            raise DecodingError(
                f"Bit-string ends in the middle of a codeword ({len(bits) - codeword_start} bits left over)",
                codeword_start,
            )

        if length is not None and len(decoded) != length:
            raise DecodingError(f"Decoded {len(decoded)} symbols, expected {length}")

        return "".join(decoded)

    def decode_array(self, bits: np.ndarray, length: Optional[int] = None) -> str:
        bits = np.asarray(bits).reshape(-1)
        if bits.size and not np.isin(bits, (0, 1)).all():
            position = int(np.flatnonzero(~np.isin(bits, (0, 1)))[0])
            raise DecodingError(f"Invalid bit {bits[position]!r}, expected 0 or 1", position)
        return self.decode("".join(map(str, bits.astype(int))), length)

    # ---------------------------------------------------------------------------------------------
    # serialization

    def serialize(self) -> Optional[List[str]]:
        return TreeCodec().serialize(self._root)

    def serialize_to_string(self) -> str:
        return TreeCodec().serialize_to_string(self._root)

    # ---------------------------------------------------------------------------------------------
    # statistics

    def average_code_length(self) -> float:
        """Average number of bits per symbol of the text the tree was built from."""
        if self._root is not None and not self._frequencies:
            raise ValueError("Frequencies are unknown for a reconstructed tree")

        total = sum(self._frequencies.values())
        if total == 0:
            return 0.0
        weighted = sum(count * len(self._codes[char]) for char, count in self._frequencies.items())
        return weighted / total

    def entropy(self) -> EntropyCalculator:
        return EntropyCalculator(self._frequencies)

    def efficiency(self) -> float:
        average = self.average_code_length()
        if average == 0:
            return 1.0
        return self.entropy().H / average

    def __repr__(self):
        if self._root is None:
            return "HuffmanTree(empty)"
        return f"HuffmanTree(symbols={len(self)}, height={self.height()}, codes={dict(self._codes)})"
