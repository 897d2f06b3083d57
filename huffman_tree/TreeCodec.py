"""
File: TreeCodec.py
Author: Hannes Stalder
Description: Serializes the shape of a Huffman tree to a preorder token list and back.
"""

from typing import Iterable, Iterator, List, Optional

from huffman_tree.HuffmanNode import HuffmanNode, Leaf, Internal
from huffman_tree.CodingErrors import DecodingError

# Token format (preorder, frequencies are not stored):
#   internal node -> '0' <left subtree> <right subtree>
#   leaf          -> '1' <symbol>
# Every internal node has exactly two children and every leaf exactly one symbol
# token, so the sequence can be parsed without any separators or length fields.
# Example: ((A, B), C) -> ['0', '0', '1', 'A', '1', 'B', '1', 'C']

INTERNAL_TOKEN = "0"
LEAF_TOKEN = "1"


class TreeCodec:
    def __init__(self, max_depth: int = 512):
        # limits the recursion on untrusted input
        self.max_depth = max_depth

    def serialize(self, root: Optional[HuffmanNode]) -> Optional[List[str]]:
        if root is None:
            return None
        tokens: List[str] = []
        self._serialize_recursive(root, tokens)
        return tokens

    def serialize_to_string(self, root: Optional[HuffmanNode]) -> str:
        tokens = self.serialize(root)
        return "".join(tokens) if tokens else ""

    def _serialize_recursive(self, node, tokens):
        if node.is_leaf():
            tokens.append(LEAF_TOKEN)
            tokens.append(node.char)
            return

        tokens.append(INTERNAL_TOKEN)
        self._serialize_recursive(node.left, tokens)
        self._serialize_recursive(node.right, tokens)

    def deserialize(self, tokens: Iterable[str]) -> HuffmanNode:
        """Rebuild a tree from a token sequence produced by serialize.

        A plain string works as well, since every token is one character.
        All frequencies of the rebuilt tree are 0.

        Raises:
            DecodingError: if the sequence is empty, truncated, has trailing
                tokens, contains an unknown marker, repeats a symbol or
                nests deeper than max_depth.
        """
        stream = _TokenStream(tokens)
        if stream.at_end():
            raise DecodingError("Serialized tree is empty", 0)

        seen = set()
        root = self._deserialize_recursive(stream, 0, seen)

        if not stream.at_end():
            raise DecodingError(
                f"Unexpected trailing token {stream.peek()!r} after the tree ended",
                stream.position,
            )
        return root

    def _deserialize_recursive(self, stream, depth, seen):
        if depth > self.max_depth:
            raise DecodingError(f"Serialized tree is nested deeper than {self.max_depth}", stream.position)

        position = stream.position
        marker = stream.next_token("node marker")

        if marker == LEAF_TOKEN:
            char = stream.next_token("leaf symbol")
            if not isinstance(char, str) or len(char) != 1:
                raise DecodingError(f"Leaf symbol must be a single character, got {char!r}", stream.position - 1)
            if char in seen:
                raise DecodingError(f"Symbol {char!r} appears in more than one leaf", stream.position - 1)
            seen.add(char)
            return Leaf(char)

        if marker == INTERNAL_TOKEN:
            left = self._deserialize_recursive(stream, depth + 1, seen)
            right = self._deserialize_recursive(stream, depth + 1, seen)
            return Internal(left, right)

        raise DecodingError(f"Expected node marker '0' or '1', got {marker!r}", position)


class _TokenStream:
    """Iterator over the tokens with one token of lookahead and a position counter."""

    _END = object()

    def __init__(self, tokens: Iterable[str]):
        if tokens is None:
            raise TypeError("Token sequence must not be None")
        self._iterator: Iterator[str] = iter(tokens)
        self._lookahead = next(self._iterator, self._END)
        self.position = 0

    def at_end(self) -> bool:
        return self._lookahead is self._END

    def peek(self):
        return self._lookahead

    def next_token(self, expected: str):
        if self.at_end():
            raise DecodingError(f"Serialized tree ended early, expected {expected}", self.position)
        token = self._lookahead
        self._lookahead = next(self._iterator, self._END)
        self.position += 1
        return token
