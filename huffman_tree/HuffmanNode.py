"""
File: HuffmanNode.py
Author: Hannes Stalder
Description: Node types of the Huffman tree.
"""


# A tree is either a single Leaf (only one distinct symbol) or an Internal node
# that owns exactly two children. Nodes are never shared between trees.
class HuffmanNode:
    __slots__ = ("freq",)

    def __init__(self, freq: int):
        self.freq = freq

    def is_leaf(self) -> bool:
        raise NotImplementedError


class Leaf(HuffmanNode):
    __slots__ = ("char",)

    def __init__(self, char: str, freq: int = 0):
        super().__init__(freq)
        self.char = char

    def is_leaf(self) -> bool:
        return True

    def __repr__(self):
        return f"Leaf({self.char!r}, freq={self.freq})"


class Internal(HuffmanNode):
    __slots__ = ("left", "right")

    def __init__(self, left: HuffmanNode, right: HuffmanNode, freq: int = 0):
        super().__init__(freq)
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return False

    def __repr__(self):
        return f"Internal(freq={self.freq}, left={self.left!r}, right={self.right!r})"


def tree_height(node) -> int:
    """Number of edges on the longest root-to-leaf path (0 for a single leaf, -1 for no tree)."""
    if node is None:
        return -1

    # iterative so that deep, degenerate trees do not hit the recursion limit
    height = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if current.is_leaf():
            height = max(height, depth)
        else:
            stack.append((current.left, depth + 1))
            stack.append((current.right, depth + 1))
    return height


def same_shape(a, b) -> bool:
    """True if both trees have the same structure and the same symbol in every leaf."""
    stack = [(a, b)]
    while stack:
        x, y = stack.pop()
        if x is None or y is None:
            if x is not y:
                return False
            continue
        if x.is_leaf() != y.is_leaf():
            return False
        if x.is_leaf():
            if x.char != y.char:
                return False
        else:
            stack.append((x.left, y.left))
            stack.append((x.right, y.right))
    return True
