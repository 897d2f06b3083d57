import pytest

from huffman_tree.TreeBuilder import TreeBuilder
from huffman_tree.HuffmanNode import Leaf, Internal, tree_height


def test_empty_table_has_no_root():
    assert TreeBuilder({}).build() is None


def test_single_symbol_is_leaf_root():
    root = TreeBuilder({"A": 4}).build()
    assert isinstance(root, Leaf)
    assert root.char == "A"
    assert root.freq == 4
    assert tree_height(root) == 0


def test_merge_order_and_sides():
    # D+C -> DC(3), DC+B -> DCB(7), A+DCB -> root(12); first popped goes left
    root = TreeBuilder({"A": 5, "B": 4, "C": 2, "D": 1}).build()

    assert isinstance(root, Internal)
    assert root.freq == 12
    assert root.left.char == "A"

    dcb = root.right
    assert dcb.freq == 7
    assert dcb.right.char == "B"

    dc = dcb.left
    assert dc.freq == 3
    assert (dc.left.char, dc.right.char) == ("D", "C")


def test_ties_favour_first_inserted():
    root = TreeBuilder({"x": 1, "y": 1, "z": 1}).build()
    # x and y are merged first, z (inserted before the merged node) is popped before it
    assert root.left.char == "z"
    assert (root.right.left.char, root.right.right.char) == ("x", "y")


def test_internal_frequency_is_sum_of_children():
    root = TreeBuilder({"a": 7, "b": 3, "c": 3, "d": 9, "e": 1}).build()
    stack = [root]
    while stack:
        node = stack.pop()
        if not node.is_leaf():
            assert node.freq == node.left.freq + node.right.freq
            stack.extend((node.left, node.right))
    assert root.freq == 23


@pytest.mark.parametrize("count", [0, -3, 1.5])
def test_rejects_invalid_frequencies(count):
    with pytest.raises(ValueError):
        TreeBuilder({"A": count})
