"""
File: TreeBuilder.py
Author: Hannes Stalder
Description: Builds the Huffman tree from a symbol frequency table.
"""

import heapq
from typing import Mapping, Optional

from huffman_tree.HuffmanNode import HuffmanNode, Leaf, Internal

# heapq keeps the lowest frequency node on top of the heap, which is exactly what
# we need when building the tree. The heap entries are (freq, sequence, node):
# the sequence number is unique, so two nodes with the same frequency are ordered
# by the moment they were pushed and the node objects themselves are never compared.
# This makes the tree (and therefore the serialized form) reproducible.


class TreeBuilder:
    def __init__(self, frequencies: Mapping[str, int]):
        for char, count in frequencies.items():
            if not isinstance(count, int) or count < 1:
                raise ValueError(f"Frequency of {char!r} must be a positive integer, got {count!r}")
        self.frequencies = frequencies

    def build(self) -> Optional[HuffmanNode]:
        # empty input, there is nothing to build
        if not self.frequencies:
            return None

        # One leaf per symbol, sequence numbers follow the order of the table
        priority_queue = []
        sequence = 0
        for char, count in self.frequencies.items():
            priority_queue.append((count, sequence, Leaf(char, count)))
            sequence += 1
        heapq.heapify(priority_queue)

        # With a single symbol the loop never runs and the leaf becomes the root
        while len(priority_queue) > 1:
            # we take the two lowest frequency nodes, the first one goes left
            left_freq, _, left_node = heapq.heappop(priority_queue)
            right_freq, _, right_node = heapq.heappop(priority_queue)

            merged_freq = left_freq + right_freq
            merged_node = Internal(left_node, right_node, merged_freq)

            heapq.heappush(priority_queue, (merged_freq, sequence, merged_node))
            sequence += 1

        assert len(priority_queue) == 1
        return priority_queue[0][2]
