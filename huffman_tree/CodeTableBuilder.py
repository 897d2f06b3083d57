"""
File: CodeTableBuilder.py
Author: Hannes Stalder
Description: Derives the codeword of every symbol from the Huffman tree.
"""

from typing import Dict, Optional

from huffman_tree.HuffmanNode import HuffmanNode


class CodeTableBuilder:
    def __init__(self, root: Optional[HuffmanNode]):
        self.root = root

    def build(self) -> Dict[str, str]:
        codes: Dict[str, str] = {}
        if self.root is not None:
            # a root that is a leaf gets the empty codeword
            self._generate_codes_recursive(self.root, "", codes)
        return codes

    def _generate_codes_recursive(self, node, current_code, codes_map):

        # if there is a character then we reached the end of a branch
        if node.is_leaf():
            codes_map[node.char] = current_code
            return

        # if not then we are at a junction node: left is 0, right is 1
        self._generate_codes_recursive(node.left, current_code + "0", codes_map)
        self._generate_codes_recursive(node.right, current_code + "1", codes_map)
