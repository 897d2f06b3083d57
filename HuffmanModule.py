"""
File: HuffmanModule.py
Author: Hannes Stalder
Description: Runs the whole Huffman pipeline on a text and prints a summary.
"""

import os
import sys
from typing import Optional

import numpy as np

from huffman_tree.HuffmanTree import HuffmanTree
from huffman_tree.EntropyCalculator import EntropyCalculator
from huffman_tree.CodingErrors import HuffmanError

SAMPLE_TEXT = "EEEEAABBCCEEEEEEEEECD1234sadfthomasaE"


class HuffmanModule:
    def __init__(self, input_string: str, debug: bool = False):

        self.input_string: str = input_string
        self.debug = debug

        # Build the code for the input and encode it
        self.tree = HuffmanTree(self.input_string, debug=debug)
        self.entropyCalculator: Optional[EntropyCalculator] = self.tree.entropy() if self.input_string else None
        self.source_coded = self.tree.encode_to_array(self.input_string)

        # Only the tree shape is sent along with the bits
        self.serialized_tree = self.tree.serialize_to_string()

        # The receiver rebuilds the tree from the serialized form and decodes
        try:
            self.receiver_tree = HuffmanTree.from_tokens(self.serialized_tree or None, debug=debug)
            self.output_string = self.receiver_tree.decode_array(self.source_coded, len(self.input_string))
        except HuffmanError as e:
            self.receiver_tree = None
            self.output_string = f"Decoding failed: {str(e)}"

        self.lossless = self.input_string == self.output_string

        # compared against 8 bits per character
        fixed_bits = 8 * len(self.input_string)
        self.compression_ratio = len(self.source_coded) / fixed_bits if fixed_bits else 0.0

    def __repr__(self):
        # Helper function to convert numpy array to bitstring for display
        def array_to_str(arr):
            if isinstance(arr, np.ndarray):
                return ''.join(map(str, arr.astype(int)))
            return str(arr)

        codes = "\n".join(f"**    {char!r}: {code or '(empty)'}" for char, code in self.tree.code_table.items())
        average = f"{self.tree.average_code_length():.4f} bits/char" if self.input_string else "N/A"

        return (f"HuffmanModule:\n"
                f"*****SUMMARY*******************************************************************\n\n"
                f"**  Input String: '{self.input_string}'\n\n"
                f"**  Entropy Calculations: {self.entropyCalculator if self.entropyCalculator else 'N/A (empty input)'}\n\n"
                f"**  Code Table:\n{codes}\n\n"
                f"**  Average Code Length: {average}\n\n"
                f"**  Source Coded: \n'{array_to_str(self.source_coded)}'\n\n"
                f"**  Serialized Tree: '{self.serialized_tree}'\n\n"
                f"**  Output String: '{self.output_string}'\n\n"
                f"**  Compression Ratio: {self.compression_ratio:.2%}\n\n"
                f"**  Lossless: {self.lossless}\n\n"
                f"******************************************************************************\n")


if __name__ == "__main__":
    def _get_arg(name: str, default=None):
        if name in sys.argv:
            i = sys.argv.index(name)
            if i + 1 < len(sys.argv):
                return sys.argv[i + 1]
        return default

    text = SAMPLE_TEXT
    file_path = _get_arg("--file")
    if file_path is not None:
        if not os.path.exists(file_path):
            print(f"File not found: {file_path}")
            raise SystemExit(1)
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()

    myHuffmanModule = HuffmanModule(input_string=text, debug=("--debug" in sys.argv))
    print(myHuffmanModule)
