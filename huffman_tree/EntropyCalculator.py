"""
File: EntropyCalculator.py
Author: Hannes Stalder
Description: Calculates entropy statistics for a symbol frequency table.
"""

from typing import Mapping

import numpy as np


class EntropyCalculator:
    def __init__(self, frequencies: Mapping[str, int]):
        if not frequencies:
            raise ValueError("Frequency table cannot be empty")

        counts = np.array(list(frequencies.values()), dtype=float)
        p = counts / counts.sum()

        self.H = float(np.dot(p, np.log2(1 / p)))          # entropy
        self.H0 = float(np.log2(len(p)))                   # max entropy
        self.R = self.H0 - self.H                          # absolute redundancy
        self.r = self.R / self.H0 if self.H0 > 0 else 0.0  # relative redundancy

    def __repr__(self):
        return (f"EntropyCalculator(H={self.H:.4f} bits/char, "
                f"H0={self.H0:.4f} bits/char, "
                f"R={self.R:.4f} bits/char, "
                f"r={self.r:.2%})")
