"""
File: FrequencyCounter.py
Author: Hannes Stalder
Description: Counts how often every symbol occurs in a text.
"""

from collections import Counter
from types import MappingProxyType
from typing import Mapping


class FrequencyCounter:
    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(f"Input must be a string, got {type(text).__name__}")

        # Counter keeps the order in which symbols first show up in the text.
        # The tree builder relies on that order to break ties.
        self._frequencies = MappingProxyType(dict(Counter(text)))
        self.total = len(text)

    @property
    def frequencies(self) -> Mapping[str, int]:
        return self._frequencies

    def __len__(self):
        return len(self._frequencies)

    def __repr__(self):
        return (f"FrequencyCounter(symbols={len(self._frequencies)}, "
                f"total={self.total})")
