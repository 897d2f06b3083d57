import numpy as np
import pytest

from huffman_tree.EntropyCalculator import EntropyCalculator


def test_uniform_distribution():
    calc = EntropyCalculator({"a": 1, "b": 1, "c": 1, "d": 1})
    assert calc.H == pytest.approx(2.0)
    assert calc.H0 == pytest.approx(2.0)
    assert calc.R == pytest.approx(0.0)
    assert calc.r == pytest.approx(0.0)


def test_skewed_distribution():
    calc = EntropyCalculator({"a": 3, "b": 1})
    expected = 0.75 * np.log2(1 / 0.75) + 0.25 * np.log2(4)
    assert calc.H == pytest.approx(expected)
    assert calc.H0 == pytest.approx(1.0)
    assert calc.r == pytest.approx(1.0 - expected)


def test_single_symbol():
    calc = EntropyCalculator({"a": 10})
    assert calc.H == pytest.approx(0.0)
    assert calc.H0 == pytest.approx(0.0)
    assert calc.r == 0.0


def test_empty_table():
    with pytest.raises(ValueError):
        EntropyCalculator({})


def test_repr():
    assert repr(EntropyCalculator({"a": 1, "b": 1})).startswith("EntropyCalculator(H=1.0000 bits/char")
