import pytest

from huffman_tree.FrequencyCounter import FrequencyCounter


def test_counts_every_symbol():
    counter = FrequencyCounter("AAAAABBBBCCD")
    assert dict(counter.frequencies) == {"A": 5, "B": 4, "C": 2, "D": 1}
    assert counter.total == 12
    assert len(counter) == 4


def test_keeps_order_of_first_appearance():
    counter = FrequencyCounter("cabbac")
    assert list(counter.frequencies) == ["c", "a", "b"]


def test_empty_text_gives_empty_table():
    counter = FrequencyCounter("")
    assert dict(counter.frequencies) == {}
    assert counter.total == 0


def test_table_is_read_only():
    counter = FrequencyCounter("AB")
    with pytest.raises(TypeError):
        counter.frequencies["C"] = 1


def test_unicode_symbols():
    counter = FrequencyCounter("ääß€€€")
    assert dict(counter.frequencies) == {"ä": 2, "ß": 1, "€": 3}


def test_rejects_non_string_input():
    with pytest.raises(TypeError):
        FrequencyCounter(b"bytes")
