import pytest

from packmerge.errors import EmptyInputError
from packmerge.huffman import build_huffman_tree, huffman_code_lengths


def test_huffman_known_vector():
    assert huffman_code_lengths([1, 32, 16, 4, 8, 2, 1]) == [6, 1, 2, 4, 3, 5, 6]


def test_huffman_code_lengths_kraft():
    """Kraft equality holds for a full Huffman tree."""

    lens = huffman_code_lengths([5, 9, 12, 13, 16, 45])
    assert sum(2.0 ** -l for l in lens) == 1.0


def test_huffman_more_frequent_not_longer():
    freqs = [10, 1, 5, 5, 2]
    lens = huffman_code_lengths(freqs)
    assert lens[0] <= lens[2] <= lens[4] <= lens[1]


def test_huffman_tree_root_weight():
    root = build_huffman_tree([1.0, 2.0, 3.0])
    assert root.symbol is None
    assert root.frequency == pytest.approx(6.0)


def test_huffman_single_symbol_degenerate():
    assert huffman_code_lengths([3.0]) == [0]


def test_huffman_empty_error():
    with pytest.raises(EmptyInputError):
        huffman_code_lengths([])


def test_huffman_deep_chain():
    freqs = [2.0 ** i for i in range(30)]
    lens = huffman_code_lengths(freqs)
    assert max(lens) == 29
