import math

import pytest

from packmerge.analysis import entropy_bits, expected_length, kraft_sum, verify_code_lengths
from packmerge.engine import package_merge


FREQS = [1.0, 32.0, 16.0, 4.0, 8.0, 2.0, 1.0]


def test_kraft_sum_values():
    assert kraft_sum([1, 2, 2]) == 1.0
    assert kraft_sum([2, 2, 2]) == 0.75
    assert kraft_sum([1, 1, 1]) == 1.5
    assert kraft_sum([32] * 4) == pytest.approx(4 * 2.0 ** -32)


def test_expected_length():
    assert expected_length([1.0, 1.0], [1, 1]) == 1.0
    assert expected_length([3.0, 1.0], [1, 2]) == pytest.approx(1.25)
    assert expected_length([0.0, 0.0], [1, 1]) == 0.0
    with pytest.raises(ValueError):
        expected_length([1.0, 2.0], [1])


def test_entropy_bits():
    assert entropy_bits([1.0, 1.0, 1.0, 1.0]) == pytest.approx(2.0)
    assert entropy_bits([5.0, 0.0]) == pytest.approx(0.0)
    assert entropy_bits([0.0]) == 0.0


def test_verify_package_merge_result():
    lens = package_merge(FREQS, 5)
    res = verify_code_lengths(FREQS, lens, max_len=5)
    assert res["valid"] is True
    assert res["kraft_ok"] is True
    assert res["within_limit"] is True
    assert res["max_length"] == 5
    assert res["expected_length"] >= res["entropy"] - 1e-12
    assert res["redundancy"] == pytest.approx(res["expected_length"] - res["entropy"])


def test_verify_flags_violations():
    res = verify_code_lengths([1.0, 1.0, 1.0], [1, 1, 3], max_len=2)
    assert res["kraft_ok"] is False
    assert res["within_limit"] is False
    assert res["valid"] is False


def test_verify_without_limit():
    res = verify_code_lengths([1.0, 1.0], [1, 1])
    assert res["within_limit"] is True
    assert math.isclose(res["kraft_sum"], 1.0)
