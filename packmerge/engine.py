"""Optimal length-limited prefix code lengths via package-merge.

Given symbol frequencies (or probabilities) and a maximum code-word length
``max_len``, :func:`package_merge` returns, for every symbol, the length of
its code word in an optimal prefix-free code whose words are all at most
``max_len`` bits long. With an unlimited length this reduces to Huffman's
algorithm; here the limit is honored exactly.

Algorithm
---------
1. Rank symbol indices by ascending frequency (stable).
2. For each of ``max_len`` levels, pair up the previous level's values into
   package sums and merge them with the ranked frequencies, packages first on
   ties. Bit ``d`` of ``flags[i]`` records whether position ``i`` of level
   ``d`` holds a package.
3. Walk the levels backward, starting with the ``2n - 2`` cheapest entries of
   the last level. Every leaf among the relevant entries adds one bit to its
   symbol; every package makes two entries of the level below relevant.

References
----------
- Larmore, L. L., & Hirschberg, D. S. (1990). A fast algorithm for optimal
  length-limited Huffman codes. JACM 37(3).

Example
-------
>>> from packmerge.engine import package_merge
>>> package_merge([1, 32, 16, 4, 8, 2, 1], max_len=5)
[5, 1, 2, 5, 3, 5, 5]
"""

from __future__ import annotations

from numbers import Real
from operator import index
from typing import Iterator, Sequence
import logging

import numpy as np

from packmerge.config import Config
from packmerge.errors import (
    EmptyInputError,
    InvalidFrequencyError,
    MaxLenTooLargeError,
    MaxLenTooSmallError,
)
from packmerge.merge import FromA, merge, package_first


_LOGGER = logging.getLogger(__name__)


def rank_frequencies(frequencies: Sequence[float]) -> list[int]:
    """Return symbol indices sorted by ascending frequency.

    The sort is stable: symbols with equal frequencies keep their input
    order. Frequencies must be comparable (no NaN).
    """

    return sorted(range(len(frequencies)), key=frequencies.__getitem__)


def package_merge(frequencies: Sequence[float], max_len: int) -> list[int]:
    """Return optimal code lengths limited to ``max_len`` bits.

    Parameters
    ----------
    frequencies:
        Non-negative, finite weights, one per symbol.
    max_len:
        Maximum code-word length, between 1 and ``Config.FLAG_WORD_BITS``.

    Returns
    -------
    list[int]
        ``result[i]`` is the code length of symbol ``i``. A single symbol gets
        length 0; callers that need a one-bit code must special-case it.

    Raises
    ------
    EmptyInputError
        If ``frequencies`` is empty.
    InvalidFrequencyError
        If a frequency is negative, infinite or NaN.
    MaxLenTooSmallError
        If ``max_len < 1`` or there are more than ``2**max_len`` symbols.
    MaxLenTooLargeError
        If ``max_len`` exceeds ``Config.FLAG_WORD_BITS``.
    """

    values = _validate_frequencies(frequencies)
    max_len = _validate_max_len(len(values), max_len)
    return package_merge_unchecked(values, max_len)


def package_merge_unchecked(frequencies: Sequence[float], max_len: int) -> list[int]:
    """Run package-merge without validating the inputs.

    The caller guarantees ``1 <= len(frequencies) <= 2**max_len``, finite
    non-negative frequencies and ``max_len >= 1``. Violations produce
    undefined results or an ``AssertionError``.
    """

    n = len(frequencies)
    _LOGGER.debug("package-merge: %d symbols, max_len=%d", n, max_len)
    rank = rank_frequencies(frequencies)
    flags, level_sizes = _build_level_flags(frequencies, rank, max_len)
    code_lens = _decode_lengths(flags, level_sizes, rank)
    _LOGGER.debug("package-merge: longest code word is %d bits", max(code_lens))
    return code_lens


# Validation -------------------------------------------------------------------
def _validate_frequencies(frequencies: Sequence[float]) -> list[float]:
    items = list(frequencies)
    if not items:
        raise EmptyInputError()
    try:
        raw = np.asarray(items)
    except OverflowError:
        raw = np.asarray(items, dtype=object)
    except (TypeError, ValueError) as e:
        raise InvalidFrequencyError("package-merge error: frequencies must be a flat sequence") from e
    # Object arrays hold ints beyond int64 or mixed types; strings and bools are not weights.
    if raw.dtype.kind == "O":
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in raw.ravel()):
            raise InvalidFrequencyError("package-merge error: frequencies must be numbers")
    elif raw.dtype.kind not in "iuf":
        raise InvalidFrequencyError("package-merge error: frequencies must be numbers")
    try:
        values = raw.astype(np.float64)
    except (OverflowError, TypeError, ValueError) as e:
        raise InvalidFrequencyError() from e
    if values.ndim != 1:
        raise InvalidFrequencyError("package-merge error: frequencies must be a flat sequence")
    if not np.all(np.isfinite(values)):
        raise InvalidFrequencyError()
    if np.any(values < 0.0):
        raise InvalidFrequencyError()
    return values.tolist()


def _validate_max_len(n: int, max_len: int) -> int:
    max_len = index(max_len)
    # n <= 2**max_len, without materializing huge powers of two
    if max_len < 1 or (n - 1).bit_length() > max_len:
        raise MaxLenTooSmallError()
    if max_len > Config.FLAG_WORD_BITS:
        raise MaxLenTooLargeError()
    return max_len


# Forward pass -----------------------------------------------------------------
def _complete_pairs(values: Sequence[float]) -> Iterator[float]:
    """Yield sums of consecutive pairs; an odd trailing value is dropped."""

    for i in range(1, len(values), 2):
        yield values[i - 1] + values[i]


def _build_level_flags(
    frequencies: Sequence[float],
    rank: Sequence[int],
    max_len: int,
) -> tuple[list[int], list[int]]:
    """Build all levels and return ``(flags, level_sizes)``.

    ``flags[i]`` has bit ``d`` set iff position ``i`` of level ``d`` is a
    package. Only the flags and the size of each level are kept; the level
    values themselves live in two buffers that are swapped every level.
    """

    n = len(frequencies)
    ranked = [frequencies[i] for i in rank]
    flags = [0] * (2 * n - 1)
    level_sizes: list[int] = []
    level: list[float] = []
    merged: list[float] = []

    for depth in range(max_len):
        merged.clear()
        mask = 1 << depth
        for position, item in enumerate(merge(_complete_pairs(level), ranked, package_first)):
            if isinstance(item, FromA):
                flags[position] |= mask
            merged.append(item.value)
        level, merged = merged, level
        level_sizes.append(len(level))
        _LOGGER.debug("level %d: %d entries, %d packages", depth, len(level), len(level) - n)

    return flags, level_sizes


# Backward pass ----------------------------------------------------------------
def _decode_lengths(
    flags: Sequence[int],
    level_sizes: Sequence[int],
    rank: Sequence[int],
) -> list[int]:
    """Turn the per-level package flags into per-symbol code lengths."""

    n = len(rank)
    code_lens = [0] * n
    relevant = 2 * n - 2
    depth = len(level_sizes)
    while depth > 0 and relevant > 0:
        depth -= 1
        if relevant > level_sizes[depth]:
            raise AssertionError(
                f"level {depth} holds {level_sizes[depth]} entries, {relevant} needed"
            )
        mask = 1 << depth
        packages = 0
        for position in range(relevant):
            if flags[position] & mask:
                packages += 1
            else:
                code_lens[rank[position - packages]] += 1
        relevant = 2 * packages
    return code_lens


__all__ = ["package_merge", "package_merge_unchecked", "rank_frequencies"]
