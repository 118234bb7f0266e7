"""Diagnostics for code-length vectors.

Checks that a length vector describes a realizable prefix code (Kraft
inequality), respects a length limit, and measures how close its expected
length comes to the Shannon entropy of the frequencies.

Public API:
- kraft_sum
- expected_length
- entropy_bits
- verify_code_lengths
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from packmerge.config import Config


def kraft_sum(lengths: Sequence[int]) -> float:
    """Return sum(2 ** -length); a prefix code exists iff this is <= 1."""

    arr = np.asarray(lengths, dtype=np.float64)
    return float(np.sum(np.exp2(-arr)))


def expected_length(frequencies: Sequence[float], lengths: Sequence[int]) -> float:
    """Return the frequency-weighted average code length in bits per symbol.

    All-zero frequencies yield 0.0.
    """

    freqs = np.asarray(frequencies, dtype=np.float64)
    lens = np.asarray(lengths, dtype=np.float64)
    if freqs.shape != lens.shape:
        raise ValueError("frequencies and lengths must have the same length")
    total = float(freqs.sum())
    if total <= 0.0:
        return 0.0
    return float(np.dot(freqs, lens) / total)


def entropy_bits(frequencies: Sequence[float]) -> float:
    """Return the Shannon entropy (bits/symbol) of the normalized frequencies."""

    freqs = np.asarray(frequencies, dtype=np.float64)
    total = float(freqs.sum())
    if total <= 0.0:
        return 0.0
    p = freqs[freqs > 0.0] / total
    return float(-np.sum(p * np.log2(p)))


def verify_code_lengths(
    frequencies: Sequence[float],
    lengths: Sequence[int],
    max_len: int | None = None,
    tolerance: float | None = None,
) -> dict[str, float | int | bool]:
    """Check a code-length vector and summarize its cost.

    Returns a dict with:
    - kraft_sum, kraft_ok
    - max_length, within_limit (always True when ``max_len`` is None)
    - expected_length, entropy, redundancy (expected length minus entropy)
    - valid (kraft_ok and within_limit)
    """

    tol = float(tolerance if tolerance is not None else Config.KRAFT_TOLERANCE)
    k = kraft_sum(lengths)
    longest = int(max(lengths, default=0))
    within = True if max_len is None else longest <= max_len
    avg = expected_length(frequencies, lengths)
    h = entropy_bits(frequencies)
    return {
        "kraft_sum": k,
        "kraft_ok": k <= 1.0 + tol,
        "max_length": longest,
        "within_limit": within,
        "expected_length": avg,
        "entropy": h,
        "redundancy": avg - h,
        "valid": (k <= 1.0 + tol) and within,
    }


__all__ = ["kraft_sum", "expected_length", "entropy_bits", "verify_code_lengths"]
