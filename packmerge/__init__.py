"""
packmerge: Optimal length-limited prefix code lengths.

Implements the package-merge algorithm, which computes code-word lengths that
minimize the expected code length subject to a maximum length, together with
the lazy ordered merge it is built on and diagnostics for length vectors.
"""

__all__ = [
    "Config",
    "RANDOM_SEED",
    "__version__",
    # Core
    "package_merge",
    "package_merge_unchecked",
    "rank_frequencies",
    "merge",
    "MergeIter",
    "Pick",
    "FromA",
    "FromB",
    # Errors
    "PackageMergeError",
    "EmptyInputError",
    "InvalidFrequencyError",
    "MaxLenTooSmallError",
    "MaxLenTooLargeError",
    # Baseline and diagnostics (lazy-imported via __getattr__)
    "huffman_code_lengths",
    "kraft_sum",
    "expected_length",
    "entropy_bits",
    "verify_code_lengths",
]

__version__ = "0.1.0"

from typing import Any

from packmerge.config import Config, RANDOM_SEED
from packmerge.errors import (
    PackageMergeError,
    EmptyInputError,
    InvalidFrequencyError,
    MaxLenTooSmallError,
    MaxLenTooLargeError,
)
from packmerge.merge import FromA, FromB, MergeIter, Pick, merge
from packmerge.engine import package_merge, package_merge_unchecked, rank_frequencies


def __getattr__(name: str) -> Any:  # lazy attribute access for optional helpers
    if name == "huffman_code_lengths":
        from packmerge.huffman import huffman_code_lengths as _h

        return _h
    if name in {"kraft_sum", "expected_length", "entropy_bits", "verify_code_lengths"}:
        from packmerge import analysis as _analysis

        return getattr(_analysis, name)
    raise AttributeError(f"module 'packmerge' has no attribute {name!r}")
