"""Exceptions raised by the package-merge entry points.

All input problems are detected before any level is built and surface as a
:class:`PackageMergeError` subclass. Broken internal invariants are reported
with ``AssertionError`` instead, so they never share this channel.
"""

from __future__ import annotations


class PackageMergeError(ValueError):
    """Base class for rejected package-merge inputs."""

    default_message = "package-merge error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyInputError(PackageMergeError):
    """The frequency sequence was empty."""

    default_message = "package-merge error: frequencies sequence was empty"


class InvalidFrequencyError(PackageMergeError):
    """A frequency was negative, infinite or NaN."""

    default_message = "package-merge error: frequencies must be finite and non-negative"


class MaxLenTooSmallError(PackageMergeError):
    """No prefix code with lengths <= max_len exists for this many symbols."""

    default_message = "package-merge error: max_len parameter was chosen too small"


class MaxLenTooLargeError(PackageMergeError):
    """max_len exceeds the width of the per-position flag word."""

    default_message = "package-merge error: max_len parameter was chosen too large"


__all__ = [
    "PackageMergeError",
    "EmptyInputError",
    "InvalidFrequencyError",
    "MaxLenTooSmallError",
    "MaxLenTooLargeError",
]
