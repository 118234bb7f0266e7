"""Centralized configuration defaults for package-merge computations.

Defines immutable defaults for the code-length limit, the width of the
per-position flag word, numeric tolerances, and the seed used by randomized
checks so that results are reproducible across environments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Random seeds (property tests, sample generation)
    RANDOM_SEED: int = 42

    # Code-length limits
    DEFAULT_MAX_LEN: int = 15
    FLAG_WORD_BITS: int = 32

    # Diagnostics
    KRAFT_TOLERANCE: float = 1e-12


# Convenience re-exports and constants
RANDOM_SEED: int = Config.RANDOM_SEED
MAX_SUPPORTED_LEN: int = Config.FLAG_WORD_BITS


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance.

    Defaults are immutable; no environment variables or files are consulted.
    """

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
