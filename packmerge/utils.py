"""Shared helpers for loading frequency tables and filesystem operations."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any
import json


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)


def load_frequencies(path: Path) -> tuple[list[str], list[float]]:
    """Load ``(symbols, frequencies)`` from a JSON file.

    The file holds either a list of numbers (symbols are their indices) or an
    object mapping symbol names to numbers (insertion order is kept).
    """

    with path.open("r", encoding="utf-8") as f:
        data: Any = json.load(f)
    if isinstance(data, dict):
        symbols = [str(k) for k in data.keys()]
        values = list(data.values())
    elif isinstance(data, list):
        symbols = [str(i) for i in range(len(data))]
        values = data
    else:
        raise ValueError(f"{path}: expected a JSON list or object of frequencies")
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"{path}: frequency {v!r} is not a number")
    try:
        return symbols, [float(v) for v in values]
    except OverflowError as e:
        raise ValueError(f"{path}: frequency too large for a float") from e


def count_characters(text: str) -> tuple[list[str], list[float]]:
    """Return ``(symbols, frequencies)`` of the characters in ``text``.

    Symbols are ordered by first occurrence.
    """

    counts = Counter(text)
    return list(counts.keys()), [float(c) for c in counts.values()]
