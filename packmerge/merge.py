"""Lazy two-way ordered merge with side tagging.

``merge`` interleaves two ascending iterables into one stream. A caller
supplied ``pick(head_a, head_b)`` decides which head is emitted next, so the
ordering (and the tie rule) lives entirely in the caller. Every emitted item
is wrapped in :class:`FromA` or :class:`FromB` to record its origin.

Example
-------
>>> from packmerge.merge import merge, Pick, FromA, FromB
>>> out = list(merge([1, 4], [2, 3], lambda a, b: Pick.A if a < b else Pick.B))
>>> out == [FromA(1), FromB(2), FromB(3), FromA(4)]
True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from operator import length_hint
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, Union

T1 = TypeVar("T1")
T2 = TypeVar("T2")


class Pick(Enum):
    """Which side a merge step consumes."""

    A = "a"
    B = "b"


@dataclass(frozen=True)
class FromA(Generic[T1]):
    """An element that came from the first input."""

    value: T1


@dataclass(frozen=True)
class FromB(Generic[T2]):
    """An element that came from the second input."""

    value: T2


Either = Union[FromA[Any], FromB[Any]]

# Head states: not yet pulled from the source, or source finished.
_PENDING = object()
_EXHAUSTED = object()


class MergeIter(Generic[T1, T2]):
    """One-shot iterator merging two ascending sources.

    At most one head per side is buffered. A head is pulled from its source
    only when it is needed to decide the next step, and ``pick`` is only
    consulted while both sides still have a head. Once both sides are
    exhausted the iterator keeps raising ``StopIteration``.
    """

    def __init__(
        self,
        a: Iterable[T1],
        b: Iterable[T2],
        pick: Callable[[T1, T2], Pick],
    ) -> None:
        self._source_a: Iterator[T1] = iter(a)
        self._source_b: Iterator[T2] = iter(b)
        self._pick = pick
        self._head_a: Any = _PENDING
        self._head_b: Any = _PENDING

    def __iter__(self) -> "MergeIter[T1, T2]":
        return self

    def __next__(self) -> Either:
        if self._head_a is _PENDING:
            self._head_a = next(self._source_a, _EXHAUSTED)
        if self._head_b is _PENDING:
            self._head_b = next(self._source_b, _EXHAUSTED)

        head_a, head_b = self._head_a, self._head_b
        if head_a is _EXHAUSTED and head_b is _EXHAUSTED:
            raise StopIteration
        if head_b is _EXHAUSTED:
            return self._take_a(head_a)
        if head_a is _EXHAUSTED:
            return self._take_b(head_b)

        choice = self._pick(head_a, head_b)
        if choice is Pick.A:
            return self._take_a(head_a)
        if choice is Pick.B:
            return self._take_b(head_b)
        raise TypeError(f"pick must return a Pick member, got {choice!r}")

    def __length_hint__(self) -> int:
        hint = 0
        for head, source in ((self._head_a, self._source_a), (self._head_b, self._source_b)):
            if head is _EXHAUSTED:
                continue
            if head is not _PENDING:
                hint += 1
            hint += length_hint(source)
        return hint

    def _take_a(self, head: T1) -> FromA[T1]:
        self._head_a = _PENDING
        return FromA(head)

    def _take_b(self, head: T2) -> FromB[T2]:
        self._head_b = _PENDING
        return FromB(head)


def merge(
    a: Iterable[T1],
    b: Iterable[T2],
    pick: Callable[[T1, T2], Pick],
) -> MergeIter[T1, T2]:
    """Return a lazy merge of ``a`` and ``b`` driven by ``pick``."""

    return MergeIter(a, b, pick)


def package_first(package: float, leaf: float) -> Pick:
    """Choose the package side unless the leaf is strictly smaller."""

    return Pick.A if package <= leaf else Pick.B


__all__ = ["Pick", "FromA", "FromB", "Either", "MergeIter", "merge", "package_first"]
