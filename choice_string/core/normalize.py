"""Reduce selection elements to their canonical form.

The canonical form is the smallest ascending list of disjoint elements
covering the same integers. Ranges that overlap or touch (``hi + 1 == lo``)
are merged, single-integer ranges become ``Individual`` elements and empty
ranges are dropped.
"""
from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Iterable, Iterator, List, Tuple

from .selection import Element, Individual, Range, Selection, SelectionKind


class RangeUnion:
    """Sorted set of disjoint, non-adjacent inclusive integer ranges."""

    def __init__(self):
        # Parallel lists; both ascending because the ranges are disjoint.
        self._starts: List[int] = []
        self._ends: List[int] = []

    def insert(self, lo: int, hi: int) -> None:
        """Add ``[lo, hi]``, merging with every range it overlaps or touches."""
        if lo > hi:
            raise ValueError(f"empty range {lo}-{hi}")
        first = bisect_left(self._ends, lo - 1)
        last = bisect_right(self._starts, hi + 1)
        if first < last:
            lo = min(lo, self._starts[first])
            hi = max(hi, self._ends[last - 1])
        self._starts[first:last] = [lo]
        self._ends[first:last] = [hi]

    def ranges(self) -> List[Tuple[int, int]]:
        return list(zip(self._starts, self._ends))

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.ranges())

    def __len__(self) -> int:
        return len(self._starts)


def condense_elements(elements: Iterable[Element]) -> Tuple[Element, ...]:
    """Union ``elements`` into the canonical tuple of ``Individual``/``Range``."""
    union = RangeUnion()
    for element in elements:
        if isinstance(element, Range) and element.is_empty():
            continue
        lo, hi = element.bounds()
        try:
            union.insert(lo, hi)
        except ValueError as e:
            raise RuntimeError(f"bad ranges - normalizer invariant violated: {e}") from e

    return tuple(
        Individual(lo) if lo == hi else Range(lo, hi)
        for lo, hi in union
    )


def normalize(selection: Selection) -> Selection:
    """Return ``selection`` with its elements condensed; ALL/NONE pass through."""
    if selection.kind is not SelectionKind.SOME:
        return selection
    return Selection.some(condense_elements(selection.elements))
