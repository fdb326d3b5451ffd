"""Selection value types and the membership predicate.

A ``Selection`` is immutable once built. The ``SOME`` variant keeps its
elements in the order they were given; canonical ordering is the job of
``core.normalize``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple, Union


class SelectionKind(Enum):
    ALL = "all"
    NONE = "none"
    SOME = "some"


@dataclass(frozen=True)
class Individual:
    """A single selected integer."""

    value: int

    def contains(self, item: int) -> bool:
        return item == self.value

    def bounds(self) -> Tuple[int, int]:
        return self.value, self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Range:
    """An inclusive range of integers. Empty when ``start > end``."""

    start: int
    end: int

    def contains(self, item: int) -> bool:
        return self.start <= item <= self.end

    def bounds(self) -> Tuple[int, int]:
        return self.start, self.end

    def is_empty(self) -> bool:
        return self.start > self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


Element = Union[Individual, Range]


@dataclass(frozen=True)
class Selection:
    """A parsed selection: all, none, or some list of elements."""

    kind: SelectionKind
    elements: Tuple[Element, ...] = ()

    @classmethod
    def all(cls) -> "Selection":
        return cls(SelectionKind.ALL)

    @classmethod
    def none(cls) -> "Selection":
        return cls(SelectionKind.NONE)

    @classmethod
    def some(cls, elements: Iterable[Element]) -> "Selection":
        return cls(SelectionKind.SOME, tuple(elements))

    @classmethod
    def from_str(cls, text: str) -> "Selection":
        """Parse ``text`` and reduce its elements to canonical form.

        Raises ``ParseFailure`` when the text is not a valid choice string.
        """
        from .grammar import parse_raw
        from .normalize import normalize

        return normalize(parse_raw(text))

    def contains_item(self, item: int) -> bool:
        """Check if ``item`` is selected.

        True for ``ALL``, false for ``NONE``, otherwise true when any element
        contains it. Works on unreduced element lists too.
        """
        if item < 0:
            return False
        if self.kind is SelectionKind.ALL:
            return True
        if self.kind is SelectionKind.NONE:
            return False
        return any(element.contains(item) for element in self.elements)

    def __contains__(self, item: int) -> bool:
        return self.contains_item(item)

    def members(self, upper: int) -> List[int]:
        """Return the selected integers in ``[0, upper]``, ascending."""
        if upper < 0 or self.kind is SelectionKind.NONE:
            return []
        if self.kind is SelectionKind.ALL:
            return list(range(0, upper + 1))
        found = set()
        for element in self.elements:
            lo, hi = element.bounds()
            found.update(range(lo, min(hi, upper) + 1))
        return sorted(found)

    def __str__(self) -> str:
        """Render as a choice string.

        The text parses back to an equal canonical selection, except for an
        empty ``SOME`` which renders as ``""`` and so parses back as ``NONE``.
        """
        if self.kind is SelectionKind.ALL:
            return "all"
        if self.kind is SelectionKind.NONE:
            return "none"
        return ",".join(str(element) for element in self.elements)
