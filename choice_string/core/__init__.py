"""
Core logic for choice strings: value types, grammar and range normalization.

Everything in this package is pure and side-effect free.
"""

__all__ = [
    "Selection",
    "SelectionKind",
    "Individual",
    "Range",
    "Element",
    "MAX_ITEM",
    "parse_raw",
    "RangeUnion",
    "condense_elements",
    "normalize",
]

from .selection import Selection, SelectionKind, Individual, Range, Element
from .grammar import MAX_ITEM, parse_raw
from .normalize import RangeUnion, condense_elements, normalize
