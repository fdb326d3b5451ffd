"""
Parser for choice strings such as ``"1-9, 12 15"``, ``"all"`` or ``"none"``.
"""

__all__ = [
    "parse",
    "parse_raw",
    "Selection",
    "SelectionKind",
    "Individual",
    "Range",
    "ErrorKind",
    "ParseFailure",
]

from .core import Selection, SelectionKind, Individual, Range
from .errors import ErrorKind, ParseFailure
from .api import parse, parse_raw
