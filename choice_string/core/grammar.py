"""Grammar parser for choice strings.

Recognises, anchored to the whole input::

    selection := "" | "none" | "all" | element (separator element)* separator?
    element   := digits "-" digits | digits
    separator := ("," | ";" | space | tab)+

Alternatives are tried in that order. A failing alternative backtracks to
the next one, unless it already passed a commit point (a matched keyword,
or the ``-`` of a range) in which case the failure is final.

The result is not reduced: elements are returned exactly as written.
"""
from __future__ import annotations

from typing import List

from choice_string.errors import ErrorKind, ParseFailure
from .selection import Element, Individual, Range, Selection

MAX_ITEM = 2 ** 64 - 1

_DIGITS = "0123456789"
_SEPARATORS = ",; \t"


class _Backtrack(Exception):
    """Recoverable mismatch; the next alternative may still match."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def keyword(self, word: str) -> bool:
        chunk = self.text[self.pos:self.pos + len(word)]
        if chunk.lower() != word:
            return False
        self.pos += len(word)
        return True

    def digits(self) -> int:
        start = self.pos
        while self.peek() and self.peek() in _DIGITS:
            self.pos += 1
        if self.pos == start:
            raise _Backtrack(ErrorKind.DIGIT)
        literal = self.text[start:self.pos].lstrip("0") or "0"
        if len(literal) > len(str(MAX_ITEM)):
            raise ParseFailure(ErrorKind.OVERFLOW, self.text)
        value = int(literal)
        if value > MAX_ITEM:
            raise ParseFailure(ErrorKind.OVERFLOW, self.text)
        return value

    def separator(self) -> None:
        if self.at_end():
            return
        start = self.pos
        while self.peek() and self.peek() in _SEPARATORS:
            self.pos += 1
        if self.pos == start:
            raise _Backtrack(ErrorKind.EOF)

    def commit_end(self) -> None:
        if not self.at_end():
            raise ParseFailure(ErrorKind.EOF, self.text)


def _select_none(scanner: _Scanner) -> Selection:
    if scanner.at_end():
        return Selection.none()
    if not scanner.keyword("none"):
        raise _Backtrack(ErrorKind.TAG)
    scanner.commit_end()
    return Selection.none()


def _select_all(scanner: _Scanner) -> Selection:
    if not scanner.keyword("all"):
        raise _Backtrack(ErrorKind.TAG)
    scanner.commit_end()
    return Selection.all()


def _element(scanner: _Scanner) -> Element:
    start = scanner.digits()
    if scanner.peek() != "-":
        return Individual(start)
    scanner.pos += 1
    try:
        end = scanner.digits()
    except _Backtrack as e:
        raise ParseFailure(e.kind, scanner.text) from None
    return Range(start, end)


def _select_some(scanner: _Scanner) -> Selection:
    elements: List[Element] = []
    while True:
        mark = scanner.pos
        try:
            element = _element(scanner)
            scanner.separator()
        except _Backtrack:
            scanner.pos = mark
            if not elements:
                raise
            break
        elements.append(element)
        if scanner.at_end():
            break
    if not scanner.at_end():
        raise _Backtrack(ErrorKind.EOF)
    return Selection.some(elements)


_ALTERNATIVES = (_select_none, _select_all, _select_some)


def parse_raw(text: str) -> Selection:
    """Parse a choice string into a ``Selection`` without condensing it.

    Raises ``ParseFailure`` carrying the error category when the input does
    not match.
    """
    if not isinstance(text, str):
        raise TypeError(f"choice string must be str, not {type(text).__name__}")
    failure = None
    for alternative in _ALTERNATIVES:
        try:
            return alternative(_Scanner(text))
        except _Backtrack as e:
            failure = e
    raise ParseFailure(failure.kind, text)
