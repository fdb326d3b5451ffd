"""Custom exceptions raised while reading choice strings and configuration."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Lexical category at the point where matching could not proceed."""

    DIGIT = "expected digits"
    EOF = "expected end of input"
    TAG = "expected keyword"
    OVERFLOW = "number too large"


class ParseFailure(ValueError):
    """Raised when a choice string does not match the grammar."""

    def __init__(self, kind: ErrorKind, text: str = ""):
        super().__init__(f"Invalid token: {kind.value}")
        self.kind = kind
        self.text = text


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded."""
