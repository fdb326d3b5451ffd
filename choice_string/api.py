"""Public entry points for parsing choice strings.

Thin wrappers over ``core`` that add debug logging; parsing itself stays in
the pure core package.
"""
from __future__ import annotations

import logging

from .core import Selection
from .core import grammar
from .errors import ParseFailure

logger = logging.getLogger(__name__)


def parse(text: str) -> Selection:
    """Parse ``text`` and condense it to the minimal set of elements.

    Wrapper for ``Selection.from_str``.
    """
    try:
        selection = Selection.from_str(text)
    except ParseFailure as e:
        logger.debug("Rejected choice string %r: %s", text, e.kind.value)
        raise
    logger.debug("Choice string %r parsed as %s", text, selection)
    return selection


def parse_raw(text: str) -> Selection:
    """Parse ``text`` without de-duplicating or condensing its elements."""
    try:
        selection = grammar.parse_raw(text)
    except ParseFailure as e:
        logger.debug("Rejected choice string %r: %s", text, e.kind.value)
        raise
    logger.debug("Choice string %r parsed (raw) as %r", text, selection)
    return selection
