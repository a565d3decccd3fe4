"""
Inline math segments
====================
Rewrites the math part of a larger piece of text::

    Let \\math x^2 \\geq 0 \\endmath for all real x.

Only the last ``\\math ... \\endmath`` span is transformed; the text before
and after it is returned untouched.  ``\\math`` must be followed by
whitespace or a non-letter, so ``\\mathbb`` never opens a span.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .macros.engine import MacroEngine

logger = logging.getLogger(__name__)

_SEGMENT = re.compile(r"(.*)\\math(?:\s+|(?=[^A-Za-z]))(.*)\\endmath(.*)\Z", re.DOTALL)


def find_segment(text: str) -> Optional[tuple[str, str, str]]:
    """Split *text* into (before, math, after), or None without a span."""
    match = _SEGMENT.match(text)
    if match is None:
        return None
    return match.group(1), match.group(2), match.group(3)


def transform_delimited(text: str, engine: MacroEngine) -> str:
    segment = find_segment(text)
    if segment is None:
        logger.debug("No \\math ... \\endmath span found")
        return text

    before, math, after = segment
    return before + engine.transform(math) + after
