"""
Argument scanner
================
Decides how much of the input makes up "one argument" to a macro:

1. a balanced brace group      ``{...}``
2. a single control sequence   ``\\alpha`` or ``\\,`` (its own arguments are
   *not* absorbed)
3. otherwise a single character

Leading whitespace is skipped.  An unterminated brace group means no
argument is available.

The engine re-scans the rest of the input after every character, so brace
matching goes through a :class:`BraceCache`.  Each brace is matched at most
once per string, and the answer is reused for every later suffix of it.
"""

from __future__ import annotations

import re
from typing import Optional

# \ followed by a run of letters, or by exactly one non-letter
CONTROL_SEQUENCE = re.compile(r"\\([A-Za-z]+|[^A-Za-z])")

_LEADING_SPACE = re.compile(r"\s*")
_BRACE = re.compile(r"[{}]")


def match_group(text: str, start: int = 0) -> Optional[int]:
    """Offset just past the ``}`` closing the group opened at *start*."""
    depth = 0
    for found in _BRACE.finditer(text, start):
        if found.group() == "{":
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                return found.end()
    return None


# ---------------------------------------------------------------------------
# Brace matching cache
# ---------------------------------------------------------------------------

class BraceIndex:
    """
    Matching braces of one string, found by a single lazy stack pass.

    Braces are keyed by their distance from the end of the string, so an
    answer holds for any text sharing the same tail.  Text macros splice a
    new head onto the unchanged rest of the input, which keeps the tail.
    """

    def __init__(self, text: str, start: int = 0) -> None:
        self._text = text
        self._size = len(text)
        self._first = self._size - start
        self._closes: dict[int, int] = {}
        self._open: list[int] = []
        self._braces = _BRACE.finditer(text, start)
        self._done = False

    def covers(self, text: str, start: int) -> bool:
        key = len(text) - start
        return key <= self._first and text.endswith(self._text[self._size - key:])

    def resolved(self, key: int) -> bool:
        return self._done or key in self._closes

    def match(self, text: str, start: int) -> Optional[int]:
        key = len(text) - start
        while not self.resolved(key):
            self._advance()
        end = self._closes.get(key)
        return None if end is None else len(text) - end

    def _advance(self) -> None:
        found = next(self._braces, None)
        if found is None:
            self._done = True
            return
        distance = self._size - found.start()
        if found.group() == "{":
            self._open.append(distance)
        elif self._open:
            self._closes[self._open.pop()] = distance - 1


class BraceCache:
    """The few most recently used :class:`BraceIndex` objects."""

    def __init__(self, size: int = 4) -> None:
        self._size = size
        self._indexes: list[BraceIndex] = []

    def match(self, text: str, start: int = 0) -> Optional[int]:
        """Same result as :func:`match_group`."""
        key = len(text) - start
        covering = [index for index in self._indexes if index.covers(text, start)]
        ready = [index for index in covering if index.resolved(key)]
        if ready:
            index = ready[0]
        elif covering:
            index = covering[0]
        else:
            index = BraceIndex(text, start)

        if index in self._indexes:
            self._indexes.remove(index)
        self._indexes.insert(0, index)
        del self._indexes[self._size:]
        return index.match(text, start)


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------

def scan_argument(text: str, offset: int = 0, braces: Optional[BraceCache] = None) -> Optional[int]:
    """Return the end offset of the argument starting at *offset*, or None."""
    pos = _LEADING_SPACE.match(text, offset).end()
    if pos >= len(text):
        return None

    if text[pos] == "{":
        if braces is not None:
            return braces.match(text, pos)
        return match_group(text, pos)

    match = CONTROL_SEQUENCE.match(text, pos)
    if match:
        return match.end()

    return pos + 1


def collect_arguments(
    text: str,
    offset: int,
    count: int,
    braces: Optional[BraceCache] = None,
) -> tuple[Optional[list[str]], int]:
    """
    Scan *count* consecutive arguments starting at *offset*.

    Returns ``(args, end)``; *args* is None when fewer than *count*
    arguments could be scanned.
    """
    args: list[str] = []
    for _ in range(count):
        end = scan_argument(text, offset, braces)
        if end is None:
            return None, offset
        args.append(unwrap(text[offset:end]))
        offset = end
    return args, offset


def unwrap(span: str) -> str:
    """Strip the braces of a ``{...}`` argument (and inner leading space)."""
    span = span.lstrip()
    if span.startswith("{") and span.endswith("}"):
        return span[1:-1].lstrip()
    return span
