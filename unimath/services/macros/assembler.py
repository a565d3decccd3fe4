"""
Token assembler
===============
Turns the engine's flat token list into the final string.

Passes, in order:

1. accent folding   an ACCENT token's combining mark is inserted after the
                    first character of the token that follows it
2. script folding   a SCRIPT token's text is appended to the token before it
3. Bin coercion     a Bin with no operand-bearing left neighbour, or that is
                    followed by a Rel/Close/Punct or by nothing, becomes Ord
4. rendering        token texts joined with the inter-atom spacing below

Spacing follows the TeXbook (Chapter 18, Appendix G).  A parenthesised entry
is only used in text style; in script style it collapses to no space.
"""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum
from typing import Iterable, Optional

from .definitions import AtomClass, Style, Token

ACCENT_PLACEHOLDER = "\u00a0"


class Spacing(IntEnum):
    NONE = 0
    THIN = 1
    MEDIUM = 2
    THICK = 3


# ---------------------------------------------------------------------------
# Inter-atom spacing table
#   0 = none, 1 = thin, 2 = medium, 3 = thick, * = cannot occur
# ---------------------------------------------------------------------------
_SPACING_SOURCE = """
        Ord  Op   Bin  Rel  Open Close Punct Inner
Ord     0    1    (2)  (3)  0    0     0     (1)
Op      1    1    *    (3)  0    0     0     (1)
Bin     (2)  (2)  *    *    (2)  *     *     (2)
Rel     (3)  (3)  *    0    (3)  0     0     (3)
Open    0    0    *    0    0    0     0     0
Close   0    1    (2)  (3)  0    0     0     (1)
Punct   (1)  (1)  *    (1)  (1)  (1)   (1)   (1)
Inner   (1)  1    (2)  (3)  (1)  0     (1)   (1)
"""


def _parse_spacing(source: str) -> dict[tuple[AtomClass, AtomClass], tuple[Spacing, bool]]:
    """Build ``{(left, right): (spacing, text_style_only)}`` from the grid."""
    lines = [line.split() for line in source.strip().splitlines()]
    header = [AtomClass[name.upper()] for name in lines[0]]
    table: dict[tuple[AtomClass, AtomClass], tuple[Spacing, bool]] = {}
    for row in lines[1:]:
        left = AtomClass[row[0].upper()]
        for right, cell in zip(header, row[1:]):
            if cell == "*":
                continue
            text_only = cell.startswith("(")
            table[(left, right)] = (Spacing(int(cell.strip("()"))), text_only)
    return table


SPACING_TABLE = _parse_spacing(_SPACING_SOURCE)

_OPERAND_LEFT = (AtomClass.ORD, AtomClass.CLOSE)
_ENDS_BIN = (AtomClass.REL, AtomClass.CLOSE, AtomClass.PUNCT)


class TokenAssembler:
    """
    Render token lists.

    Usage::

        assembler = TokenAssembler(thin="\\u2006", medium="\\u205f", thick="\\u2005")
        text = assembler.render(tokens)
    """

    def __init__(self, thin: str, medium: str, thick: str) -> None:
        self._spaces = {
            Spacing.NONE: "",
            Spacing.THIN: thin,
            Spacing.MEDIUM: medium,
            Spacing.THICK: thick,
        }

    # ----------------------------------------------------------------- public

    def render(self, tokens: Iterable[Token], style: Style = Style.TEXT) -> str:
        atoms = self.fixup(tokens)
        if not atoms:
            return ""

        parts = [atoms[0].text]
        for left, right in zip(atoms, atoms[1:]):
            parts.append(self.space_between(left.atom, right.atom, style))
            parts.append(right.text)
        return "".join(parts)

    def space_between(self, left: AtomClass, right: AtomClass, style: Style = Style.TEXT) -> str:
        spacing, text_only = SPACING_TABLE.get((left, right), (Spacing.NONE, False))
        if text_only and style is Style.SCRIPT:
            return ""
        return self._spaces[spacing]

    @staticmethod
    def fixup(tokens: Iterable[Token]) -> list[Token]:
        """Run the folding and coercion passes; only TeX-visible atoms remain."""
        atoms = _fold_accents(list(tokens))
        atoms = _fold_scripts(atoms)
        return _coerce_bins(atoms)


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------

def _fold_accents(tokens: list[Token]) -> list[Token]:
    if tokens and tokens[-1].atom is AtomClass.ACCENT:
        tokens.append(Token(AtomClass.ORD, ACCENT_PLACEHOLDER))

    folded: list[Token] = []
    marks: list[str] = []
    for token in tokens:
        if token.atom is AtomClass.ACCENT:
            marks.append(token.text)
            continue
        if marks:
            # innermost accent sits closest to the base character
            stacked = "".join(reversed(marks))
            token = replace(token, text=token.text[:1] + stacked + token.text[1:])
            marks = []
        folded.append(token)
    return folded


def _fold_scripts(tokens: list[Token]) -> list[Token]:
    if tokens and tokens[0].atom in (AtomClass.SCRIPT, AtomClass.BIN):
        tokens[0] = replace(tokens[0], atom=AtomClass.ORD)

    folded: list[Token] = []
    for token in tokens:
        if token.atom is AtomClass.SCRIPT:
            folded[-1] = replace(folded[-1], text=folded[-1].text + token.text)
        else:
            folded.append(token)
    return folded


def _coerce_bins(tokens: list[Token]) -> list[Token]:
    previous: Optional[Token] = None
    for i, token in enumerate(tokens):
        if token.atom is AtomClass.BIN and (previous is None or previous.atom not in _OPERAND_LEFT):
            token = tokens[i] = replace(token, atom=AtomClass.ORD)
        elif token.atom in _ENDS_BIN and previous is not None and previous.atom is AtomClass.BIN:
            tokens[i - 1] = replace(previous, atom=AtomClass.ORD)
        previous = token

    if tokens and tokens[-1].atom is AtomClass.BIN:
        tokens[-1] = replace(tokens[-1], atom=AtomClass.ORD)
    return tokens
