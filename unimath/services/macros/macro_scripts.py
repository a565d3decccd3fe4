"""
Superscript / subscript macros
------------------------------
Internal ``superscript`` and ``subscript`` entries used by the engine for ``^`` and ``_``.

The argument is expanded first (in script style), styled letters are mapped
back to plain letters, and each character is replaced by its Unicode
superscript/subscript form where one exists.  Characters without such a form
are kept as they were rendered.

Stand-ins:
    \\circ  -> °    \\prime -> '    \\top -> ᵀ    \\  (control space) -> U+2006
"""

from __future__ import annotations

from typing import Sequence

from .alphabets import plain
from .definitions import AtomClass, FuncMacro, Style, Token

_CONTROL_SPACE = " "

SUPERSCRIPTS: dict[str, str] = {
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "+": "⁺", "-": "⁻", "−": "⁻", "–": "⁻",
    "=": "⁼", "(": "⁽", ")": "⁾",
    "i": "ⁱ", "n": "ⁿ",
    "⚬": "°", "∘": "°",    # \circ
    "′": "'",                        # \prime
    "⊤": "ᵀ",                        # \top
    _CONTROL_SPACE: "\u2006",
}

SUBSCRIPTS: dict[str, str] = {
    "0": "₀", "1": "₁", "2": "₂", "3": "₃", "4": "₄",
    "5": "₅", "6": "₆", "7": "₇", "8": "₈", "9": "₉",
    "+": "₊", "-": "₋", "−": "₋", "–": "₋",
    "=": "₌", "(": "₍", ")": "₎",
    "a": "ₐ", "e": "ₑ", "o": "ₒ", "x": "ₓ", "j": "ⱼ",
    "i": "ᵢ", "r": "ᵣ", "u": "ᵤ", "v": "ᵥ",
    _CONTROL_SPACE: "\u2006",
}


def to_script(text: str, table: dict[str, str]) -> str:
    return "".join(table.get(plain(char), char) for char in text)


def superscript(args: Sequence[str]) -> Token:
    return Token(AtomClass.SCRIPT, to_script(args[0], SUPERSCRIPTS))


def subscript(args: Sequence[str]) -> Token:
    return Token(AtomClass.SCRIPT, to_script(args[0], SUBSCRIPTS))


RESERVED_MACROS = {
    "superscript": FuncMacro(arity=1, handler=superscript, preparse=True, style=Style.SCRIPT),
    "subscript": FuncMacro(arity=1, handler=subscript, preparse=True, style=Style.SCRIPT),
}
