"""
Accent macros
-------------
\\hat, \\bar, \\vec, ... produce an ACCENT token carrying a combining mark; the
assembler attaches it to the first character of the following token.

\\overline{x} and \\underline{x} put their mark on every character.
"""

from __future__ import annotations

from .definitions import AtomClass, FuncMacro, Token
from .registry import MacroRegistry

ACCENTS = {
    "grave": "\u0300",
    "acute": "\u0301",
    "hat": "\u0302",
    "widehat": "\u0302",
    "tilde": "\u0303",
    "widetilde": "\u0303",
    "bar": "\u0304",
    "breve": "\u0306",
    "dot": "\u0307",
    "ddot": "\u0308",
    "check": "\u030c",
    "vec": "\u20d7",
}

OVERLAYS = {
    "overline": "\u0305",
    "underline": "\u0332",
}


def overlay_macro(mark: str) -> FuncMacro:
    def handler(args):
        text = "".join(char if char.isspace() else char + mark for char in args[0])
        return Token(AtomClass.ORD, text)
    return FuncMacro(arity=1, handler=handler, preparse=True)


def register(registry: MacroRegistry) -> None:
    for name, mark in ACCENTS.items():
        registry.register(name, Token(AtomClass.ACCENT, mark))

    for name, mark in OVERLAYS.items():
        registry.register(name, overlay_macro(mark))
