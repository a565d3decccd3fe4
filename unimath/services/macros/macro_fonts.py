"""
Font macros
-----------
\\mathrm{x}      drop letter styling, one Ord token
\\mathbb{x}      double-struck  ℝ
\\mathfrak{x}    fraktur        𝔤
\\mathtt{x}      monospace      𝚡
\\mathbf{x}      bold           𝐱
\\mathsf{x}      sans-serif     𝗑
\\mathcal{x}     script         𝒳

The argument is expanded first, so letters arrive already styled by the
engine; they are mapped back to plain letters before restyling.  Characters
an alphabet has no form for are kept unchanged.
"""

from __future__ import annotations

from .alphabets import BOLD, DOUBLE_STRUCK, FRAKTUR, MONOSPACE, SANS, SCRIPT, Alphabet, plain, restyle
from .definitions import AtomClass, FuncMacro, Token
from .registry import MacroRegistry

FONT_ALPHABETS = {
    "mathbb": DOUBLE_STRUCK,
    "mathfrak": FRAKTUR,
    "mathtt": MONOSPACE,
    "mathbf": BOLD,
    "mathsf": SANS,
    "mathcal": SCRIPT,
}


def font_macro(alphabet: Alphabet) -> FuncMacro:
    def handler(args):
        return [Token(AtomClass.ORD, char) for char in restyle(args[0], alphabet)]
    return FuncMacro(arity=1, handler=handler, preparse=True)


def register(registry: MacroRegistry) -> None:

    for name, alphabet in FONT_ALPHABETS.items():
        registry.register(name, font_macro(alphabet))

    def mathrm(args):
        return Token(AtomClass.ORD, "".join(plain(char) for char in args[0]))

    registry.register("mathrm", FuncMacro(arity=1, handler=mathrm, preparse=True))
