"""
Class and text macros
---------------------
\\mathord{x} ... \\mathinner{x}   force the atom class of an expanded argument
\\not{x}                          negated relation (combining long solidus)
\\text{x}, \\textrm{x}, \\mbox{x}  raw argument as one Ord, no expansion
\\operatorname{x}                 \\mathop{\\textrm{x}}
\\sqrt{x}                         \\surd(x)
\\mod{x}, \\pmod{x}               spaced "mod x" / "(mod x)"
"""

from __future__ import annotations

from typing import Sequence

from .definitions import AtomClass, FuncMacro, Text, Token
from .registry import MacroRegistry

_NOT_OVERLAY = "\u0338"

_CLASS_MACROS = {
    "mathord": AtomClass.ORD,
    "mathop": AtomClass.OP,
    "mathbin": AtomClass.BIN,
    "mathrel": AtomClass.REL,
    "mathopen": AtomClass.OPEN,
    "mathclose": AtomClass.CLOSE,
    "mathpunct": AtomClass.PUNCT,
    "mathinner": AtomClass.INNER,
}


def class_macro(atom: AtomClass) -> FuncMacro:
    def handler(args: Sequence[str]) -> Token:
        return Token(atom, args[0])
    return FuncMacro(arity=1, handler=handler, preparse=True)


def register(registry: MacroRegistry) -> None:

    for name, atom in _CLASS_MACROS.items():
        registry.register(name, class_macro(atom))

    def negate(args):
        return Token(AtomClass.REL, args[0] + _NOT_OVERLAY)

    registry.register("not", FuncMacro(arity=1, handler=negate, preparse=True))

    def text(args):
        return Token(AtomClass.ORD, args[0])

    for name in ("text", "textrm", "mbox"):
        registry.register(name, FuncMacro(arity=1, handler=text))

    def operatorname(args):
        return Text(f"\\mathop{{\\textrm{{{args[0]}}}}}")

    def sqrt(args):
        return Text(f"\\surd({args[0]})")

    def mod(args):
        return Text(f"\\quad\\textrm{{mod}}\\,\\,{args[0]}")

    def pmod(args):
        return Text(f"\\quad(\\textrm{{mod}}\\,\\,{args[0]})")

    registry.register("operatorname", FuncMacro(arity=1, handler=operatorname))
    registry.register("sqrt", FuncMacro(arity=1, handler=sqrt))
    registry.register("mod", FuncMacro(arity=1, handler=mod))
    registry.register("pmod", FuncMacro(arity=1, handler=pmod))
