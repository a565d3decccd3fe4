"""
Operator-name macros
--------------------
\\sin, \\log, \\lim, ... are text macros built on \\mathop{\\textrm{...}} so
they pick up Op spacing, as in plain TeX.
"""

from __future__ import annotations

from .registry import MacroRegistry

OPERATOR_NAMES = (
    "arccos", "arcsin", "arctan", "arg", "cos", "cosh", "cot", "coth",
    "csc", "deg", "det", "dim", "exp", "gcd", "hom", "inf", "ker", "lg",
    "lim", "ln", "log", "max", "min", "sec", "sin", "sinh", "sup", "tan",
    "tanh", "Pr",
)

TEXT_MACROS = {
    "liminf": "\\mathop{\\textrm{lim}\\,\\textrm{inf}}",
    "limsup": "\\mathop{\\textrm{lim}\\,\\textrm{sup}}",
    "bmod": "\\mathbin{\\textrm{mod}}",
    "Re": "\\mathfrak{R}",
    "Im": "\\mathfrak{I}",
    "limits": "",
    "nolimits": "",
}


def register(registry: MacroRegistry) -> None:
    for name in OPERATOR_NAMES:
        registry.register(name, f"\\mathop{{\\textrm{{{name}}}}}")

    registry.update(TEXT_MACROS)
