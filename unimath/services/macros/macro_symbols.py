"""
Symbol macros
-------------
Constant single-token macros: Greek letters, large operators, binary
operators, relations, delimiters, ellipses, spacing and escaped specials.

Capital Greek letters that look like Latin ones (\\Alpha, \\Beta, ...) are
text macros expanding to the upright Latin letter.
"""

from __future__ import annotations

from .definitions import AtomClass, Token
from .registry import MacroRegistry


def _table(atom: AtomClass, entries: dict[str, str]) -> dict[str, Token]:
    return {name: Token(atom, text) for name, text in entries.items()}


ORDINARY = _table(AtomClass.ORD, {
    # Greek, lower case
    "alpha": "α", "beta": "β", "gamma": "γ", "delta": "δ",
    "epsilon": "ϵ", "varepsilon": "ε", "zeta": "ζ", "eta": "η",
    "theta": "θ", "vartheta": "ϑ", "iota": "ι", "kappa": "κ",
    "varkappa": "ϰ", "lambda": "λ", "mu": "μ", "nu": "ν",
    "xi": "ξ", "pi": "π", "varpi": "ϖ", "rho": "ρ",
    "varrho": "ϱ", "sigma": "σ", "varsigma": "ς", "tau": "τ",
    "upsilon": "υ", "phi": "ϕ", "varphi": "φ", "chi": "χ",
    "psi": "ψ", "omega": "ω",
    # Greek, upper case
    "Gamma": "Γ", "Delta": "Δ", "Theta": "Θ", "Lambda": "Λ",
    "Xi": "Ξ", "Pi": "Π", "Sigma": "Σ", "Upsilon": "ϒ",
    "Phi": "Φ", "Psi": "Ψ", "Omega": "Ω",
    # Letter-like and miscellaneous
    "aleph": "ℵ", "hbar": "ℏ", "hslash": "ℏ", "imath": "ı",
    "jmath": "ȷ", "ell": "ℓ", "wp": "℘", "partial": "∂",
    "nabla": "∇", "infty": "∞", "emptyset": "∅", "varnothing": "∅",
    "forall": "∀", "exists": "∃", "nexists": "∄", "neg": "¬",
    "lnot": "¬", "angle": "∠", "triangle": "△", "prime": "′",
    "surd": "√", "top": "⊤", "bot": "⊥", "setminus": "∖",
    "flat": "♭", "natural": "♮", "sharp": "♯",
    "clubsuit": "♣", "diamondsuit": "♢", "heartsuit": "♡", "spadesuit": "♠",
    "checkmark": "✓", "maltese": "✠", "eth": "ð", "Micro": "µ",
    "P": "¶", "S": "§", "copyright": "©", "circledR": "®",
    "pounds": "£", "vdots": "⋮", "|": "‖",
    # Spacing
    " ": " ",
    ",": "\u2006",
    ":": "\u205f",
    ">": "\u205f",
    ";": "\u2005",
    "enspace": "\u2005" * 2,
    "quad": "\u2005" * 4,
    "qquad": "\u2005" * 8,
    # Escaped specials
    "#": "#", "$": "$", "%": "%", "&": "&", "_": "_",
    "\\": "\\", "^": "^", "~": "~",
})

LARGE_OPERATORS = _table(AtomClass.OP, {
    "sum": "∑", "prod": "∏", "coprod": "∐",
    "int": "∫", "intop": "∫", "smallint": "∫", "iint": "∬", "iiint": "∭",
    "oint": "∮", "ointop": "∮",
    "bigcap": "⋂", "bigcup": "⋃", "bigvee": "⋁", "bigwedge": "⋀",
    "bigodot": "⨀", "bigoplus": "⨁", "bigotimes": "⨂", "biguplus": "⨄",
    "bigsqcap": "⨅", "bigsqcup": "⨆",
})

BINARY_OPERATORS = _table(AtomClass.BIN, {
    "pm": "±", "mp": "∓", "times": "×", "div": "÷",
    "ast": "*", "star": "⭑", "circ": "⚬", "bullet": "∙",
    "cdot": "·", "centerdot": "·", "cap": "∩", "cup": "∪",
    "uplus": "⊎", "sqcap": "⊓", "sqcup": "⊔", "vee": "∨",
    "lor": "∨", "wedge": "∧", "land": "∧", "wr": "≀",
    "amalg": "⨿", "diamond": "◇", "bigcirc": "◯",
    "oplus": "⊕", "ominus": "⊖", "otimes": "⊗", "oslash": "⊘", "odot": "⊙",
    "dagger": "†", "dag": "†", "ddagger": "‡", "ddag": "‡",
    "bigtriangleup": "△", "bigtriangledown": "▽",
    "triangleleft": "◁", "triangleright": "▹",
    "lhd": "⊲", "rhd": "⊳", "unlhd": "⊴", "unrhd": "⊵",
})

RELATIONS = _table(AtomClass.REL, {
    "le": "≤", "leq": "≤", "ge": "≥", "geq": "≥",
    "ne": "≠", "neq": "≠", "ll": "≪", "gg": "≫",
    "approx": "≈", "equiv": "≡", "sim": "∼", "simeq": "≃",
    "cong": "≅", "propto": "∝", "doteq": "≐",
    "prec": "≺", "succ": "≻", "preceq": "⪯", "succeq": "⪰",
    "in": "∈", "notin": "∉", "ni": "∋",
    "subset": "⊂", "supset": "⊃", "subseteq": "⊆", "supseteq": "⊇",
    "sqsubseteq": "⊑", "sqsupseteq": "⊒",
    "mid": "∣", "parallel": "∥", "perp": "⟂",
    "vdash": "⊢", "dashv": "⊣", "models": "⊨",
    "leftarrow": "←", "gets": "←", "rightarrow": "→", "to": "→",
    "leftrightarrow": "↔", "uparrow": "↑", "downarrow": "↓",
    "Leftarrow": "⇐", "Rightarrow": "⇒", "Leftrightarrow": "⇔",
    "mapsto": "↦", "implies": "⟹", "iff": "⟺",
    "leftrightharpoons": "⇋", "rightleftharpoons": "⇌",
})

DELIMITERS = {
    **_table(AtomClass.OPEN, {
        "{": "{", "lbrace": "{", "langle": "⟨", "lgroup": "⟮",
        "lfloor": "⌊", "lceil": "⌈",
    }),
    **_table(AtomClass.CLOSE, {
        "}": "}", "rbrace": "}", "rangle": "⟩", "rgroup": "⟯",
        "rfloor": "⌋", "rceil": "⌉",
    }),
}

PUNCTUATION = _table(AtomClass.PUNCT, {
    "ldotp": ".", "cdotp": "·", "colon": ":",
})

INNER = _table(AtomClass.INNER, {
    "ldots": "…", "dots": "…", "cdots": "⋯", "ddots": "⋱",
})

# Capital Greek letters identical to Latin ones
LATIN_LOOKALIKES = {
    "Alpha": "\\textrm{A}", "Beta": "\\textrm{B}", "Epsilon": "\\textrm{E}",
    "Zeta": "\\textrm{Z}", "Eta": "\\textrm{H}", "Iota": "\\textrm{I}",
    "Kappa": "\\textrm{K}", "Mu": "\\textrm{M}", "Nu": "\\textrm{N}",
    "Omicron": "\\textrm{O}", "omicron": "\\textrm{o}", "Rho": "\\textrm{P}",
    "Tau": "\\textrm{T}", "Chi": "\\textrm{X}",
}

# negative thin space has no Unicode counterpart
NEGATIVE_SPACE = {"!": ""}


def register(registry: MacroRegistry) -> None:
    for table in (ORDINARY, LARGE_OPERATORS, BINARY_OPERATORS, RELATIONS, DELIMITERS, PUNCTUATION, INNER):
        for name, token in table.items():
            registry.register(name, token)

    registry.update(LATIN_LOOKALIKES)
    registry.update(NEGATIVE_SPACE)
