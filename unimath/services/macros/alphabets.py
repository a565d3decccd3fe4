"""
Mathematical alphanumeric alphabets
-----------------------------------
Maps plain ASCII letters and digits onto the styled ranges of the Unicode
Mathematical Alphanumeric Symbols block.  Some letters were encoded in
Letterlike Symbols before the block existed; those slots are reserved in
the block and live in each alphabet's ``exceptions``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase, ascii_uppercase, digits
from typing import Optional


@dataclass(frozen=True)
class Alphabet:
    capital: Optional[int]
    small: Optional[int]
    digit: Optional[int] = None
    exceptions: dict[str, str] = field(default_factory=dict)

    def get(self, char: str) -> Optional[str]:
        """Styled form of *char*, or None if this alphabet has none."""
        if char in self.exceptions:
            return self.exceptions[char]
        if self.capital is not None and char in ascii_uppercase:
            return chr(self.capital + ord(char) - ord("A"))
        if self.small is not None and char in ascii_lowercase:
            return chr(self.small + ord(char) - ord("a"))
        if self.digit is not None and char in digits:
            return chr(self.digit + ord(char) - ord("0"))
        return None


ITALIC = Alphabet(0x1D434, 0x1D44E, exceptions={"h": "ℎ"})
SANS_ITALIC = Alphabet(0x1D608, 0x1D622)
BOLD = Alphabet(0x1D400, 0x1D41A, 0x1D7CE)
SANS = Alphabet(0x1D5A0, 0x1D5BA, 0x1D7E2)
MONOSPACE = Alphabet(0x1D670, 0x1D68A, 0x1D7F6)
DOUBLE_STRUCK = Alphabet(0x1D538, 0x1D552, 0x1D7D8, exceptions={
    "C": "ℂ", "H": "ℍ", "N": "ℕ", "P": "ℙ",
    "Q": "ℚ", "R": "ℝ", "Z": "ℤ",
    "π": "ℼ", "γ": "ℽ", "Γ": "ℾ",
    "Π": "ℿ", "Σ": "⅀",
})
FRAKTUR = Alphabet(0x1D504, 0x1D51E, exceptions={
    "C": "ℭ", "H": "ℌ", "I": "ℑ", "R": "ℜ", "Z": "ℨ",
})
SCRIPT = Alphabet(0x1D49C, 0x1D4B6, exceptions={
    "B": "ℬ", "E": "ℰ", "F": "ℱ", "H": "ℋ",
    "I": "ℐ", "L": "ℒ", "M": "ℳ", "R": "ℛ",
    "e": "ℯ", "g": "ℊ", "o": "ℴ",
})

LETTER_STYLES: dict[str, Optional[Alphabet]] = {
    "italic": ITALIC,
    "sans-italic": SANS_ITALIC,
    "upright": None,
}


def _build_plain_map() -> dict[str, str]:
    plain: dict[str, str] = {}
    for alphabet in (ITALIC, SANS_ITALIC, BOLD, SANS, MONOSPACE, DOUBLE_STRUCK, FRAKTUR, SCRIPT):
        for char in ascii_uppercase + ascii_lowercase + digits:
            styled = alphabet.get(char)
            if styled is not None:
                plain[styled] = char
        for char, styled in alphabet.exceptions.items():
            plain[styled] = char
    return plain


_PLAIN = _build_plain_map()


def plain(char: str) -> str:
    """Undo any alphabet styling on a single character."""
    return _PLAIN.get(char, char)


def restyle(text: str, alphabet: Alphabet) -> list[str]:
    """Restyle each character of *text*; unstyleable characters are kept."""
    return [alphabet.get(plain(char)) or char for char in text]
