"""
Macro data model
================
Tokens, the three macro definition kinds, and the results a function macro
may hand back to the engine.

    TokenMacro(token)       expands to exactly one token
    TextMacro(text)         text spliced back into the input and re-scanned
    FuncMacro(arity, ...)   consumes *arity* arguments, calls its handler

A handler receives the ordered list of argument strings and returns one of:

    None          expansion failed; the engine degrades to a literal "\\"
    Token         appended as is
    list[Token]   appended in order
    Text(value)   spliced back into the input
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Sequence, Union


class AtomClass(IntEnum):
    """TeX atom classes.  SCRIPT and ACCENT never reach the spacing table."""

    ORD = 0
    OP = 1
    BIN = 2
    REL = 3
    OPEN = 4
    CLOSE = 5
    PUNCT = 6
    INNER = 7
    SCRIPT = 8
    ACCENT = 9


class Style(IntEnum):
    TEXT = 0
    SCRIPT = 1


@dataclass(frozen=True)
class Token:
    atom: AtomClass
    text: str


@dataclass(frozen=True)
class Text:
    value: str


MacroResult = Optional[Union[Token, Sequence[Token], Text]]
MacroHandler = Callable[[Sequence[str]], MacroResult]


@dataclass(frozen=True)
class TokenMacro:
    token: Token


@dataclass(frozen=True)
class TextMacro:
    text: str


@dataclass(frozen=True)
class FuncMacro:
    arity: int
    handler: MacroHandler
    preparse: bool = False
    style: Style = Style.TEXT   # style used when preparsing arguments


MacroDefinition = Union[TokenMacro, TextMacro, FuncMacro]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class MacroError(Exception):
    """Base class for macro subsystem errors."""


class ReservedNameError(MacroError):
    """Raised when a host tries to register one of the internal macro names."""

    def __init__(self, name: str) -> None:
        super().__init__(f"\\{name} is reserved for internal use")
        self.name = name


class ExpansionLimitError(MacroError):
    """Raised when a transform exceeds its depth or expansion ceiling."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def as_definition(value) -> MacroDefinition:
    """Coerce a custom-table value into a macro definition."""
    if isinstance(value, (TokenMacro, TextMacro, FuncMacro)):
        return value
    if isinstance(value, Token):
        return TokenMacro(value)
    if isinstance(value, str):
        return TextMacro(value)
    raise TypeError(
        f"cannot build a macro from {type(value).__name__}; "
        "wrap callables with MacroRegistry.function()"
    )


def adapt_callable(fn: Callable[..., object]) -> MacroHandler:
    """
    Wrap a plain ``fn(*args)`` so it satisfies the handler contract.

    ``None`` means the macro does not expand; results that are already
    tokens or Text pass through; anything else is stringified and spliced
    back into the input.  Return ``""`` to expand to nothing.
    """
    def handler(args: Sequence[str]) -> MacroResult:
        value = fn(*args)
        if value is None or isinstance(value, (Token, Text)):
            return value
        if isinstance(value, (list, tuple)) and all(isinstance(t, Token) for t in value):
            return list(value)
        return Text(str(value))

    handler.__name__ = getattr(fn, "__name__", "handler")
    return handler
