"""
MacroEngine
===========
The core expansion loop.  Scans LaTeX-style math markup left to right,
expands ``\\macros`` from the registry, classifies literal characters, and
hands the resulting token list to the assembler.

Expansion is recursive: text macros are spliced back into the input, and
function macros may expand their arguments first (preparse).  Superscripts,
subscripts and brace groups re-enter the engine too.  Two ceilings guard
against runaway input:

    max_depth       nested re-entries of the engine
    max_expansions  text splices (text macros and Text results) in one call

Nothing here raises to the caller.  Anything that cannot be expanded is
emitted as a literal backslash, and scanning resumes one character later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from string import ascii_letters
from typing import Optional

from ...core.config import Settings, get_settings
from .alphabets import LETTER_STYLES
from .assembler import TokenAssembler
from .definitions import (
    AtomClass,
    ExpansionLimitError,
    FuncMacro,
    MacroDefinition,
    MacroResult,
    Style,
    Text,
    TextMacro,
    Token,
    TokenMacro,
)
from .macro_classes import class_macro
from .registry import MacroRegistry, macro_registry
from .scanner import CONTROL_SEQUENCE, BraceCache, collect_arguments

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Literal character classes
# ---------------------------------------------------------------------------
_BIN_CHARS = "-*#+/\u2013"
_REL_CHARS = "=~<>:"
_OPEN_CHARS = "([{"
_CLOSE_CHARS = ")]}?"
_PUNCT_CHARS = ",;!"

_SCRIPT_TRIGGERS = {"^": "superscript", "_": "subscript"}


def classify(char: str) -> Token:
    """Token for a literal (non-letter) character."""
    if char in _BIN_CHARS:
        return Token(AtomClass.BIN, "\u2212" if char == "-" else char)
    if char in _REL_CHARS:
        return Token(AtomClass.REL, char)
    if char in _OPEN_CHARS:
        return Token(AtomClass.OPEN, char)
    if char in _CLOSE_CHARS:
        return Token(AtomClass.CLOSE, char)
    if char in _PUNCT_CHARS:
        return Token(AtomClass.PUNCT, char)
    return Token(AtomClass.ORD, char)


# A brace group behaves like \mathord{...}
GROUP_MACRO = class_macro(AtomClass.ORD)

_LITERAL_BACKSLASH = Token(AtomClass.ORD, "\\")


@dataclass
class _CallState:
    """Expansion counter and brace caches shared by one transform call."""

    remaining: int
    exhausted: bool = False
    braces: dict[int, BraceCache] = field(default_factory=dict)

    def brace_cache(self, depth: int) -> BraceCache:
        # one per depth: nested groups scan their own strings
        return self.braces.setdefault(depth, BraceCache())

    def spend(self, name: str) -> None:
        if self.remaining <= 0:
            if not self.exhausted:
                logger.warning("Macro expansion limit reached at \\%s", name)
                self.exhausted = True
            raise ExpansionLimitError(name)
        self.remaining -= 1


class MacroEngine:
    """
    Transform math markup into plain Unicode text.

    Usage::

        engine = MacroEngine(registry)
        engine.transform(r"\\alpha^2 + \\beta_i")    # 'α² + βᵢ'
    """

    def __init__(self, registry: Optional[MacroRegistry] = None, settings: Optional[Settings] = None) -> None:
        self._registry = registry if registry is not None else macro_registry
        self._settings = settings or get_settings()
        self._letters = LETTER_STYLES[self._settings.letter_style]
        self._assembler = TokenAssembler(
            thin=self._settings.thin_space,
            medium=self._settings.medium_space,
            thick=self._settings.thick_space,
        )

    # ----------------------------------------------------------------- public

    @property
    def registry(self) -> MacroRegistry:
        return self._registry

    def transform(self, source: str) -> str:
        """Expand and render *source*.  Never raises."""
        return self._render(source, self._new_state(), depth=0, style=Style.TEXT)

    def tokenize(self, source: str) -> list[Token]:
        """Expand *source* into the raw token list, before assembly."""
        return self._tokenize(source, self._new_state(), depth=0, style=Style.TEXT)

    # ----------------------------------------------------------------- private

    def _new_state(self) -> _CallState:
        return _CallState(remaining=self._settings.max_expansions)

    def _render(self, source: str, state: _CallState, depth: int, style: Style) -> str:
        tokens = self._tokenize(source, state, depth, style)
        return self._assembler.render(tokens, style)

    def _tokenize(self, source: str, state: _CallState, depth: int, style: Style) -> list[Token]:
        if depth > self._settings.max_depth:
            logger.warning("Macro nesting deeper than %d levels", self._settings.max_depth)
            raise ExpansionLimitError("depth")

        tokens: list[Token] = []
        rest = source
        while rest:
            char = rest[0]
            if char == "\\":
                rest = self._control_sequence(rest, tokens, state, depth, style)
            elif char in _SCRIPT_TRIGGERS:
                rest = self._script(rest, tokens, state, depth, style)
            elif char == "{":
                rest = self._group(rest, tokens, state, depth, style)
            elif char in ascii_letters:
                tokens.append(Token(AtomClass.ORD, self._letter(char)))
                rest = rest[1:]
            elif char.isspace():
                rest = rest[1:]
            else:
                tokens.append(classify(char))
                rest = rest[1:]
        return tokens

    def _letter(self, char: str) -> str:
        if self._letters is None:
            return char
        return self._letters.get(char) or char

    # ------------------------------------------------------------- constructs

    def _control_sequence(self, rest: str, tokens: list[Token], state: _CallState, depth: int, style: Style) -> str:
        match = CONTROL_SEQUENCE.match(rest)
        if match:
            name = match.group(1)
            definition = self._registry.lookup(name)
            if definition is not None:
                remainder = self._expand(name, definition, rest, match.end(), tokens, state, depth, style)
                if remainder is not None:
                    return remainder

        tokens.append(_LITERAL_BACKSLASH)
        return rest[1:]

    def _script(self, rest: str, tokens: list[Token], state: _CallState, depth: int, style: Style) -> str:
        name = _SCRIPT_TRIGGERS[rest[0]]
        definition = self._registry.lookup(name, reserved=True)
        if definition is not None:
            remainder = self._expand(name, definition, rest, 1, tokens, state, depth, style)
            if remainder is not None:
                return remainder

        # no argument: keep the trigger as an ordinary symbol
        tokens.append(classify(rest[0]))
        return rest[1:]

    def _group(self, rest: str, tokens: list[Token], state: _CallState, depth: int, style: Style) -> str:
        remainder = self._expand("mathord", GROUP_MACRO, rest, 0, tokens, state, depth, style)
        if remainder is not None:
            return remainder

        # unterminated
        tokens.append(classify("{"))
        return rest[1:]

    # -------------------------------------------------------------- expansion

    def _expand(
        self,
        name: str,
        definition: MacroDefinition,
        rest: str,
        end: int,
        tokens: list[Token],
        state: _CallState,
        depth: int,
        style: Style,
    ) -> Optional[str]:
        """
        Expand one macro whose name ends at *end*.

        Returns the remaining input on success, or None when the macro
        could not be expanded.  On failure *tokens* is left untouched.
        """
        if isinstance(definition, TokenMacro):
            tokens.append(definition.token)
            return rest[end:]

        # only splices are counted: nothing else can feed the loop forever
        try:
            if isinstance(definition, TextMacro):
                state.spend(name)
                return definition.text + rest[end:]

            args, end = collect_arguments(rest, end, definition.arity, state.brace_cache(depth))
            if args is None:
                logger.debug("\\%s expects %d argument(s)", name, definition.arity)
                return None

            if definition.preparse:
                inner = max(style, definition.style)
                args = [self._render(arg, state, depth + 1, inner) for arg in args]

            result = self._call(name, definition, args)
            if isinstance(result, Text):
                state.spend(name)
                return result.value + rest[end:]

        except ExpansionLimitError:
            return None
        except RecursionError:
            logger.warning("Recursion limit hit while expanding \\%s", name)
            return None

        if result is None:
            return None
        if isinstance(result, Token):
            tokens.append(result)
        else:
            tokens.extend(result)
        return rest[end:]

    @staticmethod
    def _call(name: str, definition: FuncMacro, args: list[str]) -> MacroResult:
        """Invoke a handler; failures are reported and mapped to None."""
        try:
            result = definition.handler(args)
        except Exception:
            logger.warning("Macro \\%s raised an error", name, exc_info=True)
            return None

        if result is None or isinstance(result, (Token, Text)):
            return result
        if isinstance(result, (list, tuple)) and all(isinstance(t, Token) for t in result):
            return result

        logger.warning("Macro \\%s returned unsupported %s", name, type(result).__name__)
        return None
