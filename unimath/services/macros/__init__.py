"""
Public API of the macro subsystem.
"""

from .definitions import (
    AtomClass,
    FuncMacro,
    MacroDefinition,
    MacroError,
    ReservedNameError,
    Style,
    Text,
    TextMacro,
    Token,
    TokenMacro,
)
from .registry import MacroRegistry, macro_registry
from .engine import MacroEngine
from .assembler import TokenAssembler
from .builtins import create_registry, register_all_builtins

__all__ = [
    "AtomClass",
    "FuncMacro",
    "MacroDefinition",
    "MacroError",
    "ReservedNameError",
    "Style",
    "Text",
    "TextMacro",
    "Token",
    "TokenMacro",
    "MacroRegistry",
    "macro_registry",
    "MacroEngine",
    "TokenAssembler",
    "create_registry",
    "register_all_builtins",
]
