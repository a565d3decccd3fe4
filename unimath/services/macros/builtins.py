"""
Built-in macro registrations.
Call register_all_builtins() once at application startup, before any
custom macros are added.
"""

from .registry import MacroRegistry, macro_registry
from . import (
    macro_accents,
    macro_classes,
    macro_fonts,
    macro_operators,
    macro_symbols,
)


def register_all_builtins(registry: MacroRegistry = macro_registry) -> MacroRegistry:
    """Register every built-in macro with *registry* (the shared one by default)."""
    macro_symbols.register(registry)
    macro_operators.register(registry)
    macro_classes.register(registry)
    macro_fonts.register(registry)
    macro_accents.register(registry)
    return registry


def create_registry() -> MacroRegistry:
    """A fresh registry holding only the built-ins."""
    return register_all_builtins(MacroRegistry())
