"""
Unimath
=======
Turns LaTeX-style math markup into a single line of Unicode text::

    >>> from unimath import transform
    >>> transform(r"\\alpha^2")
    'α²'

Hosts add their own macros with :func:`register_macro` before the first
call to :func:`transform`.  Built-in names cannot be redefined.
"""

from __future__ import annotations

from functools import lru_cache

from .services.macros import MacroEngine, macro_registry, register_all_builtins

register_all_builtins(macro_registry)


def register_macro(name: str, definition) -> bool:
    """Add a custom macro to the shared registry."""
    return macro_registry.register(name, definition)


@lru_cache
def get_engine() -> MacroEngine:
    return MacroEngine(macro_registry)


def transform(source: str) -> str:
    """Convert *source* markup to Unicode text.  Never raises."""
    return get_engine().transform(source)


__all__ = ["register_macro", "transform", "get_engine", "macro_registry"]
