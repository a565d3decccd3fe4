"""
MacroRegistry: central store of all macro definitions.

Definitions are registered once, before any transform runs, and are
read-only afterwards.  The first registration of a name wins: built-ins are
loaded first, so a custom table can never shadow them.

Register a constant::

    macro_registry.register("R", "\\\\mathbb{R}")                 # TextMacro
    macro_registry.register("degree", Token(AtomClass.ORD, "°"))  # TokenMacro

Register a function with the decorator::

    @macro_registry.function("double", arity=1)
    def double(x):
        return f"{x} + {x}"

The two script macros used for ``^`` and ``_`` live in a separate reserved
table that :meth:`MacroRegistry.register` refuses to touch.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from .definitions import (
    FuncMacro,
    MacroDefinition,
    ReservedNameError,
    adapt_callable,
    as_definition,
)
from .macro_scripts import RESERVED_MACROS

logger = logging.getLogger(__name__)


class MacroRegistry:
    def __init__(self) -> None:
        self._macros: dict[str, MacroDefinition] = {}
        self._reserved: dict[str, MacroDefinition] = dict(RESERVED_MACROS)

    # ---------------------------------------------------------------- register

    def register(self, name: str, definition) -> bool:
        """
        Store *definition* under *name*.

        Returns False (and keeps the existing entry) if *name* is already
        defined.  Plain strings become TextMacros and Tokens TokenMacros.
        """
        if name in self._reserved:
            raise ReservedNameError(name)

        definition = as_definition(definition)
        if name in self._macros:
            logger.info("Skipping macro \\%s: already defined", name)
            return False

        self._macros[name] = definition
        logger.debug("Registered macro: \\%s (%s)", name, type(definition).__name__)
        return True

    def function(self, name: str, arity: int, preparse: bool = False) -> Callable:
        """
        Decorator that registers a plain function as a FuncMacro.

        The function is called with *arity* string arguments.  Returning None
        or raising leaves the macro unexpanded; any other value is spliced
        back into the input as text.
        """
        def decorator(fn: Callable) -> Callable:
            self.register(name, FuncMacro(arity=arity, handler=adapt_callable(fn), preparse=preparse))
            return fn
        return decorator

    def update(self, table: Mapping[str, object]) -> None:
        """Register every entry of a custom macro table, in order."""
        for name, value in table.items():
            self.register(name, value)

    # ------------------------------------------------------------------ lookup

    def has(self, name: str) -> bool:
        return name in self._macros

    def lookup(self, name: str, reserved: bool = False) -> Optional[MacroDefinition]:
        """Find a definition; *reserved* selects the internal table instead."""
        if reserved:
            return self._reserved.get(name)
        return self._macros.get(name)

    # ---------------------------------------------------------- introspection

    def registered_names(self) -> list[str]:
        return sorted(self._macros.keys())

    def __len__(self) -> int:
        return len(self._macros)


# Singleton shared across the application
macro_registry = MacroRegistry()
