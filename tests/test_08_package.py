"""
Package-level API and settings tests
"""

from __future__ import annotations

import pytest

import unimath
from unimath.core.config import Settings
from unimath.services.macros import (
    AtomClass,
    MacroEngine,
    ReservedNameError,
    TextMacro,
    Token,
    create_registry,
)


class TestPackageApi:
    def test_transform(self):
        assert unimath.transform("\\alpha^2") == "α²"

    def test_engine_is_shared(self):
        assert unimath.get_engine() is unimath.get_engine()

    def test_builtins_loaded_on_import(self):
        assert unimath.macro_registry.has("mathbb")
        assert len(unimath.macro_registry) > 250

    def test_register_macro(self):
        assert unimath.register_macro("pkgtestdegree", Token(AtomClass.ORD, "°")) is True
        assert unimath.transform("90\\pkgtestdegree") == "90°"

    def test_builtin_cannot_be_redefined(self):
        assert unimath.register_macro("alpha", "a") is False
        assert unimath.transform("\\alpha") == "α"

    def test_reserved_name(self):
        with pytest.raises(ReservedNameError):
            unimath.register_macro("subscript", "x")

    def test_register_text(self):
        unimath.register_macro("pkgtestreals", "\\mathbb{R}")
        assert unimath.macro_registry.lookup("pkgtestreals") == TextMacro("\\mathbb{R}")
        assert unimath.transform("\\pkgtestreals") == "ℝ"


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.letter_style == "italic"
        assert s.thin_space == "\u2006"
        assert s.medium_space == "\u205f"
        assert s.thick_space == "\u2005"
        assert s.max_depth == 100
        assert s.max_expansions == 10000

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("UNIMATH_LETTER_STYLE", "upright")
        monkeypatch.setenv("UNIMATH_MAX_DEPTH", "7")
        s = Settings(_env_file=None)
        assert s.letter_style == "upright"
        assert s.max_depth == 7

    def test_invalid_letter_style(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, letter_style="gothic")

    def test_limits_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, max_expansions=0)

    def test_medium_space_can_match_thin(self):
        s = Settings(_env_file=None, medium_space="\u2006")
        engine = MacroEngine(create_registry(), s)
        assert engine.transform("a+b") == "𝑎\u2006+\u2006𝑏"
