#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables (prefix ``UNIMATH_``)
or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LetterStyle = Literal["italic", "sans-italic", "upright"]


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="UNIMATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "Unimath"
    app_version: str = "0.3.0"
    debug: bool = False
    log_level: str = "INFO"

    # ── Typesetting ────────────────────────────────────────────────────────

    # italic      abcxyz => 𝑎𝑏𝑐𝑥𝑦𝑧  (TeX default)
    # sans-italic abcxyz => 𝘢𝘣𝘤𝘹𝘺𝘻
    # upright     abcxyz => abcxyz
    letter_style: LetterStyle = "italic"

    thin_space: str = "\u2006"     # 3/18 em
    # 4/18 em; hosts matching renderers that use the thin space for medium
    # spacing too (e.g. older plain-text math scripts) set this to "\u2006"
    medium_space: str = "\u205f"
    thick_space: str = "\u2005"    # 5/18 em (closest available: 4.5/18)

    # ── Expansion guards ───────────────────────────────────────────────────

    max_depth: int = Field(default=100, ge=1)          # nested re-entries
    max_expansions: int = Field(default=10000, ge=1)   # text and function expansions per transform


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
