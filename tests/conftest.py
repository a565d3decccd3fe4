#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Every test gets a fresh registry loaded with the built-ins and an engine
built from explicit default settings, so nothing leaks in from the
environment or from other tests.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from unimath import get_engine
from unimath.core.config import Settings
from unimath.main import create_app
from unimath.services.macros import MacroEngine, MacroRegistry, create_registry

# ── Spacing characters produced with default settings ────────────────────────
THIN = "\u2006"
MEDIUM = "\u205f"
THICK = "\u2005"


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def registry() -> MacroRegistry:
    return create_registry()


@pytest.fixture
def engine(registry: MacroRegistry, settings: Settings) -> MacroEngine:
    return MacroEngine(registry, settings)


@pytest.fixture
def bare_engine(settings: Settings) -> MacroEngine:
    """Engine over an empty registry (reserved script macros only)."""
    return MacroEngine(MacroRegistry(), settings)


# ── HTTP client whose get_engine uses the test's engine ──────────────────────
@pytest_asyncio.fixture
async def client(engine: MacroEngine) -> AsyncGenerator[AsyncClient, None]:
    app = create_app()
    app.dependency_overrides[get_engine] = lambda: engine

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
