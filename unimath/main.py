#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Unimath FastAPI Application
===========================
Optional HTTP host around the transform.  Start with:
    uvicorn unimath.main:app --reload
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from unimath.core.config import get_settings
from unimath.routes import transform


# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup / shutdown."""
        logging.basicConfig(
            level=logging.DEBUG if settings.debug else settings.log_level.upper(),
            format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        )
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="LaTeX-style math markup to Unicode text",
        lifespan=lifespan,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )

    # ── Routers ───────────────────────────────────────────────────────────
    API = "/api/v1"
    app.include_router(transform.router, prefix=API)

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/api/docs",
        }

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


# -----------------------------------------------------------------------------
