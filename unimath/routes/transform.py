#!/usr/bin/env python
# -----------------------------------------------------------------------------
"""
Transform router
================
POST /api/v1/transform   convert markup to Unicode text
GET  /api/v1/macros      names of all registered macros
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends

from unimath import get_engine
from unimath.schemas import MacroList, TransformRequest, TransformResponse
from unimath.services.delimited import transform_delimited
from unimath.services.macros import MacroEngine


# -----------------------------------------------------------------------------

router = APIRouter(tags=["Transform"])


# -----------------------------------------------------------------------------

@router.post("/transform", response_model=TransformResponse)
def transform(body: TransformRequest, engine: MacroEngine = Depends(get_engine)):
    if body.delimited:
        result = transform_delimited(body.source, engine)
    else:
        result = engine.transform(body.source)
    return TransformResponse(result=result)


@router.get("/macros", response_model=MacroList)
def list_macros(engine: MacroEngine = Depends(get_engine)):
    names = engine.registry.registered_names()
    return MacroList(count=len(names), names=names)


# -----------------------------------------------------------------------------
