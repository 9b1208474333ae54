from __future__ import annotations

from fastapi import APIRouter

from api.routes import blocks, chain, stars


def get_api_router() -> APIRouter:
    router = APIRouter()

    router.include_router(stars.router, tags=["stars"])
    router.include_router(blocks.router, tags=["blocks"])
    router.include_router(chain.router, tags=["chain"])

    return router
