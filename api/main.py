from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.errors import StarLedgerAPIError, starledger_error_handler
from api.routes import get_api_router, health
from starledger import __version__
from starledger.core.config import Config
from starledger.core.log import configure_logging
from starledger.registry import StarRegistry


def create_app(config: Config | None = None, registry: StarRegistry | None = None) -> FastAPI:
    start = time.monotonic()
    config = config or Config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.started_at = start
        configure_logging(app.state.config.logging)
        yield

    openapi_tags = [
        {"name": "health", "description": "Liveness and version metadata."},
        {"name": "stars", "description": "Ownership challenges, star submission, owner lookups."},
        {"name": "blocks", "description": "Block lookups by height and hash."},
        {"name": "chain", "description": "Whole-chain validation."},
    ]

    app = FastAPI(
        title="starledger API",
        description="Star registry on a hash-linked chain",
        version=__version__,
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )

    # Expose config/registry in app state for dependency injection + tests.
    app.state.config = config
    app.state.registry = registry or StarRegistry.from_config(config)
    app.state.started_at = start

    app.add_exception_handler(StarLedgerAPIError, starledger_error_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(get_api_router(), prefix="/api/v1")
    return app


def app_from_env() -> FastAPI:
    """uvicorn factory (``uvicorn --factory api.main:app_from_env``)."""

    return create_app(Config.from_repo_defaults())
