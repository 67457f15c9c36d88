"""
PASSGEN API - secure password and passphrase generation
Generated values are returned once and never stored or logged.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from passgen.config import settings, validate_generator_settings
from passgen.dependencies.context import get_generator_context
from passgen.routers import health, generate, strength
from passgen.middleware.security import SecurityMiddleware
from passgen.logging_config import setup_logging

logger = logging.getLogger("passgen.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    setup_logging(settings.LOG_LEVEL)

    # Validate settings before loading anything
    validate_generator_settings(settings)

    # Load word lists up front so the first request is not slow
    ctx = get_generator_context()
    logger.info(f"Word lists available: {', '.join(ctx.wordlists.available) or 'none'}")

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="PASSGEN",
        description="Secure password and passphrase generator",
        version="1.0.0",
        lifespan=lifespan
    )

    # Rate limiting and no-store headers
    app.add_middleware(SecurityMiddleware)

    # Register routers
    app.include_router(health.router, tags=["health"])
    app.include_router(generate.router, prefix="/api", tags=["generate"])
    app.include_router(strength.router, prefix="/api", tags=["strength"])

    return app


app = create_app()
