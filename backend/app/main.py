"""
WORDPASS Backend - Word-based passphrase generator
Passphrases are generated per request and never stored.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings, validate_settings
from app.routers import health, passphrase
from app.middleware.security import SecurityHeadersMiddleware
from app.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Setup logging
    setup_logging(settings.LOG_LEVEL)

    # Fail fast on a misconfigured word source
    validate_settings(settings)

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="WORDPASS",
        description="Memorable passphrases from random words",
        version="1.0.0",
        lifespan=lifespan
    )

    # No-store and hardening headers
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # Register routers
    app.include_router(health.router, tags=["health"])
    app.include_router(passphrase.router, prefix="/api", tags=["passphrase"])

    return app


app = create_app()
