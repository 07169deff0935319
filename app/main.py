"""FastAPI application entrypoint: lifespan, routers, middleware."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.config import get_settings
from app.database import engine
from app.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from app.routes import cities, crops, farms, harvests, plantations, producers, states

SERVICE_NAME = "agroregistry"
SERVICE_VERSION = "0.1.0"

logger = structlog.get_logger(SERVICE_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Verify the database answers ``SELECT 1``

    Shutdown:
      1. Dispose SQLAlchemy engine
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "agroregistry_starting",
        log_level=settings.log_level,
        log_format=settings.log_format.value,
    )

    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception as exc:
        logger.exception("startup_failure", error=str(exc))
        raise

    yield

    logger.info("agroregistry_shutting_down")
    await engine.dispose()


app = FastAPI(
    title="Agro Registry API",
    description=(
        "Agricultural registry: states, cities, producers, farms, crops, "
        "harvests and plantations, with uniqueness, referential and "
        "land-area integrity checks on every write."
    ),
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check: verifies the API process is alive."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(states.router, prefix="/api/v1")
app.include_router(cities.router, prefix="/api/v1")
app.include_router(producers.router, prefix="/api/v1")
app.include_router(farms.router, prefix="/api/v1")
app.include_router(crops.router, prefix="/api/v1")
app.include_router(harvests.router, prefix="/api/v1")
app.include_router(plantations.router, prefix="/api/v1")
