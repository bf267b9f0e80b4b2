"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledgerfolio import __version__
from ledgerfolio.api.routers import (
    accounts_router,
    assets_router,
    balances_router,
    prices_router,
    transactions_router,
)
from ledgerfolio.config.logging_config import setup_logging
from ledgerfolio.config.settings import Settings, get_settings
from ledgerfolio.core.exceptions import AppError
from ledgerfolio.providers import CurrencyApiProvider, PriceProvider, StubPriceProvider, TtlCache
from ledgerfolio.repositories.sqlalchemy.database import init_db

logger = logging.getLogger(__name__)


def build_price_provider(settings: Settings, client: httpx.Client) -> PriceProvider:
    """Build the process-wide price provider and its cache."""
    if settings.price_provider == "stub":
        return StubPriceProvider()
    return CurrencyApiProvider(client=client, cache=TtlCache(), settings=settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    settings = get_settings()
    client = httpx.Client(timeout=settings.price_api_timeout_seconds)
    app.state.price_provider = build_price_provider(settings, client)
    yield
    # Shutdown
    client.close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Double-entry ledger for a multi-asset portfolio",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(accounts_router)
app.include_router(assets_router)
app.include_router(transactions_router)
app.include_router(balances_router)
app.include_router(prices_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message, "field": exc.field},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else rolled back its unit of work; report it without details."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": "The operation could not be completed"},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
