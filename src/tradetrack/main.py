"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradetrack.config.settings import get_settings
from tradetrack.config.logging_config import setup_logging
from tradetrack.api.routers import (
    analysis_router,
    portfolio_router,
    prices_router,
    transactions_router,
)
from tradetrack.core.exceptions import AppError, NotFoundError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Trade ledger with derived holdings and profit/loss",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(portfolio_router)
app.include_router(transactions_router)
app.include_router(prices_router)
app.include_router(analysis_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
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
        "version": settings.app_version,
        "docs": "/docs",
    }
