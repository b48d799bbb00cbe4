"""API routers package."""

from tradetrack.api.routers.portfolio import router as portfolio_router
from tradetrack.api.routers.transactions import router as transactions_router
from tradetrack.api.routers.prices import router as prices_router
from tradetrack.api.routers.analysis import router as analysis_router

__all__ = [
    "portfolio_router",
    "transactions_router",
    "prices_router",
    "analysis_router",
]
