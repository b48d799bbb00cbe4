"""View models for service outputs."""

from tradetrack.domain.views.portfolio import (
    StockSummary,
    PortfolioStats,
    PortfolioView,
    AllocationItem,
    AllocationView,
    ImportSummary,
)

__all__ = [
    "StockSummary",
    "PortfolioStats",
    "PortfolioView",
    "AllocationItem",
    "AllocationView",
    "ImportSummary",
]
