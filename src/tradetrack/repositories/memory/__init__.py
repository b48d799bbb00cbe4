"""In-memory repository implementations."""

from tradetrack.repositories.memory.portfolio_repo import InMemoryPortfolioRepository
from tradetrack.repositories.memory.seed import (
    DEMO_TRANSACTIONS,
    DEMO_PRICES,
    demo_repository,
)

__all__ = [
    "InMemoryPortfolioRepository",
    "DEMO_TRANSACTIONS",
    "DEMO_PRICES",
    "demo_repository",
]
