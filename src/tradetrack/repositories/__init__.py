"""Repository layer - data access abstractions and implementations."""

from tradetrack.repositories.protocols import PortfolioRepository
from tradetrack.repositories.memory import (
    InMemoryPortfolioRepository,
    demo_repository,
)

__all__ = [
    "PortfolioRepository",
    "InMemoryPortfolioRepository",
    "demo_repository",
]
