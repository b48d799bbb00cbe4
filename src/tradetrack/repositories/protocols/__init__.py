"""Repository protocol definitions (interfaces)."""

from tradetrack.repositories.protocols.portfolio_repo import PortfolioRepository

__all__ = [
    "PortfolioRepository",
]
