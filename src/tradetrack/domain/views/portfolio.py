"""View models for portfolio and analysis outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from tradetrack.domain.models import Transaction


@dataclass
class StockSummary:
    """Derived holding for one canonical symbol."""

    symbol: str
    name: str
    total_shares: Decimal = field(default_factory=lambda: Decimal("0"))
    avg_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    current_price: Optional[Decimal] = None
    total_invested: Decimal = field(default_factory=lambda: Decimal("0"))
    realized_pl: Decimal = field(default_factory=lambda: Decimal("0"))
    transactions: list[Transaction] = field(default_factory=list)
    oversold: bool = False  # a SELL exceeded holdings at the time of sale
    skipped_count: int = 0  # transactions without usable shares/price

    @property
    def market_value(self) -> Optional[Decimal]:
        """Held shares at the current price; None when the price is unknown."""
        if self.current_price is None:
            return None
        return self.total_shares * self.current_price

    @property
    def unrealized_pl(self) -> Optional[Decimal]:
        """Paper gain/loss on held shares; None when the price is unknown."""
        market_value = self.market_value
        if market_value is None:
            return None
        return market_value - self.total_invested


@dataclass
class PortfolioStats:
    """Whole-portfolio aggregate."""

    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_cost_basis: Decimal = field(default_factory=lambda: Decimal("0"))
    total_realized_pl: Decimal = field(default_factory=lambda: Decimal("0"))
    total_unrealized_pl: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def unrealized_pl_percent(self) -> Decimal:
        """Unrealized return on cost basis, in percent (0 when nothing is held)."""
        if self.total_cost_basis > 0:
            return self.total_unrealized_pl / self.total_cost_basis * 100
        return Decimal("0")


@dataclass
class PortfolioView:
    """Summaries and stats derived from one ledger snapshot."""

    summaries: list[StockSummary] = field(default_factory=list)
    stats: PortfolioStats = field(default_factory=PortfolioStats)


@dataclass
class AllocationItem:
    """Single item in allocation breakdown."""

    symbol: str
    market_value: Decimal
    percentage: Decimal


@dataclass
class AllocationView:
    """Portfolio allocation breakdown."""

    items: list[AllocationItem] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class ImportSummary:
    """Summary of a bulk import operation."""

    imported_count: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
    import_batch_id: Optional[str] = None
