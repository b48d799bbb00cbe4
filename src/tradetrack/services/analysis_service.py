"""Analysis service for portfolio analytics."""

from decimal import Decimal

from tradetrack.domain.views import AllocationItem, AllocationView
from tradetrack.services.portfolio_engine import PortfolioEngine


class AnalysisService:
    """
    Service for portfolio analytics and reporting.

    Builds presentation-ready breakdowns on top of the engine's output.
    """

    def __init__(self, portfolio_engine: PortfolioEngine):
        self._portfolio = portfolio_engine

    def allocation(self) -> AllocationView:
        """
        Calculate portfolio allocation breakdown.

        Only held symbols with a known price are listed; percentages are
        relative to the portfolio total value, which also counts holdings
        without a price at cost.
        """
        view = self._portfolio.summarize()
        total_value = view.stats.total_value

        items: list[AllocationItem] = []
        for summary in view.summaries:
            market_value = summary.market_value
            if market_value is None or summary.total_shares <= 0:
                continue
            items.append(
                AllocationItem(
                    symbol=summary.symbol,
                    market_value=market_value.quantize(Decimal("0.01")),
                    percentage=Decimal("0"),  # Will be calculated below
                )
            )

        if total_value != Decimal("0"):
            for item in items:
                item.percentage = (item.market_value / total_value * 100).quantize(
                    Decimal("0.01")
                )

        # Sort by market value descending
        items.sort(key=lambda x: x.market_value, reverse=True)

        return AllocationView(
            items=items,
            total_value=total_value.quantize(Decimal("0.01")),
        )
