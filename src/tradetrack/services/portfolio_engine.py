"""Portfolio engine for deriving holdings and P/L from the trade ledger."""

import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal

from tradetrack.core.exceptions import NotFoundError
from tradetrack.domain.models import Transaction, TransactionType
from tradetrack.domain.normalize import (
    SHARE_EPSILON,
    canonical_symbol,
    to_finite_decimal,
)
from tradetrack.domain.views import PortfolioStats, PortfolioView, StockSummary
from tradetrack.repositories.protocols import PortfolioRepository

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def aggregate(
    transactions: Sequence[Transaction],
    prices: Mapping[str, Decimal],
) -> tuple[list[StockSummary], PortfolioStats]:
    """
    Replay the ledger into per-symbol summaries and portfolio totals.

    Cost basis uses a single blended average per symbol: a SELL removes
    shares at the average cost held at that moment. Pure function; the
    arguments are never modified.
    """
    groups: dict[str, list[Transaction]] = {}
    for txn in transactions:
        groups.setdefault(canonical_symbol(txn.symbol), []).append(txn)

    summaries: list[StockSummary] = []
    stats = PortfolioStats()

    for symbol, group in groups.items():
        summary = _summarize_group(symbol, group, prices)
        summaries.append(summary)

        stats.total_realized_pl += summary.realized_pl
        stats.total_cost_basis += summary.total_invested
        if summary.current_price is not None and summary.total_shares > 0:
            market_value = summary.total_shares * summary.current_price
            stats.total_value += market_value
            stats.total_unrealized_pl += market_value - summary.total_invested
        else:
            stats.total_value += summary.total_invested

    # sorted() is stable, so equal names keep discovery order
    summaries = sorted(summaries, key=lambda s: s.name.lower())
    return summaries, stats


def _summarize_group(
    symbol: str,
    group: list[Transaction],
    prices: Mapping[str, Decimal],
) -> StockSummary:
    """Process one symbol's transactions in date order."""
    ordered = sorted(group, key=lambda t: t.date)

    shares_held = ZERO
    total_cost = ZERO
    realized_pl = ZERO
    oversold = False
    skipped = 0

    for txn in ordered:
        shares = to_finite_decimal(txn.shares)
        price = to_finite_decimal(txn.price)
        if not shares or not price:
            skipped += 1
            continue

        if txn.type == TransactionType.BUY:
            shares_held += shares
            total_cost += shares * price
        elif txn.type == TransactionType.SELL:
            if shares > shares_held + SHARE_EPSILON:
                oversold = True
                logger.debug(
                    "Oversell of %s in %s: selling %s with %s held",
                    symbol, txn.id, shares, shares_held,
                )
            avg_cost_per_share = total_cost / shares_held if shares_held > 0 else ZERO
            cost_of_sold = shares * avg_cost_per_share
            realized_pl += shares * price - cost_of_sold
            shares_held -= shares
            total_cost -= cost_of_sold

    # Absorbs rounding drift and oversells alike
    if shares_held < SHARE_EPSILON:
        shares_held = ZERO
        total_cost = ZERO

    avg_cost = total_cost / shares_held if shares_held > 0 else ZERO

    return StockSummary(
        symbol=symbol,
        name=ordered[0].name or symbol,
        total_shares=shares_held,
        avg_cost=avg_cost,
        current_price=to_finite_decimal(prices.get(symbol)),
        total_invested=total_cost,
        realized_pl=realized_pl,
        transactions=ordered,
        oversold=oversold,
        skipped_count=skipped,
    )


class PortfolioEngine:
    """
    Engine for computing portfolio state from the ledger.

    Nothing is cached: every call reloads the repository snapshot and
    replays all transactions.
    """

    def __init__(self, repository: PortfolioRepository):
        self._repository = repository

    def summarize(self) -> PortfolioView:
        """Derive summaries and stats from the current ledger and prices."""
        transactions, prices = self._repository.load()
        summaries, stats = aggregate(transactions, prices)
        return PortfolioView(summaries=summaries, stats=stats)

    def get_summary(self, symbol: str) -> StockSummary:
        """Return the summary for one symbol (matched canonically)."""
        key = canonical_symbol(symbol)
        for summary in self.summarize().summaries:
            if summary.symbol == key:
                return summary
        raise NotFoundError("Symbol", key)
