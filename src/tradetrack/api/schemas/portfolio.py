"""Pydantic schemas for portfolio endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from tradetrack.api.schemas.transaction import TransactionResponse


class StockSummaryResponse(BaseModel):
    """Holding for one symbol, with its transactions in date order."""

    model_config = {"from_attributes": True}

    symbol: str
    name: str
    total_shares: Decimal
    avg_cost: Decimal
    current_price: Optional[Decimal] = None
    total_invested: Decimal
    realized_pl: Decimal
    # Null when the price is unknown
    market_value: Optional[Decimal] = None
    unrealized_pl: Optional[Decimal] = None
    oversold: bool = False
    skipped_count: int = 0
    transactions: list[TransactionResponse]


class PortfolioStatsResponse(BaseModel):
    """Whole-portfolio totals."""

    model_config = {"from_attributes": True}

    total_value: Decimal
    total_cost_basis: Decimal
    total_realized_pl: Decimal
    total_unrealized_pl: Decimal
    unrealized_pl_percent: Decimal


class PortfolioResponse(BaseModel):
    """Response for GET /portfolio."""

    model_config = {"from_attributes": True}

    summaries: list[StockSummaryResponse]
    stats: PortfolioStatsResponse
