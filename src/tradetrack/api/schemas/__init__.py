"""Pydantic schemas for API request/response."""

from tradetrack.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionListResponse,
    ImportSummaryResponse,
)
from tradetrack.api.schemas.portfolio import (
    StockSummaryResponse,
    PortfolioStatsResponse,
    PortfolioResponse,
)
from tradetrack.api.schemas.price import (
    PriceUpdateRequest,
    PriceResponse,
    PricesResponse,
)
from tradetrack.api.schemas.analysis import (
    AllocationItemResponse,
    AllocationResponse,
)

__all__ = [
    "TransactionCreateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "ImportSummaryResponse",
    "StockSummaryResponse",
    "PortfolioStatsResponse",
    "PortfolioResponse",
    "PriceUpdateRequest",
    "PriceResponse",
    "PricesResponse",
    "AllocationItemResponse",
    "AllocationResponse",
]
