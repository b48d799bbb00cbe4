"""Portfolio summary endpoints."""

from fastapi import APIRouter, Depends

from tradetrack.api.deps import get_portfolio_engine
from tradetrack.api.schemas import PortfolioResponse, StockSummaryResponse
from tradetrack.services import PortfolioEngine

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(
    portfolio: PortfolioEngine = Depends(get_portfolio_engine),
) -> PortfolioResponse:
    """
    Return per-symbol holdings and portfolio totals.

    Holdings are sorted by name; recomputed from the full ledger on every call.
    """
    return PortfolioResponse.model_validate(portfolio.summarize())


@router.get("/{symbol}", response_model=StockSummaryResponse)
def get_holding(
    symbol: str,
    portfolio: PortfolioEngine = Depends(get_portfolio_engine),
) -> StockSummaryResponse:
    """Return the holding for one symbol (case-insensitive)."""
    return StockSummaryResponse.model_validate(portfolio.get_summary(symbol))
