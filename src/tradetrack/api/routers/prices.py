"""Current price endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from tradetrack.api.deps import get_ledger_service
from tradetrack.api.schemas import PriceResponse, PricesResponse, PriceUpdateRequest
from tradetrack.domain.normalize import canonical_symbol
from tradetrack.services import LedgerService

router = APIRouter(prefix="/prices", tags=["prices"])


@router.get("", response_model=PricesResponse)
def list_prices(
    ledger: LedgerService = Depends(get_ledger_service),
) -> PricesResponse:
    """Return the price map (symbol -> current price)."""
    return PricesResponse(prices=ledger.list_prices())


@router.put("/{symbol}", response_model=PriceResponse)
def set_price(
    symbol: str,
    data: PriceUpdateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> PriceResponse:
    """Set the current price for a symbol."""
    price = ledger.set_price(symbol, data.price)
    return PriceResponse(symbol=canonical_symbol(symbol), price=price)


@router.delete("/{symbol}", status_code=204)
def remove_price(
    symbol: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Forget the price for a symbol; its holding falls back to cost basis."""
    ledger.remove_price(symbol)
    return Response(status_code=204)
