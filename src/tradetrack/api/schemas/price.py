"""Pydantic schemas for price endpoints."""

from decimal import Decimal

from pydantic import BaseModel, Field


class PriceUpdateRequest(BaseModel):
    """Request schema for setting a symbol's current price."""

    price: Decimal = Field(..., gt=0, description="Current market price")


class PriceResponse(BaseModel):
    """Response schema for a single price."""

    symbol: str
    price: Decimal


class PricesResponse(BaseModel):
    """Response schema for the full price map."""

    prices: dict[str, Decimal]
