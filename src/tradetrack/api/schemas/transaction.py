"""Pydantic schemas for transaction endpoints."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tradetrack.domain.models.enums import TransactionType


class TransactionCreateRequest(BaseModel):
    """Request schema for creating or replacing a transaction."""

    date: Optional[dt.date] = Field(
        default=None,
        description="Trade date (YYYY-MM-DD); defaults to today (US/Eastern)",
    )
    type: TransactionType = Field(..., description="BUY or SELL")
    symbol: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    name: Optional[str] = Field(
        default=None,
        max_length=200,
        description="Company name; defaults to the symbol",
    )
    shares: Decimal = Field(..., gt=0, description="Number of shares")
    price: Decimal = Field(..., gt=0, description="Price per share")
    account: str = Field(default="", max_length=100, description="Account label, e.g. TFSA")
    exchange: str = Field(default="", max_length=50, description="Exchange, e.g. NASDAQ")
    currency: Optional[str] = Field(default=None, max_length=10, description="Currency code")

    @field_validator("type", mode="before")
    @classmethod
    def uppercase_type(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    id: str
    date: dt.date
    type: TransactionType
    symbol: str
    name: str
    shares: Optional[Decimal] = None
    price: Optional[Decimal] = None
    account: str
    exchange: str
    currency: str


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int


class ImportSummaryResponse(BaseModel):
    """Response schema for bulk import results."""

    model_config = {"from_attributes": True}

    imported_count: int
    error_count: int
    errors: list[str]
    import_batch_id: Optional[str] = None
