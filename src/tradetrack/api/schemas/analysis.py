"""Pydantic schemas for analysis endpoints."""

from decimal import Decimal

from pydantic import BaseModel


class AllocationItemResponse(BaseModel):
    """Response schema for a single allocation item."""

    model_config = {"from_attributes": True}

    symbol: str
    market_value: Decimal
    percentage: Decimal


class AllocationResponse(BaseModel):
    """Response schema for allocation breakdown."""

    model_config = {"from_attributes": True}

    items: list[AllocationItemResponse]
    total_value: Decimal
