"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of trade transactions."""

    BUY = "BUY"
    SELL = "SELL"
