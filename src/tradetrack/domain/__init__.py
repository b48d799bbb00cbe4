"""Domain layer - pure business models with no framework dependencies."""

from tradetrack.domain.models import (
    Transaction,
    TransactionType,
)

__all__ = [
    "Transaction",
    "TransactionType",
]
