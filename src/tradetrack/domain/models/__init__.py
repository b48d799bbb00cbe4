"""Domain models package."""

from tradetrack.domain.models.enums import TransactionType
from tradetrack.domain.models.transaction import Transaction

__all__ = [
    "TransactionType",
    "Transaction",
]
