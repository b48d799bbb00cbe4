"""In-memory implementation of PortfolioRepository."""

import threading
from decimal import Decimal
from typing import Optional

from tradetrack.domain.models import Transaction
from tradetrack.repositories.protocols.portfolio_repo import Mutation, T


class InMemoryPortfolioRepository:
    """
    Process-local repository holding the ledger and price map.

    Returns and stores copies so callers never share list/dict instances
    with the repository. Transactions themselves are immutable.
    """

    def __init__(
        self,
        transactions: Optional[list[Transaction]] = None,
        prices: Optional[dict[str, Decimal]] = None,
    ):
        self._lock = threading.Lock()
        self._transactions: list[Transaction] = list(transactions or [])
        self._prices: dict[str, Decimal] = dict(prices or {})

    def load(self) -> tuple[list[Transaction], dict[str, Decimal]]:
        """Return a snapshot of the ledger and prices."""
        with self._lock:
            return list(self._transactions), dict(self._prices)

    def save(
        self,
        transactions: list[Transaction],
        prices: dict[str, Decimal],
    ) -> None:
        """Replace the stored ledger and prices."""
        with self._lock:
            self._transactions = list(transactions)
            self._prices = dict(prices)

    def update(self, mutate: Mutation[T]) -> T:
        """Run `mutate` on working copies and store them, all under the lock."""
        with self._lock:
            transactions = list(self._transactions)
            prices = dict(self._prices)
            result = mutate(transactions, prices)
            self._transactions = transactions
            self._prices = prices
            return result
