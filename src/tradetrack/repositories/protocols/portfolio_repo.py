"""Portfolio repository protocol."""

from decimal import Decimal
from typing import Callable, Protocol, TypeVar

from tradetrack.domain.models import Transaction

T = TypeVar("T")

Mutation = Callable[[list[Transaction], dict[str, Decimal]], T]


class PortfolioRepository(Protocol):
    """
    Interface for loading and saving the ledger and the price map.

    Owned by the caller; the accounting engine only ever reads a snapshot.
    """

    def load(self) -> tuple[list[Transaction], dict[str, Decimal]]:
        """Return (transactions in insertion order, canonical symbol -> price)."""
        ...

    def save(
        self,
        transactions: list[Transaction],
        prices: dict[str, Decimal],
    ) -> None:
        """Replace the stored ledger and price map."""
        ...

    def update(self, mutate: Mutation[T]) -> T:
        """
        Apply a read-modify-write atomically.

        `mutate` edits the given ledger and price map in place and its
        return value is passed through. Nothing is stored if it raises.
        """
        ...
