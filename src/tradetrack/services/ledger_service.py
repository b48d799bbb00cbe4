"""Ledger service for transaction and price management."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from tradetrack.core.exceptions import NotFoundError, ValidationError
from tradetrack.core.timezone import parse_date, today_eastern
from tradetrack.domain.models import Transaction, TransactionType
from tradetrack.domain.normalize import (
    SHARE_EPSILON,
    canonical_symbol,
    canonical_type,
    to_finite_decimal,
)
from tradetrack.repositories.protocols import PortfolioRepository

logger = logging.getLogger(__name__)


@dataclass
class TransactionCreate:
    """Input data for creating or replacing a transaction."""

    type: TransactionType
    symbol: str
    shares: Decimal
    price: Decimal
    date: Optional[date] = None
    name: Optional[str] = None
    account: str = ""
    exchange: str = ""
    currency: Optional[str] = None


class LedgerService:
    """
    Service for managing the transaction ledger and the price map.

    The ledger is the source of truth; every mutation is written back
    through the repository and derived state is recomputed by the engine.
    """

    def __init__(
        self,
        repository: PortfolioRepository,
        default_currency: str = "USD",
    ):
        self._repository = repository
        self._default_currency = default_currency

    # Transactions

    def list_transactions(self, symbol: Optional[str] = None) -> list[Transaction]:
        """List transactions by date (stable), optionally for one symbol."""
        transactions, _ = self._repository.load()
        if symbol is not None:
            key = canonical_symbol(symbol)
            transactions = [t for t in transactions if canonical_symbol(t.symbol) == key]
        return sorted(transactions, key=lambda t: t.date)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID."""
        transactions, _ = self._repository.load()
        for txn in transactions:
            if txn.id == transaction_id:
                return txn
        raise NotFoundError("Transaction", transaction_id)

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Add a new transaction to the ledger.

        Validates input and assigns a fresh id.
        """
        transaction = self._build(uuid.uuid4().hex, data)

        def mutate(transactions: list[Transaction], prices: dict[str, Decimal]) -> None:
            self._warn_on_oversell(transactions, transaction)
            transactions.append(transaction)

        self._repository.update(mutate)
        logger.info("Added %s %s x%s", transaction.type.value, transaction.symbol, transaction.shares)
        return transaction

    def bulk_add(self, records: list[TransactionCreate]) -> list[Transaction]:
        """
        Add several transactions at once.

        All records are validated before any is stored.
        """
        built = [self._build(uuid.uuid4().hex, data) for data in records]
        self._repository.update(lambda transactions, prices: transactions.extend(built))
        logger.info("Bulk-added %d transactions", len(built))
        return built

    def replace_transaction(self, transaction_id: str, data: TransactionCreate) -> Transaction:
        """Replace an existing transaction in place, keeping its id and position."""
        replacement = self._build(transaction_id, data)

        def mutate(transactions: list[Transaction], prices: dict[str, Decimal]) -> None:
            for index, txn in enumerate(transactions):
                if txn.id == transaction_id:
                    break
            else:
                raise NotFoundError("Transaction", transaction_id)
            others = transactions[:index] + transactions[index + 1:]
            self._warn_on_oversell(others, replacement)
            transactions[index] = replacement

        self._repository.update(mutate)
        logger.info("Replaced transaction %s", transaction_id)
        return replacement

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction (idempotent)."""

        def mutate(transactions: list[Transaction], prices: dict[str, Decimal]) -> bool:
            remaining = [t for t in transactions if t.id != transaction_id]
            if len(remaining) == len(transactions):
                return False
            transactions[:] = remaining
            return True

        if self._repository.update(mutate):
            logger.info("Deleted transaction %s", transaction_id)

    # Prices

    def list_prices(self) -> dict[str, Decimal]:
        """Return the current price map (canonical symbol -> price)."""
        _, prices = self._repository.load()
        return prices

    def set_price(self, symbol: str, price) -> Decimal:
        """Set the current market price for a symbol."""
        key = canonical_symbol(symbol)
        if not key:
            raise ValidationError("Price requires a symbol")
        value = to_finite_decimal(price)
        if value is None or value <= 0:
            raise ValidationError(f"Price for {key} must be a positive number")

        def mutate(transactions: list[Transaction], prices: dict[str, Decimal]) -> None:
            prices[key] = value

        self._repository.update(mutate)
        return value

    def remove_price(self, symbol: str) -> None:
        """Forget the price for a symbol (idempotent)."""
        key = canonical_symbol(symbol)
        self._repository.update(lambda transactions, prices: prices.pop(key, None))

    def _build(self, transaction_id: str, data: TransactionCreate) -> Transaction:
        """Validate input and produce a canonical Transaction."""
        txn_type = canonical_type(data.type)
        symbol = canonical_symbol(data.symbol)
        if not symbol:
            raise ValidationError(f"{txn_type.value} requires a symbol")

        shares = to_finite_decimal(data.shares)
        if shares is None or shares <= 0:
            raise ValidationError(f"{txn_type.value} requires shares > 0")
        price = to_finite_decimal(data.price)
        if price is None or price <= 0:
            raise ValidationError(f"{txn_type.value} requires price > 0")

        return Transaction(
            id=transaction_id,
            date=parse_date(data.date) if data.date else today_eastern(),
            type=txn_type,
            symbol=symbol,
            name=(data.name or "").strip() or symbol,
            shares=shares,
            price=price,
            account=data.account or "",
            exchange=data.exchange or "",
            currency=(data.currency or self._default_currency).strip().upper(),
        )

    @staticmethod
    def _warn_on_oversell(transactions: list[Transaction], new: Transaction) -> None:
        """
        Log when a SELL exceeds the shares held on its trade date.

        Replays the symbol's usable records dated on or before the sale, the
        same way the engine does, so the warning agrees with its flag.
        """
        if new.type != TransactionType.SELL:
            return
        same_symbol = [t for t in transactions if canonical_symbol(t.symbol) == new.symbol]
        held = Decimal("0")
        for txn in sorted(same_symbol, key=lambda t: t.date):
            if txn.date > new.date:
                break
            shares = to_finite_decimal(txn.shares)
            if not shares or not to_finite_decimal(txn.price):
                continue
            held += shares if txn.type == TransactionType.BUY else -shares
        if new.shares > held + SHARE_EPSILON:
            logger.warning(
                "SELL of %s %s on %s exceeds %s held; holdings will be clamped to zero",
                new.shares, new.symbol, new.date, held,
            )
