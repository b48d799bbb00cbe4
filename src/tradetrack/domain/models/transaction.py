"""Transaction domain model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from tradetrack.core.timezone import parse_date
from tradetrack.domain.models.enums import TransactionType
from tradetrack.domain.normalize import canonical_type


@dataclass(frozen=True)
class Transaction:
    """
    Ledger entry for a single trade (source of truth).

    Records are immutable; an edit replaces the whole record under the same id.
    - symbol is kept as supplied; grouping uses its canonical form
    - shares/price are kept as supplied so the engine can skip malformed values
    - account, exchange and currency are informational only
    """

    id: str
    date: date
    type: TransactionType
    symbol: str
    name: str = ""
    shares: Optional[Decimal] = None
    price: Optional[Decimal] = None
    account: str = ""
    exchange: str = ""
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.type, TransactionType):
            object.__setattr__(self, "type", canonical_type(self.type))
        if type(self.date) is not date:
            object.__setattr__(self, "date", parse_date(self.date))

    @property
    def is_buy(self) -> bool:
        """Return True if this is a BUY transaction."""
        return self.type == TransactionType.BUY

    @property
    def is_sell(self) -> bool:
        """Return True if this is a SELL transaction."""
        return self.type == TransactionType.SELL
