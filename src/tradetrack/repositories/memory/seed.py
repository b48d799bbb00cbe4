"""Sample ledger shown to first-time users."""

from datetime import date
from decimal import Decimal

from tradetrack.domain.models import Transaction, TransactionType
from tradetrack.repositories.memory.portfolio_repo import InMemoryPortfolioRepository

DEMO_TRANSACTIONS: tuple[Transaction, ...] = (
    Transaction(
        id="1", date=date(2025, 5, 31), type=TransactionType.BUY, symbol="OKTA",
        name="Okta Inc", shares=Decimal("60"), price=Decimal("90.5"),
        account="TFSA", exchange="NASDAQ", currency="USD",
    ),
    Transaction(
        id="2", date=date(2025, 8, 30), type=TransactionType.BUY, symbol="OKTA",
        name="Okta Inc", shares=Decimal("15"), price=Decimal("79.69"),
        account="TFSA", exchange="NASDAQ", currency="USD",
    ),
    Transaction(
        id="3", date=date(2025, 1, 28), type=TransactionType.BUY, symbol="NVDA",
        name="Nvidia Corp", shares=Decimal("100"), price=Decimal("117.88"),
        account="TFSA", exchange="NASDAQ", currency="USD",
    ),
    Transaction(
        id="4", date=date(2025, 2, 15), type=TransactionType.BUY, symbol="NVDA",
        name="Nvidia Corp", shares=Decimal("40"), price=Decimal("181.58"),
        account="RRSP", exchange="NASDAQ", currency="USD",
    ),
    Transaction(
        id="5", date=date(2025, 6, 27), type=TransactionType.BUY, symbol="GTLB",
        name="Gitlab Inc", shares=Decimal("200"), price=Decimal("44.72"),
        account="RRSP", exchange="NASDAQ", currency="USD",
    ),
    Transaction(
        id="6", date=date(2025, 12, 3), type=TransactionType.SELL, symbol="OKTA",
        name="Okta Inc", shares=Decimal("20"), price=Decimal("105.00"),
        account="RRSP", exchange="NASDAQ", currency="USD",
    ),
)

DEMO_PRICES: dict[str, Decimal] = {
    "OKTA": Decimal("94.07"),
    "NVDA": Decimal("185.81"),
    "GTLB": Decimal("35.85"),
    "SMCI": Decimal("28.60"),
    "META": Decimal("631.09"),
}


def demo_repository() -> InMemoryPortfolioRepository:
    """Return a repository pre-loaded with the sample ledger and prices."""
    return InMemoryPortfolioRepository(
        transactions=list(DEMO_TRANSACTIONS),
        prices=dict(DEMO_PRICES),
    )
