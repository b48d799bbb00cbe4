"""
Pytest configuration and fixtures for TradeTrack tests.

This module provides:
- In-memory repository fixtures (empty and demo-seeded)
- Factory helpers for transactions and ledger input
- Service fixtures wired to the test repository
- FastAPI test client with the repository overridden
"""

import os
import tempfile
import uuid
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient

from tradetrack.main import app
from tradetrack.api.deps import get_repository
from tradetrack.repositories import InMemoryPortfolioRepository, demo_repository
from tradetrack.services import (
    AnalysisService,
    ImportService,
    LedgerService,
    PortfolioEngine,
)
from tradetrack.services.ledger_service import TransactionCreate
from tradetrack.csv import CsvImporter, CsvExporter, CsvTemplateGenerator
from tradetrack.domain.models import Transaction, TransactionType
from tradetrack.config.settings import reset_settings


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def _clean_settings():
    """Reload settings from a clean environment for every test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def repository() -> InMemoryPortfolioRepository:
    """Provide an empty in-memory repository."""
    return InMemoryPortfolioRepository()


@pytest.fixture
def demo_repo() -> InMemoryPortfolioRepository:
    """Provide a repository pre-loaded with the sample ledger."""
    return demo_repository()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(repository) -> LedgerService:
    """Provide LedgerService with test repository."""
    return LedgerService(repository=repository)


@pytest.fixture
def portfolio_engine(repository) -> PortfolioEngine:
    """Provide PortfolioEngine with test repository."""
    return PortfolioEngine(repository=repository)


@pytest.fixture
def analysis_service(portfolio_engine) -> AnalysisService:
    """Provide AnalysisService with test engine."""
    return AnalysisService(portfolio_engine=portfolio_engine)


@pytest.fixture
def import_service(ledger_service) -> ImportService:
    """Provide ImportService writing to the test ledger."""
    return ImportService(ledger_service=ledger_service)


@pytest.fixture
def csv_importer(import_service) -> CsvImporter:
    """Provide CsvImporter."""
    return CsvImporter(import_service=import_service)


@pytest.fixture
def csv_exporter(ledger_service) -> CsvExporter:
    """Provide CsvExporter."""
    return CsvExporter(ledger_service=ledger_service)


@pytest.fixture
def csv_template_generator() -> CsvTemplateGenerator:
    """Provide CsvTemplateGenerator."""
    return CsvTemplateGenerator()


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def transaction_factory(repository) -> Callable[..., Transaction]:
    """Factory that stores a raw Transaction directly in the repository."""

    def _create_transaction(**kwargs) -> Transaction:
        txn = make_txn(**kwargs)
        transactions, prices = repository.load()
        transactions.append(txn)
        repository.save(transactions, prices)
        return txn

    return _create_transaction


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(repository) -> TestClient:
    """Provide FastAPI test client backed by the test repository."""
    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def demo_client(demo_repo) -> TestClient:
    """Provide FastAPI test client backed by the sample ledger."""
    app.dependency_overrides[get_repository] = lambda: demo_repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================


@pytest.fixture
def temp_csv_file():
    """Provide a temporary CSV file path that is cleaned up after test."""
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".csv",
        delete=False,
        encoding="utf-8",
    ) as f:
        tmp_path = f.name

    yield tmp_path

    if os.path.exists(tmp_path):
        os.unlink(tmp_path)


@pytest.fixture
def sample_csv_content() -> str:
    """Sample valid CSV content for import testing."""
    return """date,type,symbol,name,shares,price,account,exchange,currency
2024-01-15,BUY,AAPL,Apple Inc,10,185.50,TFSA,NASDAQ,USD
2024-02-01,buy,msft,Microsoft,5,375.00,RRSP,NASDAQ,
2024-03-01,SELL,AAPL,Apple Inc,4,190.00,TFSA,NASDAQ,USD
"""


@pytest.fixture
def invalid_csv_content() -> str:
    """Sample CSV content with errors for testing error handling."""
    return """date,type,symbol,name,shares,price,account,exchange,currency
2024-01-15,BUY,AAPL,Apple Inc,10,185.50,TFSA,NASDAQ,USD
2024-01-16,HOLD,AAPL,Apple Inc,10,185.50,TFSA,NASDAQ,USD
2024-01-17,BUY,AAPL,Apple Inc,not_a_number,185.50,TFSA,NASDAQ,USD
2024-01-18,BUY,,Apple Inc,10,185.50,TFSA,NASDAQ,USD
"""


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(Decimal(actual) - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


def make_txn(
    symbol: str = "AAPL",
    shares=Decimal("10"),
    price=Decimal("100"),
    txn_type=TransactionType.BUY,
    txn_date=date(2024, 1, 15),
    name: Optional[str] = None,
    txn_id: Optional[str] = None,
) -> Transaction:
    """Helper to build a ledger Transaction without going through validation."""
    return Transaction(
        id=txn_id or uuid.uuid4().hex,
        date=txn_date,
        type=txn_type,
        symbol=symbol,
        name=name if name is not None else symbol.strip().upper(),
        shares=shares,
        price=price,
    )


def create_buy_data(
    symbol: str,
    shares: Decimal,
    price: Decimal,
    txn_date: Optional[date] = None,
    name: Optional[str] = None,
) -> TransactionCreate:
    """Helper to create BUY transaction data."""
    return TransactionCreate(
        type=TransactionType.BUY,
        symbol=symbol,
        shares=shares,
        price=price,
        date=txn_date,
        name=name,
    )


def create_sell_data(
    symbol: str,
    shares: Decimal,
    price: Decimal,
    txn_date: Optional[date] = None,
    name: Optional[str] = None,
) -> TransactionCreate:
    """Helper to create SELL transaction data."""
    return TransactionCreate(
        type=TransactionType.SELL,
        symbol=symbol,
        shares=shares,
        price=price,
        date=txn_date,
        name=name,
    )
