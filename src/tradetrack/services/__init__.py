"""Service layer - business logic orchestration."""

from tradetrack.services.portfolio_engine import PortfolioEngine, aggregate
from tradetrack.services.ledger_service import LedgerService, TransactionCreate
from tradetrack.services.import_service import (
    ImportService,
    Ok,
    Err,
    ParseResult,
    parse_transaction,
    parse_transactions,
)
from tradetrack.services.analysis_service import AnalysisService

__all__ = [
    "PortfolioEngine",
    "aggregate",
    "LedgerService",
    "TransactionCreate",
    "ImportService",
    "Ok",
    "Err",
    "ParseResult",
    "parse_transaction",
    "parse_transactions",
    "AnalysisService",
]
