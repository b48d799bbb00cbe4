"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends

from tradetrack.config.settings import get_settings
from tradetrack.csv import CsvImporter, CsvExporter, CsvTemplateGenerator
from tradetrack.repositories import (
    InMemoryPortfolioRepository,
    PortfolioRepository,
    demo_repository,
)
from tradetrack.services import (
    AnalysisService,
    ImportService,
    LedgerService,
    PortfolioEngine,
)

# Process-wide ledger store (replaced in tests via dependency_overrides)
_repository: Optional[PortfolioRepository] = None


def get_repository() -> PortfolioRepository:
    """Provide the PortfolioRepository instance."""
    global _repository
    if _repository is None:
        settings = get_settings()
        _repository = demo_repository() if settings.seed_demo_data else InMemoryPortfolioRepository()
    return _repository


def reset_repository() -> None:
    """Drop the repository so the next request creates a fresh one."""
    global _repository
    _repository = None


def get_ledger_service(
    repository: PortfolioRepository = Depends(get_repository),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(
        repository=repository,
        default_currency=get_settings().default_currency,
    )


def get_portfolio_engine(
    repository: PortfolioRepository = Depends(get_repository),
) -> PortfolioEngine:
    """Provide PortfolioEngine instance."""
    return PortfolioEngine(repository=repository)


def get_analysis_service(
    portfolio_engine: PortfolioEngine = Depends(get_portfolio_engine),
) -> AnalysisService:
    """Provide AnalysisService instance."""
    return AnalysisService(portfolio_engine=portfolio_engine)


def get_import_service(
    ledger_service: LedgerService = Depends(get_ledger_service),
) -> ImportService:
    """Provide ImportService instance."""
    return ImportService(ledger_service=ledger_service)


def get_csv_importer(
    import_service: ImportService = Depends(get_import_service),
) -> CsvImporter:
    """Provide CsvImporter instance."""
    return CsvImporter(import_service=import_service)


def get_csv_exporter(
    ledger_service: LedgerService = Depends(get_ledger_service),
) -> CsvExporter:
    """Provide CsvExporter instance."""
    return CsvExporter(ledger_service=ledger_service)


def get_csv_template_generator() -> CsvTemplateGenerator:
    """Provide CsvTemplateGenerator instance."""
    return CsvTemplateGenerator()
