"""Transaction ledger endpoints."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from tradetrack.api.deps import (
    get_csv_exporter,
    get_csv_importer,
    get_csv_template_generator,
    get_import_service,
    get_ledger_service,
)
from tradetrack.api.schemas import (
    ImportSummaryResponse,
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
)
from tradetrack.csv import CsvExporter, CsvImporter, CsvTemplateGenerator
from tradetrack.services import ImportService, LedgerService, TransactionCreate

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _to_create(data: TransactionCreateRequest) -> TransactionCreate:
    return TransactionCreate(
        type=data.type,
        symbol=data.symbol,
        shares=data.shares,
        price=data.price,
        date=data.date,
        name=data.name,
        account=data.account,
        exchange=data.exchange,
        currency=data.currency,
    )


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    symbol: Optional[str] = Query(None, description="Only this symbol (case-insensitive)"),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionListResponse:
    """List transactions in date order."""
    transactions = ledger.list_transactions(symbol=symbol)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Record a new trade."""
    transaction = ledger.add_transaction(_to_create(data))
    return TransactionResponse.model_validate(transaction)


# ---------------------------------------------------------------------------
# Bulk import / CSV
# ---------------------------------------------------------------------------


@router.post("/import", response_model=ImportSummaryResponse, status_code=201)
def import_transactions(
    records: list[Any] = Body(..., description="Raw trade records, e.g. AI parser output"),
    imports: ImportService = Depends(get_import_service),
) -> ImportSummaryResponse:
    """
    Bulk-import loosely-shaped trade records.

    Best-effort: valid records are imported even when some fail; the
    summary lists the rejected ones by index.
    """
    summary = imports.import_records(records)
    return ImportSummaryResponse.model_validate(summary)


@router.post("/import/csv", response_model=ImportSummaryResponse, status_code=201)
async def import_transactions_csv(
    request: Request,
    importer: CsvImporter = Depends(get_csv_importer),
) -> ImportSummaryResponse:
    """
    Bulk-import a CSV document sent as the request body.

    Async only to read the raw body; the import itself runs in the threadpool.
    """
    raw = await request.body()
    summary = await run_in_threadpool(importer.import_text, raw.decode("utf-8-sig"))
    return ImportSummaryResponse.model_validate(summary)


@router.get("/export")
def export_transactions(
    exporter: CsvExporter = Depends(get_csv_exporter),
) -> Response:
    """Download all transactions as a CSV file."""
    return Response(
        content=exporter.to_csv_text(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )


@router.get("/template")
def download_template(
    generator: CsvTemplateGenerator = Depends(get_csv_template_generator),
) -> Response:
    """Download a template CSV with header and example rows."""
    return Response(
        content=generator.template_text(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions_template.csv"'},
    )


# ---------------------------------------------------------------------------
# Single transaction
# ---------------------------------------------------------------------------


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Get one transaction."""
    return TransactionResponse.model_validate(ledger.get_transaction(transaction_id))


@router.put("/{transaction_id}", response_model=TransactionResponse)
def replace_transaction(
    transaction_id: str,
    data: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Replace a transaction with new details, keeping its id."""
    transaction = ledger.replace_transaction(transaction_id, _to_create(data))
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete a transaction (idempotent)."""
    ledger.delete_transaction(transaction_id)
    return Response(status_code=204)
