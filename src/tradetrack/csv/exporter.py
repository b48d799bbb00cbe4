"""CSV export functionality."""

import csv
import io
from pathlib import Path
from typing import TextIO

from tradetrack.services.ledger_service import LedgerService
from tradetrack.csv.importer import CSV_COLUMNS


class CsvExporter:
    """
    CSV exporter for transaction data.

    Exports ledger transactions to CSV format for backup/transfer.
    """

    def __init__(self, ledger_service: LedgerService):
        self._ledger = ledger_service

    def export_csv(self, path: str) -> None:
        """Export all transactions to a CSV file."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            self._write(csvfile)

    def to_csv_text(self) -> str:
        """Return all transactions as CSV text."""
        buffer = io.StringIO()
        self._write(buffer)
        return buffer.getvalue()

    def _write(self, stream: TextIO) -> None:
        writer = csv.DictWriter(stream, fieldnames=CSV_COLUMNS)
        writer.writeheader()

        for txn in self._ledger.list_transactions():
            writer.writerow({
                "date": txn.date.isoformat(),
                "type": txn.type.value,
                "symbol": txn.symbol,
                "name": txn.name,
                "shares": str(txn.shares) if txn.shares is not None else "",
                "price": str(txn.price) if txn.price is not None else "",
                "account": txn.account,
                "exchange": txn.exchange,
                "currency": txn.currency,
            })
