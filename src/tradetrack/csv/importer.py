"""CSV import functionality."""

import csv
import io
from pathlib import Path
from typing import TextIO

from tradetrack.core.exceptions import ValidationError
from tradetrack.domain.views import ImportSummary
from tradetrack.services.import_service import ImportService


# Column order used for export and templates
CSV_COLUMNS = [
    "date",
    "type",
    "symbol",
    "name",
    "shares",
    "price",
    "account",
    "exchange",
    "currency",
]

REQUIRED_COLUMNS = {"type", "symbol", "shares", "price"}


class CsvImporter:
    """
    CSV importer for bulk transaction loading.

    Expected format: date, type, symbol, name, shares, price, account, exchange, currency
    Only type, symbol, shares and price are required; blank dates mean today.
    """

    def __init__(self, import_service: ImportService):
        self._imports = import_service

    def import_csv(self, path: str) -> ImportSummary:
        """
        Import transactions from a CSV file.

        Returns summary with imported/error counts.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ValidationError(f"File not found: {path}")

        with open(file_path, newline="", encoding="utf-8-sig") as csvfile:
            return self._import_stream(csvfile)

    def import_text(self, text: str) -> ImportSummary:
        """Import transactions from CSV content already in memory."""
        return self._import_stream(io.StringIO(text.lstrip("\ufeff")))

    def _import_stream(self, stream: TextIO) -> ImportSummary:
        reader = csv.DictReader(stream)

        # Validate columns
        fieldnames = [name.strip() for name in reader.fieldnames or []]
        missing = REQUIRED_COLUMNS - set(fieldnames)
        if missing:
            raise ValidationError(f"Missing required columns: {', '.join(sorted(missing))}")

        rows = [
            {key.strip(): value for key, value in row.items() if key is not None}
            for row in reader
        ]
        # Row numbers start at 2 (header is row 1)
        return self._imports.import_records(rows, label="Row", start=2)
