"""CSV template generation."""

import csv
import io
from pathlib import Path
from typing import TextIO

from tradetrack.csv.importer import CSV_COLUMNS

EXAMPLE_ROWS = [
    {
        "date": "2025-01-28",
        "type": "BUY",
        "symbol": "NVDA",
        "name": "Nvidia Corp",
        "shares": "100",
        "price": "117.88",
        "account": "TFSA",
        "exchange": "NASDAQ",
        "currency": "USD",
    },
    {
        "date": "2025-06-27",
        "type": "BUY",
        "symbol": "SHOP",
        "name": "Shopify Inc",
        "shares": "25",
        "price": "148.20",
        "account": "RRSP",
        "exchange": "TSX",
        "currency": "CAD",
    },
    {
        "date": "2025-12-03",
        "type": "SELL",
        "symbol": "NVDA",
        "name": "Nvidia Corp",
        "shares": "20",
        "price": "181.50",
        "account": "TFSA",
        "exchange": "NASDAQ",
        "currency": "USD",
    },
]


class CsvTemplateGenerator:
    """Generator for blank CSV import templates."""

    def generate_template(self, path: str) -> None:
        """
        Generate a CSV template with headers and example rows.

        Args:
            path: Output file path for the template
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            self._write(csvfile)

    def template_text(self) -> str:
        """Return the template as CSV text."""
        buffer = io.StringIO()
        self._write(buffer)
        return buffer.getvalue()

    @staticmethod
    def _write(stream: TextIO) -> None:
        writer = csv.DictWriter(stream, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for row in EXAMPLE_ROWS:
            writer.writerow(row)
