"""CSV import/export utilities."""

from tradetrack.csv.importer import CsvImporter
from tradetrack.csv.exporter import CsvExporter
from tradetrack.csv.template import CsvTemplateGenerator

__all__ = [
    "CsvImporter",
    "CsvExporter",
    "CsvTemplateGenerator",
]
