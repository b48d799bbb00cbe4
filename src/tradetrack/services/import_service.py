"""
Validation boundary for transactions arriving from untyped sources.

AI parsers, CSV files and bulk API calls all hand over loosely-shaped
records (dicts with strings, floats or nulls). Each record is coerced into
a TransactionCreate or rejected with a reason before it reaches the ledger.
"""

import datetime as dt
import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from tradetrack.core.exceptions import AppError
from tradetrack.core.timezone import parse_date, today_eastern
from tradetrack.domain.models import TransactionType
from tradetrack.domain.normalize import canonical_symbol, canonical_type, to_finite_decimal
from tradetrack.domain.views import ImportSummary
from tradetrack.services.ledger_service import LedgerService, TransactionCreate

logger = logging.getLogger(__name__)


class TransactionPayload(BaseModel):
    """Schema for one externally supplied trade record."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    date: dt.date = Field(default_factory=today_eastern)
    type: TransactionType = TransactionType.BUY
    symbol: str = Field(..., min_length=1)
    name: Optional[str] = None
    shares: Decimal = Field(..., gt=0)
    price: Decimal = Field(..., gt=0)
    account: str = ""
    exchange: str = ""
    currency: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_trade_date(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return today_eastern()
        try:
            return parse_date(v)
        except AppError as exc:
            raise ValueError(exc.message)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        # A missing type means BUY
        if v is None or (isinstance(v, str) and not v.strip()):
            return TransactionType.BUY
        try:
            return canonical_type(v)
        except AppError as exc:
            raise ValueError(exc.message)

    @field_validator("symbol", mode="before")
    @classmethod
    def normalize_symbol(cls, v: Any) -> Any:
        return canonical_symbol(v) if isinstance(v, str) else v

    @field_validator("shares", "price", mode="before")
    @classmethod
    def finite_number(cls, v: Any) -> Decimal:
        number = to_finite_decimal(v)
        if number is None:
            raise ValueError("must be a finite number")
        return number

    @field_validator("account", "exchange", mode="before")
    @classmethod
    def empty_when_null(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v.strip().upper() if isinstance(v, str) else v

    def to_create(self) -> TransactionCreate:
        """Convert to ledger input; the name falls back to the symbol."""
        return TransactionCreate(
            type=self.type,
            symbol=self.symbol,
            shares=self.shares,
            price=self.price,
            date=self.date,
            name=self.name or self.symbol,
            account=self.account,
            exchange=self.exchange,
            currency=self.currency,
        )


@dataclass(frozen=True)
class Ok:
    """Successful parse: records ready for the ledger."""

    transactions: list[TransactionCreate] = field(default_factory=list)


@dataclass(frozen=True)
class Err:
    """Failed parse with a human-readable reason."""

    reason: str


ParseResult = Union[Ok, Err]


def _describe(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into 'field: message' pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def parse_transaction(raw: Any) -> ParseResult:
    """Validate a single raw record."""
    if not isinstance(raw, dict):
        return Err(f"Expected an object, got {type(raw).__name__}")
    try:
        payload = TransactionPayload.model_validate(raw)
    except PydanticValidationError as exc:
        return Err(_describe(exc))
    return Ok([payload.to_create()])


def parse_transactions(raws: Any) -> ParseResult:
    """
    Validate a batch of raw records.

    The batch fails as a whole if it is not a list or any record is invalid.
    """
    if not isinstance(raws, list):
        return Err(f"Expected a list of transactions, got {type(raws).__name__}")

    records: list[TransactionCreate] = []
    for index, raw in enumerate(raws):
        result = parse_transaction(raw)
        if isinstance(result, Err):
            return Err(f"Record {index}: {result.reason}")
        records.extend(result.transactions)
    return Ok(records)


class ImportService:
    """
    Best-effort bulk import into the ledger.

    Valid records are stored; invalid ones are reported and skipped.
    """

    def __init__(self, ledger_service: LedgerService):
        self._ledger = ledger_service

    def import_records(
        self,
        raws: list[Any],
        label: str = "Record",
        start: int = 0,
    ) -> ImportSummary:
        """
        Import raw records, numbering errors from `start` with `label`.

        Returns summary with imported/error counts.
        """
        summary = ImportSummary(import_batch_id=uuid.uuid4().hex)
        valid: list[TransactionCreate] = []

        for index, raw in enumerate(raws, start=start):
            result = parse_transaction(raw)
            if isinstance(result, Err):
                summary.error_count += 1
                summary.errors.append(f"{label} {index}: {result.reason}")
                continue
            valid.extend(result.transactions)

        if valid:
            self._ledger.bulk_add(valid)
        summary.imported_count = len(valid)

        if summary.error_count:
            logger.warning(
                "Import %s: %d imported, %d rejected",
                summary.import_batch_id, summary.imported_count, summary.error_count,
            )
        return summary
