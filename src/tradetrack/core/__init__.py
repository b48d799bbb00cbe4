"""Core utilities and shared functionality."""

from tradetrack.core.timezone import (
    now_eastern,
    today_eastern,
    parse_date,
    EASTERN_TZ,
)
from tradetrack.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
)

__all__ = [
    "now_eastern",
    "today_eastern",
    "parse_date",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
]
