"""Calendar helpers for US/Eastern trade dates."""

from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

from tradetrack.core.exceptions import ValidationError

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def today_eastern() -> date:
    """Return today's calendar date in US/Eastern timezone."""
    return now_eastern().date()


def parse_date(value) -> date:
    """
    Coerce a trade date to a calendar date.

    Accepts date/datetime objects and strings understood by dateutil
    (YYYY-MM-DD preferred). Time and timezone parts are discarded.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    if not text:
        raise ValidationError("Missing trade date")
    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid trade date: {text}")
