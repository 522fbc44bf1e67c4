"""
Price text parsers for converting raw input to canonical price records.

This module turns line-delimited "<date>,<value>" text and manually entered
rows into PriceRecord objects. Parsing is locale-invariant and never raises:
lines that cannot be parsed are dropped and only show up downstream as a
short series.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Union

import structlog

from .models import ParseReport, PriceRecord

logger = structlog.get_logger(__name__)

# Numeric date layouts accepted besides ISO 8601; none depend on the host locale
DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
)

# Optional sign, digits with optional fraction, optional exponent; '.' is the only separator
PRICE_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

LINE_SPLIT_PATTERN = re.compile(r"[\r\n]+")


def parse_date(text: str) -> Optional[date]:
    """
    Parse a calendar date from text.

    Args:
        text: Date text, ISO 8601 or one of DATE_FORMATS

    Returns:
        Parsed date, or None if the text is not a recognised date
    """
    text = text.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


def parse_price(text: str) -> Optional[Decimal]:
    """
    Parse a decimal price from text using '.' as the decimal separator.

    Args:
        text: Price text such as "101.25", "-3" or ".5"

    Returns:
        Parsed Decimal, or None if the text is not a finite number
    """
    text = text.strip()
    if not PRICE_PATTERN.match(text):
        return None

    try:
        value = Decimal(text)
    except InvalidOperation:
        return None

    return value if value.is_finite() else None


def parse_price_line(line: str) -> Optional[PriceRecord]:
    """
    Parse a single "<date>,<value>" line.

    Returns:
        PriceRecord, or None if the line is malformed
    """
    parts = line.split(",")
    if len(parts) != 2:
        return None

    record_date = parse_date(parts[0])
    value = parse_price(parts[1])
    if record_date is None or value is None:
        return None

    return PriceRecord(date=record_date, value=value)


def parse_csv_with_report(text: Optional[str]) -> ParseReport:
    """
    Parse line-delimited price text and report how many lines were dropped.

    Args:
        text: Raw text, one "<date>,<value>" observation per line

    Returns:
        ParseReport with records in input order
    """
    if text is None or not text.strip():
        return ParseReport()

    lines = [line for line in LINE_SPLIT_PATTERN.split(text) if line]

    records = []
    dropped = 0
    for line_number, line in enumerate(lines, start=1):
        record = parse_price_line(line)
        if record is None:
            dropped += 1
            logger.debug("Dropped malformed price line", line_number=line_number, line=line[:80])
            continue
        records.append(record)

    logger.debug(
        "Parsed price text",
        total_lines=len(lines),
        parsed_lines=len(records),
        dropped_lines=dropped
    )

    return ParseReport(records=records, total_lines=len(lines), dropped_lines=dropped)


def parse_csv(text: Optional[str]) -> list[PriceRecord]:
    """
    Parse line-delimited price text into price records.

    Lines split on '\\n' or '\\r'. A line must hold exactly two comma-separated
    fields, a date and a price; anything else is silently discarded.

    Args:
        text: Raw text, one "<date>,<value>" observation per line

    Returns:
        Price records in the order they appear in the text
    """
    return parse_csv_with_report(text).records


def _coerce_date(value: Union[date, str]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    return None


def _coerce_price(value: Any) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, float):
        return parse_price(repr(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        return parse_price(value)
    return None


def parse_manual_entries(entries: Iterable[tuple[Any, Any]]) -> list[PriceRecord]:
    """
    Build price records from manually entered (date, value) rows.

    Rows missing either field, or holding an unparseable one, are skipped.
    The remaining records are ordered by date, oldest first.

    Args:
        entries: Iterable of (date, value) pairs; either side may be None

    Returns:
        Price records sorted by ascending date
    """
    records = []
    for entry_date, entry_value in entries:
        if entry_date is None or entry_value is None:
            continue

        record_date = _coerce_date(entry_date)
        value = _coerce_price(entry_value)
        if record_date is None or value is None:
            continue

        records.append(PriceRecord(date=record_date, value=value))

    return sorted(records, key=lambda record: record.date)
