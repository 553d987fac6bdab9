"""Display helpers used by error messages and anchors."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")
_NON_WORD = re.compile(r"\W+")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ISO_DATE_FORMAT = "%Y-%m-%d"


def add_commas(value: Any) -> str:
    """Group digits in thousands, e.g. ``1000000`` -> ``"1,000,000"``."""
    return _THOUSANDS.sub(",", str(value))


def strip_commas(value: Any) -> str:
    """Remove thousands separators and surrounding whitespace."""
    return str(value).strip().replace(",", "")


def currency_display(value: Any) -> str:
    """Format an amount as pounds sterling.

    Pence are shown only when the amount is fractional. Falsy input renders as
    an empty string.

    Args:
        value (Any): Number or numeric string, commas allowed.

    Returns:
        str: Display string such as ``"£2,345"`` or ``"£234,443.40"``.
    """
    if not value:
        return ""
    amount = abs(float(strip_commas(value)))
    if amount % 1:
        return f"£{add_commas(f'{amount:.2f}')}"
    return f"£{add_commas(int(amount))}"


def format_number(value: Any) -> str:
    """Render a bound for messages, dropping a redundant ``.0``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def capitalise(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def slugify(text: str) -> str:
    """Build an input id suffix from a label, e.g. ``"Yes, please"`` -> ``"yes-please"``."""
    return _NON_WORD.sub("-", text.lower()).removesuffix("-")


def zero_pad(value: str) -> str:
    """Pad single-digit numeric strings to two digits."""
    if value.isdigit() and int(value) < 10:  # noqa: PLR2004
        return value.zfill(2)
    return value


def parse_iso_date(value: Any) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` string into a date.

    Returns:
        date | None: The calendar date, or None when the value is not a real date.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Render an ISO date as ``16 November 2010``; unparseable input renders empty."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return ""
    return f"{parsed.day} {_MONTHS[parsed.month - 1]} {parsed.year}"
