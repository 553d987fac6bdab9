"""Value formatting, coercion and resolution helpers."""

from formcheck.processing.formatting import (
    add_commas,
    capitalise,
    currency_display,
    format_date,
    format_number,
    parse_iso_date,
    slugify,
    strip_commas,
    zero_pad,
)

__all__ = [
    "add_commas",
    "capitalise",
    "currency_display",
    "format_date",
    "format_number",
    "parse_iso_date",
    "slugify",
    "strip_commas",
    "zero_pad",
]
