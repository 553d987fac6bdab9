"""Normalization of submitted values before validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formcheck.processing.formatting import ISO_DATE_PATTERN, parse_iso_date, strip_commas, zero_pad
from formcheck.typing.enums import DatePart, FieldType
from formcheck.typing.models.field import PartialDate

if TYPE_CHECKING:
    from formcheck.typing.models.field import FieldDefinition, Payload


def date_part_key(field_key: str, part: DatePart) -> str:
    """Return the payload key of one date sub-input, e.g. ``dob-day``."""
    return f"{field_key}-{part.value}"


def strip_currency(value: Any) -> str:
    """Drop a leading pound sign and thousands separators.

    Args:
        value (Any): Raw submitted amount.

    Returns:
        str: Decimal string.
    """
    return strip_commas(value).removeprefix("£").strip()


def _date_part(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return zero_pad(text) if text else None


def coerce_date(payload: Payload, field_key: str) -> str | PartialDate:
    """Read a date from the payload.

    A ``YYYY-MM-DD`` value under the field key wins. Otherwise the day, month
    and year sub-inputs are composed into an ISO string when all three are
    present.

    Args:
        payload (Payload): Submitted data.
        field_key (str): Key of the date field.

    Returns:
        str | PartialDate: ISO date string (not necessarily a real date), or
        the partial marker when a part is missing.
    """
    value = payload.get(field_key)
    if isinstance(value, str) and ISO_DATE_PATTERN.match(value):
        return value

    day, month, year = (_date_part(payload.get(date_part_key(field_key, part))) for part in DatePart)
    if day and month and year:
        return f"{year}-{month}-{day}"
    if not (day or month or year) and isinstance(value, str) and value.strip():
        return value
    return PartialDate(day=day, month=month, year=year)


def coerce_reference_date(payload: Payload, field_key: str) -> str | None:
    """Return another field's date when it is a real calendar date.

    The payload is not modified.
    """
    value = coerce_date(payload, field_key)
    if isinstance(value, PartialDate) or parse_iso_date(value) is None:
        return None
    return value


def coerce_value(payload: Payload, field_key: str, field: FieldDefinition) -> Any:
    """Produce the canonical value to validate and store it back in the payload.

    ``transform`` runs first on the full payload; currency amounts then lose
    their symbol and separators. Dates without a transform are composed from
    their parts.

    Args:
        payload (Payload): Submitted data, updated in place.
        field_key (str): Field key.
        field (FieldDefinition): Field definition.

    Returns:
        Any: Value to validate.
    """
    if field.transform is not None:
        value = field.transform(payload)
    elif field.type == FieldType.DATE:
        value = coerce_date(payload, field_key)
    else:
        value = payload.get(field_key)

    if field.type == FieldType.CURRENCY and value is not None and not isinstance(value, list):
        value = strip_currency(value)

    if isinstance(value, str):
        payload[field_key] = value
    return value
