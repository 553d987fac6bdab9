"""Anchor links and implicated inputs for error summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formcheck.exceptions import UnknownErrorKeyError
from formcheck.processing.coercion import date_part_key
from formcheck.processing.formatting import slugify
from formcheck.typing.enums import DatePart, ErrorKey, FieldType

if TYPE_CHECKING:
    from formcheck.typing.models.field import FieldDefinition

_WHOLE_DATE = (DatePart.DAY, [DatePart.DAY, DatePart.MONTH, DatePart.YEAR])

_DATE_ERROR_LINKS: dict[ErrorKey, tuple[DatePart, list[DatePart]]] = {
    ErrorKey.REQUIRED: _WHOLE_DATE,
    ErrorKey.DAY_REQUIRED: (DatePart.DAY, [DatePart.DAY]),
    ErrorKey.MONTH_REQUIRED: (DatePart.MONTH, [DatePart.MONTH]),
    ErrorKey.YEAR_REQUIRED: (DatePart.YEAR, [DatePart.YEAR]),
    ErrorKey.DAY_AND_YEAR_REQUIRED: (DatePart.DAY, [DatePart.DAY, DatePart.YEAR]),
    ErrorKey.DAY_AND_MONTH_REQUIRED: (DatePart.DAY, [DatePart.DAY, DatePart.MONTH]),
    ErrorKey.MONTH_AND_YEAR_REQUIRED: (DatePart.MONTH, [DatePart.MONTH, DatePart.YEAR]),
}


def date_error_link(error_key: ErrorKey | str) -> tuple[DatePart, list[DatePart]]:
    """Return the anchored sub-input and implicated sub-inputs for a date error.

    Errors about the date as a whole (not a real date, out of range ...)
    implicate every part and anchor on the day.

    Args:
        error_key (ErrorKey | str): Error key reported for a date field.

    Raises:
        UnknownErrorKeyError: If the key is not a known error key.

    Returns:
        tuple[DatePart, list[DatePart]]: Anchor part and implicated parts.
    """
    try:
        key = ErrorKey(str(error_key))
    except ValueError as exc:
        raise UnknownErrorKeyError(error_key=str(error_key), message="No date link for error key") from exc
    anchor, inputs = _DATE_ERROR_LINKS.get(key, _WHOLE_DATE)
    return anchor, list(inputs)


def build_href(field_key: str, field: FieldDefinition, error_key: ErrorKey | str) -> str:
    """Build the in-page link for an error summary entry.

    Enum errors link to the first option's input (``{key}-{slug}``), date
    errors to the relevant sub-input and everything else to the field itself.

    Args:
        field_key (str): Field key.
        field (FieldDefinition): Field definition.
        error_key (ErrorKey | str): Reported error key.

    Returns:
        str: ``#``-prefixed anchor.
    """
    if field.type == FieldType.ENUM and field.valid_values:
        return f"#{field_key}-{slugify(field.valid_values[0])}"
    if field.type == FieldType.DATE:
        anchor, _ = date_error_link(error_key)
        return f"#{date_part_key(field_key, anchor)}"
    return f"#{field_key}"


def inputs_in_error(field_key: str, field: FieldDefinition, error_key: ErrorKey | str) -> list[str]:
    """List the inputs to highlight for an error.

    Returns:
        list[str]: Date part names for dates, otherwise the field key.
    """
    if field.type == FieldType.DATE:
        _, inputs = date_error_link(error_key)
        return [part.value for part in inputs]
    return [field_key]
