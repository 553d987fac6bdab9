"""User-facing error messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formcheck.exceptions import UnknownErrorKeyError
from formcheck.processing.formatting import capitalise, currency_display, format_date, format_number
from formcheck.typing.enums import ErrorKey
from formcheck.typing.models.field import LiteralBound

if TYPE_CHECKING:
    from collections.abc import Callable

    from formcheck.typing.models.field import Bound, FieldDefinition


def _literal(bound: Bound | None) -> Any:
    return bound.value if isinstance(bound, LiteralBound) else None


def _min_value(field: FieldDefinition) -> Any:
    return field.eval_min_value if field.eval_min_value is not None else _literal(field.min)


def _max_value(field: FieldDefinition) -> Any:
    return field.eval_max_value if field.eval_max_value is not None else _literal(field.max)


def _described(value: str, description: str | None) -> str:
    """Prefix a rendered bound with its description, e.g. ``the day you joined (16 November 2010)``."""
    if not description:
        return value
    if not value:
        return description
    return f"{description} ({value})"


def _date_bound(value: Any, description: str | None, field_label: str | None) -> str:
    rendered = format_date(value)
    if description or not field_label:
        return _described(rendered, description)
    return f"{field_label}, {rendered}" if rendered else field_label


def _min_date(field: FieldDefinition) -> str:
    return _date_bound(_min_value(field), field.min_description, field.after_field)


def _max_date(field: FieldDefinition) -> str:
    return _date_bound(_max_value(field), field.max_description, field.before_field)


def _min_number(field: FieldDefinition) -> str:
    return _described(format_number(_min_value(field)), field.min_description)


def _max_number(field: FieldDefinition) -> str:
    return _described(format_number(_max_value(field)), field.max_description)


def _currency(value: Any) -> str:
    # zero is a bound, not a missing one
    return "" if value is None else currency_display(str(value))


def _min_currency(field: FieldDefinition) -> str:
    return _described(_currency(_min_value(field)), field.min_description)


def _max_currency(field: FieldDefinition) -> str:
    return _described(_currency(_max_value(field)), field.max_description)


def _title(field: FieldDefinition) -> str:
    return capitalise(field.name)


def _currency_max(field: FieldDefinition) -> str:
    if field.currency_max_field:
        amount = _currency(_max_value(field))
        return f"{_title(field)} must not be more than the value of {field.currency_max_field} which is {amount}"
    return f"{_title(field)} must be {_max_currency(field)} or less"


def _no_match(field: FieldDefinition) -> str:
    if field.no_match_text:
        return f"{_title(field)} must match {field.no_match_text}"
    return f"{_title(field)} is not recognised"


def _date_part_missing(parts: str) -> Callable[[FieldDefinition], str]:
    return lambda field: f"{_title(field)} must include a {parts}"


ERROR_TEMPLATES: dict[ErrorKey, Callable[[FieldDefinition], str]] = {
    ErrorKey.REQUIRED: lambda field: f"Enter {field.name}",
    ErrorKey.DAY_REQUIRED: _date_part_missing("day"),
    ErrorKey.MONTH_REQUIRED: _date_part_missing("month"),
    ErrorKey.YEAR_REQUIRED: _date_part_missing("year"),
    ErrorKey.DAY_AND_MONTH_REQUIRED: _date_part_missing("day and month"),
    ErrorKey.DAY_AND_YEAR_REQUIRED: _date_part_missing("day and year"),
    ErrorKey.MONTH_AND_YEAR_REQUIRED: _date_part_missing("month and year"),
    ErrorKey.DATE: lambda field: f"{_title(field)} must be a real date",
    ErrorKey.NUMBER: lambda field: f"{_title(field)} must be a number",
    ErrorKey.CURRENCY: lambda field: f"{_title(field)} must be an amount of money",
    ErrorKey.ENUM: lambda field: f"Select {field.name}",
    ErrorKey.MISSING_FILE: lambda field: f"Upload {field.name}",
    ErrorKey.EXACT_LENGTH: lambda field: (
        f"{_title(field)} must be {format_number(field.exact_length)} {field.input_type}"
    ),
    ErrorKey.BETWEEN_MIN_AND_MAX_LENGTH: lambda field: (
        f"{_title(field)} must be between {format_number(field.min_length)} and "
        f"{format_number(field.max_length)} {field.input_type}"
    ),
    ErrorKey.TOO_LONG: lambda field: (
        f"{_title(field)} must be {format_number(field.max_length)} {field.input_type} or fewer"
    ),
    ErrorKey.TOO_SHORT: lambda field: (
        f"{_title(field)} must be {format_number(field.min_length)} {field.input_type} or more"
    ),
    ErrorKey.BETWEEN_MIN_AND_MAX_NUMBERS: lambda field: (
        f"{_title(field)} must be between {_min_number(field)} and {_max_number(field)}"
    ),
    ErrorKey.BETWEEN_CURRENCY_MIN_AND_MAX: lambda field: (
        f"{_title(field)} must be between {_min_currency(field)} and {_max_currency(field)}"
    ),
    ErrorKey.BETWEEN_MIN_AND_MAX_DATES: lambda field: (
        f"{_title(field)} must be between {_min_date(field)} and {_max_date(field)}"
    ),
    ErrorKey.NUMBER_MIN: lambda field: f"{_title(field)} must be {_min_number(field)} or more",
    ErrorKey.CURRENCY_MIN: lambda field: f"{_title(field)} must be {_min_currency(field)} or more",
    ErrorKey.AFTER_FIXED_DATE: lambda field: f"{_title(field)} must be after {_min_date(field)}",
    ErrorKey.NUMBER_MAX: lambda field: f"{_title(field)} must be {_max_number(field)} or less",
    ErrorKey.CURRENCY_MAX: _currency_max,
    ErrorKey.BEFORE_FIXED_DATE: lambda field: f"{_title(field)} must be before {_max_date(field)}",
    ErrorKey.PATTERN: lambda field: field.pattern_text or f"{_title(field)} is not valid",
    ErrorKey.BEFORE_TODAY: lambda field: f"{_title(field)} must be before today",
    ErrorKey.AFTER_TODAY: lambda field: f"{_title(field)} must be after today",
    ErrorKey.NO_MATCH: _no_match,
}


def resolve_error_message(error_key: ErrorKey | str, field: FieldDefinition) -> str:
    """Return the message for an error on a field.

    A field-level ``errors`` entry overrides the built-in template: strings are
    used as-is and callables receive the field.

    Args:
        error_key (ErrorKey | str): Error key.
        field (FieldDefinition): Field definition, ideally resolved so bounds are known.

    Raises:
        UnknownErrorKeyError: If no override or template exists for the key.

    Returns:
        str: Message text.
    """
    key = str(error_key)
    override = field.errors.get(key)
    if override is not None:
        return override(field) if callable(override) else override

    try:
        template = ERROR_TEMPLATES[ErrorKey(key)]
    except ValueError as exc:
        raise UnknownErrorKeyError(error_key=key) from exc
    return template(field)
