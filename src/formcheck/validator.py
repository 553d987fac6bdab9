"""Field validation: type-specific checks followed by generic constraints."""

from __future__ import annotations

import math
import re
from datetime import date
from typing import TYPE_CHECKING, Any

from formcheck.processing.formatting import parse_iso_date, strip_commas
from formcheck.typing.enums import ErrorKey, FieldType
from formcheck.typing.models.field import PartialDate

if TYPE_CHECKING:
    from collections.abc import Callable

    from formcheck.typing.models.field import FieldDefinition

_CURRENCY_PATTERN = re.compile(r"^[0-9,]+(\.[0-9]{1,2})?$")

_BETWEEN_KEYS = {
    FieldType.NUMBER: ErrorKey.BETWEEN_MIN_AND_MAX_NUMBERS,
    FieldType.CURRENCY: ErrorKey.BETWEEN_CURRENCY_MIN_AND_MAX,
    FieldType.DATE: ErrorKey.BETWEEN_MIN_AND_MAX_DATES,
}
_MIN_KEYS = {
    FieldType.NUMBER: ErrorKey.NUMBER_MIN,
    FieldType.CURRENCY: ErrorKey.CURRENCY_MIN,
    FieldType.DATE: ErrorKey.AFTER_FIXED_DATE,
}
_MAX_KEYS = {
    FieldType.NUMBER: ErrorKey.NUMBER_MAX,
    FieldType.CURRENCY: ErrorKey.CURRENCY_MAX,
    FieldType.DATE: ErrorKey.BEFORE_FIXED_DATE,
}

# (day present, month present, year present) -> error key
_PARTIAL_DATE_KEYS = {
    (False, False, False): ErrorKey.REQUIRED,
    (False, True, False): ErrorKey.DAY_AND_YEAR_REQUIRED,
    (True, False, False): ErrorKey.MONTH_AND_YEAR_REQUIRED,
    (False, False, True): ErrorKey.DAY_AND_MONTH_REQUIRED,
    (False, True, True): ErrorKey.DAY_REQUIRED,
    (True, False, True): ErrorKey.MONTH_REQUIRED,
    (True, True, False): ErrorKey.YEAR_REQUIRED,
}


def is_empty(value: Any) -> bool:
    """Return whether a submitted value counts as not answered.

    Numeric zero is an answer.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | set):
        return not value
    return False


def to_number(value: Any, *, allow_commas: bool = True) -> float | None:
    """Leniently convert a value to a finite float.

    Args:
        value (Any): Number or numeric string.
        allow_commas (bool): Ignore thousands separators.

    Returns:
        float | None: Parsed number, or None when not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    else:
        text = strip_commas(value) if allow_commas else str(value).strip()
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def classify_partial_date(value: PartialDate) -> ErrorKey:
    """Map the present/missing date parts to the matching error key.

    Args:
        value (PartialDate): Partial date marker.

    Returns:
        ErrorKey: ``required`` or one of the part-specific keys. A marker with
        every part present is classified as ``date``.
    """
    presence = (bool(value.day), bool(value.month), bool(value.year))
    return _PARTIAL_DATE_KEYS.get(presence, ErrorKey.DATE)


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return None


def _as_items(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return list(value)


def _date_error(value: Any, field: FieldDefinition) -> ErrorKey | None:  # noqa: ARG001
    if isinstance(value, PartialDate):
        return classify_partial_date(value)
    if is_empty(value):
        return ErrorKey.REQUIRED
    if parse_iso_date(value) is None:
        return ErrorKey.DATE
    return None


def _optional_string_error(value: Any, field: FieldDefinition) -> ErrorKey | None:  # noqa: ARG001
    return None


def _non_empty_string_error(value: Any, field: FieldDefinition) -> ErrorKey | None:  # noqa: ARG001
    return ErrorKey.REQUIRED if is_empty(value) else None


def _enum_error(value: Any, field: FieldDefinition) -> ErrorKey | None:
    if is_empty(value) or _as_text(value) not in field.valid_values:
        return ErrorKey.ENUM
    return None


def _array_error(value: Any, field: FieldDefinition) -> ErrorKey | None:
    items = _as_items(value)
    if field.min_length is not None and len(items) < field.min_length:
        return ErrorKey.ENUM
    if field.valid_values and any(item not in field.valid_values for item in items):
        return ErrorKey.ENUM
    return None


def _number_error(value: Any, field: FieldDefinition) -> ErrorKey | None:  # noqa: ARG001
    if is_empty(value):
        return ErrorKey.REQUIRED
    if to_number(value, allow_commas=False) is None:
        return ErrorKey.NUMBER
    return None


def _currency_error(value: Any, field: FieldDefinition) -> ErrorKey | None:  # noqa: ARG001
    if is_empty(value):
        return ErrorKey.REQUIRED
    text = _as_text(value)
    if text is None or not _CURRENCY_PATTERN.match(text) or to_number(text) is None:
        return ErrorKey.CURRENCY
    return None


def _file_error(value: Any, field: FieldDefinition) -> ErrorKey | None:  # noqa: ARG001
    return ErrorKey.MISSING_FILE if is_empty(value) else None


_PRIMARY_CHECKS: dict[FieldType, Callable[[Any, FieldDefinition], ErrorKey | None]] = {
    FieldType.DATE: _date_error,
    FieldType.OPTIONAL_STRING: _optional_string_error,
    FieldType.NON_EMPTY_STRING: _non_empty_string_error,
    FieldType.ENUM: _enum_error,
    FieldType.ARRAY: _array_error,
    FieldType.NUMBER: _number_error,
    FieldType.CURRENCY: _currency_error,
    FieldType.FILE: _file_error,
}


def _length_error(value: Any, field: FieldDefinition) -> ErrorKey | None:
    text = _as_text(value)
    sized: str | list[Any] | None = list(value) if isinstance(value, list | tuple) else text
    if field.exact_length is not None and text is not None and len(text.replace(" ", "")) != field.exact_length:
        return ErrorKey.EXACT_LENGTH
    if sized is None:
        return None

    length = len(sized)
    if field.min_length is not None and field.max_length is not None:
        if length < field.min_length or length > field.max_length:
            return ErrorKey.BETWEEN_MIN_AND_MAX_LENGTH
        return None
    if field.max_length is not None and length > field.max_length:
        return ErrorKey.TOO_LONG
    if field.min_length is not None and length < field.min_length:
        return ErrorKey.TOO_SHORT
    return None


def _range_error(value: Any, field: FieldDefinition) -> ErrorKey | None:
    if not field.has_range:
        return None

    if field.type == FieldType.DATE:
        current = parse_iso_date(value)
        low = parse_iso_date(field.eval_min_value)
        high = parse_iso_date(field.eval_max_value)
        if current is None:
            return None
        too_low = low is not None and not current > low
        too_high = high is not None and not current < high
    else:
        current_number = to_number(value)
        low_number = to_number(field.eval_min_value)
        high_number = to_number(field.eval_max_value)
        if current_number is None:
            return None
        too_low = low_number is not None and current_number < low_number
        too_high = high_number is not None and current_number > high_number
        low, high = low_number, high_number

    if low is not None and high is not None and (too_low or too_high):
        return _BETWEEN_KEYS[field.type]
    if too_low:
        return _MIN_KEYS[field.type]
    if too_high:
        return _MAX_KEYS[field.type]
    return None


def _relative_date_error(value: Any, field: FieldDefinition, today: date) -> ErrorKey | None:
    if field.type != FieldType.DATE:
        return None
    current = parse_iso_date(value)
    if current is None:
        return None
    if field.before_today and not current < today:
        return ErrorKey.BEFORE_TODAY
    if field.after_today and not current > today:
        return ErrorKey.AFTER_TODAY
    return None


def _generic_error(value: Any, field: FieldDefinition, today: date) -> ErrorKey | None:
    error = _length_error(value, field) or _range_error(value, field)
    if error is not None:
        return error

    text = _as_text(value)
    if field.regex is not None and text is not None and not field.regex.search(text):
        return ErrorKey.PATTERN

    error = _relative_date_error(value, field, today)
    if error is not None:
        return error

    if field.matches is not None and text not in field.matches:
        return ErrorKey.NO_MATCH
    if field.matching_exclusions is not None and text in field.matching_exclusions:
        return ErrorKey.NO_MATCH
    return None


def check_field(value: Any, field: FieldDefinition, *, today: date | None = None) -> ErrorKey | None:
    """Validate one coerced value against a resolved field definition.

    Type-specific checks run first. Generic constraints then run in a fixed
    order (length, range, pattern, relative dates, matches) and the first
    failure wins. Empty optional strings are always valid.

    Args:
        value (Any): Coerced value.
        field (FieldDefinition): Resolved field definition.
        today (date | None): Reference date for ``before_today``/``after_today``.

    Returns:
        ErrorKey | None: Error key, or None when the value is valid.
    """
    check = _PRIMARY_CHECKS.get(field.type, _non_empty_string_error)
    error = check(value, field)
    if error is not None:
        return error
    if field.type == FieldType.OPTIONAL_STRING and is_empty(value):
        return None
    return _generic_error(value, field, today or date.today())  # noqa: DTZ011
