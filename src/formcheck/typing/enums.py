"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldType(_EnumMixin):
    """Supported page field types."""

    NON_EMPTY_STRING = "nonEmptyString"
    OPTIONAL_STRING = "optionalString"
    NUMBER = "number"
    CURRENCY = "currency"
    DATE = "date"
    ENUM = "enum"
    ARRAY = "array"
    FILE = "file"


class DatePart(_EnumMixin):
    """Sub-inputs of a multi-part date field, in payload order."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class ErrorKey(_EnumMixin):
    """Symbolic identifiers for validation failures."""

    REQUIRED = "required"
    DAY_REQUIRED = "dayRequired"
    MONTH_REQUIRED = "monthRequired"
    YEAR_REQUIRED = "yearRequired"
    DAY_AND_MONTH_REQUIRED = "dayAndMonthRequired"
    DAY_AND_YEAR_REQUIRED = "dayAndYearRequired"
    MONTH_AND_YEAR_REQUIRED = "monthAndYearRequired"
    DATE = "date"
    NUMBER = "number"
    CURRENCY = "currency"
    ENUM = "enum"
    MISSING_FILE = "missingFile"
    EXACT_LENGTH = "exactLength"
    BETWEEN_MIN_AND_MAX_LENGTH = "betweenMinAndMaxLength"
    TOO_LONG = "tooLong"
    TOO_SHORT = "tooShort"
    BETWEEN_MIN_AND_MAX_NUMBERS = "betweenMinAndMaxNumbers"
    BETWEEN_CURRENCY_MIN_AND_MAX = "betweenCurrencyMinAndMax"
    BETWEEN_MIN_AND_MAX_DATES = "betweenMinAndMaxDates"
    NUMBER_MIN = "numberMin"
    CURRENCY_MIN = "currencyMin"
    AFTER_FIXED_DATE = "afterFixedDate"
    NUMBER_MAX = "numberMax"
    CURRENCY_MAX = "currencyMax"
    BEFORE_FIXED_DATE = "beforeFixedDate"
    PATTERN = "pattern"
    BEFORE_TODAY = "beforeToday"
    AFTER_TODAY = "afterToday"
    NO_MATCH = "noMatch"
