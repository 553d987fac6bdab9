"""formcheck package."""

from formcheck.exceptions import PackageError, PageLoadError, SettingsError, UnknownErrorKeyError
from formcheck.logging import configure_logging, get_logger
from formcheck.messages import resolve_error_message
from formcheck.pages import (
    field_error,
    is_page_valid,
    is_valid_field,
    is_valid_page_wrapper,
    is_valid_schema,
    validate_page,
    validate_schema,
)
from formcheck.processing.formatting import currency_display, format_date
from formcheck.settings import Settings, get_settings
from formcheck.typing import ErrorDescriptor, ErrorKey, FieldDefinition, FieldType, Page, PageErrorReport

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("formcheck")

__all__ = [
    "ErrorDescriptor",
    "ErrorKey",
    "FieldDefinition",
    "FieldType",
    "PackageError",
    "Page",
    "PageErrorReport",
    "PageLoadError",
    "Settings",
    "SettingsError",
    "UnknownErrorKeyError",
    "__version__",
    "configure_logging",
    "currency_display",
    "field_error",
    "format_date",
    "get_logger",
    "get_settings",
    "is_page_valid",
    "is_valid_field",
    "is_valid_page_wrapper",
    "is_valid_schema",
    "logger",
    "resolve_error_message",
    "validate_page",
    "validate_schema",
]
