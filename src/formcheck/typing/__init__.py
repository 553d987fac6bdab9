"""Typing-centric domain modules."""

from formcheck.typing.enums import DatePart, ErrorKey, FieldType
from formcheck.typing.models import (
    ErrorDescriptor,
    FieldDefinition,
    Page,
    PageErrorReport,
    PartialDate,
    Payload,
)

__all__ = [
    "DatePart",
    "ErrorDescriptor",
    "ErrorKey",
    "FieldDefinition",
    "FieldType",
    "Page",
    "PageErrorReport",
    "PartialDate",
    "Payload",
]
