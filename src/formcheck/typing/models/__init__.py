"""Core domain model exports."""

from formcheck.typing.models.field import (
    Bound,
    ComputedBound,
    FieldDefinition,
    FieldReference,
    LiteralBound,
    PartialDate,
    Payload,
    PayloadFunction,
)
from formcheck.typing.models.page import Page
from formcheck.typing.models.report import ErrorDescriptor, PageErrorReport

__all__ = [
    "Bound",
    "ComputedBound",
    "ErrorDescriptor",
    "FieldDefinition",
    "FieldReference",
    "LiteralBound",
    "Page",
    "PageErrorReport",
    "PartialDate",
    "Payload",
    "PayloadFunction",
]
