"""Validation outcome models consumed by page rendering."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from formcheck.typing.enums import ErrorKey


class ErrorDescriptor(BaseModel):
    """One failing field, ready for the error summary and inline rendering."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    id: str
    key: ErrorKey
    href: str
    text: str
    inputs: list[str]


class PageErrorReport(BaseModel):
    """Errors found on one page."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    summary: list[ErrorDescriptor] = Field(default_factory=list)
    inline: dict[str, ErrorDescriptor] = Field(default_factory=dict)
    text: dict[str, str] = Field(default_factory=dict)
    has_errors: bool = False

    def add(self, descriptor: ErrorDescriptor) -> None:
        """Record a field error, keeping summary order.

        Args:
            descriptor (ErrorDescriptor): Error for one field.
        """
        self.summary.append(descriptor)
        self.inline[descriptor.id] = descriptor
        self.text[descriptor.id] = descriptor.text
        self.has_errors = True
