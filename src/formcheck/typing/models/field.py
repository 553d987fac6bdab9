"""Field definition models."""

from __future__ import annotations

import re
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from datetime import date
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from formcheck.logging import get_logger
from formcheck.processing.formatting import ISO_DATE_PATTERN
from formcheck.typing.enums import FieldType

Payload = MutableMapping[str, Any]
PayloadFunction = Callable[[Payload], Any]

RANGE_FIELD_TYPES = frozenset({FieldType.NUMBER, FieldType.CURRENCY, FieldType.DATE})

logger = get_logger(__name__)


class Bound:
    """Configured ``min``/``max`` bound, resolved against the payload at validation time."""


@dataclass(frozen=True)
class LiteralBound(Bound):
    """Fixed number or ISO date string."""

    value: Any


@dataclass(frozen=True)
class FieldReference(Bound):
    """Value of another field in the same payload."""

    key: str


@dataclass(frozen=True)
class ComputedBound(Bound):
    """Value computed from the whole payload."""

    function: PayloadFunction


class PartialDate(NamedTuple):
    """Date submitted as parts with at least one part missing.

    Missing parts are ``None``; present parts are already zero-padded.
    """

    day: str | None
    month: str | None
    year: str | None


def to_bound(raw: Any, field_type: FieldType) -> Bound | None:
    """Normalize an authored bound into the bound sum type.

    Args:
        raw (Any): Authored ``min``/``max`` value.
        field_type (FieldType): Type of the owning field.

    Returns:
        Bound | None: Normalized bound, None when unset.
    """
    if raw is None or isinstance(raw, Bound):
        return raw
    if isinstance(raw, date):
        return LiteralBound(raw.isoformat())
    if isinstance(raw, str):
        if field_type == FieldType.DATE and ISO_DATE_PATTERN.match(raw):
            return LiteralBound(raw)
        return FieldReference(raw)
    if callable(raw):
        return ComputedBound(raw)
    return LiteralBound(raw)


class FieldDefinition(BaseModel):
    """Single page field and its validation constraints.

    Attributes accept the camelCase names used by page documents
    (``minLength``, ``validValues``, ``includeIf`` ...) as well as snake_case.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: FieldType = FieldType.NON_EMPTY_STRING
    name: str = ""

    exact_length: int | None = None
    min_length: int | None = None
    max_length: int | None = None
    input_type: str = "characters"

    min: InstanceOf[Bound] | None = None
    max: InstanceOf[Bound] | None = None
    min_description: str | None = None
    max_description: str | None = None
    before_today: bool = False
    after_today: bool = False

    valid_values: list[str] = Field(default_factory=list)
    regex: re.Pattern[str] | None = None
    pattern_text: str | None = None
    matches: list[str] | None = None
    matching_exclusions: list[str] | None = None
    no_match_text: str | None = None

    transform: PayloadFunction | None = None
    include_if: PayloadFunction | None = None
    errors: dict[str, str | Callable[..., str]] = Field(default_factory=dict)

    after_field: str | None = None
    before_field: str | None = None
    currency_max_field: str | None = None
    after_date_field: PayloadFunction | None = None
    before_date_field: PayloadFunction | None = None
    get_max_currency_from_field: PayloadFunction | None = None

    eval_min_value: Any = None
    eval_max_value: Any = None

    @field_validator("type", mode="before")
    @classmethod
    def _fallback_unknown_type(cls, value: Any) -> Any:
        """Treat unknown field types as ``nonEmptyString``.

        Args:
            value (Any): Authored type.

        Returns:
            Any: The type, or ``nonEmptyString`` when unsupported.
        """
        if value is None:
            return FieldType.NON_EMPTY_STRING
        try:
            return FieldType.from_str(str(value))
        except ValueError:
            logger.warning("Unknown field type, using nonEmptyString", extra={"field_type": str(value)})
            return FieldType.NON_EMPTY_STRING

    @field_validator("min", "max", mode="before")
    @classmethod
    def _normalize_bound(cls, value: Any, info: ValidationInfo) -> Bound | None:
        """Convert authored bounds to literal, field reference or computed bounds.

        Args:
            value (Any): Authored bound.
            info (ValidationInfo): Validation context holding the already parsed type.

        Returns:
            Bound | None: Normalized bound.
        """
        field_type = info.data.get("type", FieldType.NON_EMPTY_STRING)
        return to_bound(value, field_type)

    @property
    def has_range(self) -> bool:
        """Return whether min/max bounds apply to this field type."""
        return self.type in RANGE_FIELD_TYPES
