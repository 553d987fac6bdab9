"""Page-level validation and error aggregation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import structlog

from formcheck.descriptors import build_href, inputs_in_error
from formcheck.logging import get_logger
from formcheck.messages import resolve_error_message
from formcheck.processing.coercion import coerce_value
from formcheck.processing.resolution import is_included, resolve_field
from formcheck.typing.models import ErrorDescriptor, FieldDefinition, Page, PageErrorReport
from formcheck.validator import check_field

if TYPE_CHECKING:
    from datetime import date

    from formcheck.typing.models import Payload

PageLike = Page | Mapping[str, Any]
FieldLike = FieldDefinition | Mapping[str, Any]

logger = get_logger(__name__)


def as_page(page: PageLike) -> Page:
    """Accept a `Page` or a ``{"fields": {...}}`` mapping.

    Returns:
        Page: Validated page model.
    """
    if isinstance(page, Page):
        return page
    return Page.model_validate(page)


def as_field(field: FieldLike) -> FieldDefinition:
    """Accept a `FieldDefinition` or an attribute mapping.

    Returns:
        FieldDefinition: Validated field model.
    """
    if isinstance(field, FieldDefinition):
        return field
    return FieldDefinition.model_validate(field)


def field_error(
    payload: Payload,
    field: FieldLike,
    field_key: str,
    *,
    today: date | None = None,
) -> ErrorDescriptor | None:
    """Validate one field of a payload.

    Steps: conditional inclusion, bound resolution, value coercion (written
    back to the payload), validation and, on failure, message/anchor building.

    Args:
        payload (Payload): Submitted data.
        field (FieldLike): Field definition.
        field_key (str): Field key in the payload.
        today (date | None): Reference date for relative date checks.

    Returns:
        ErrorDescriptor | None: Error for the field, None when valid or excluded.
    """
    definition = as_field(field)
    if not is_included(payload, definition):
        return None

    resolved = resolve_field(payload, definition)
    value = coerce_value(payload, field_key, resolved)
    error_key = check_field(value, resolved, today=today)
    if error_key is None:
        return None

    logger.debug("Field failed validation", extra={"field_key": field_key, "error_key": str(error_key)})
    return ErrorDescriptor(
        id=field_key,
        key=error_key,
        href=build_href(field_key, resolved, error_key),
        text=resolve_error_message(error_key, resolved),
        inputs=inputs_in_error(field_key, resolved, error_key),
    )


def is_valid_field(payload: Payload, field: FieldLike, field_key: str, *, today: date | None = None) -> bool:
    """Return whether one field passes validation."""
    return field_error(payload, field, field_key, today=today) is None


def validate_page(payload: Payload, page: PageLike, *, today: date | None = None) -> PageErrorReport:
    """Validate every field of a page in order.

    Args:
        payload (Payload): Submitted data. Coerced values are written back.
        page (PageLike): Page definition.
        today (date | None): Reference date for relative date checks.

    Returns:
        PageErrorReport: Ordered summary plus per-field lookups.
    """
    page_model = as_page(page)
    report = PageErrorReport()
    with structlog.contextvars.bound_contextvars(page_id=page_model.id):
        for field_key, field in page_model.fields.items():
            descriptor = field_error(payload, field, field_key, today=today)
            if descriptor is not None:
                report.add(descriptor)
        logger.info(
            "Page validated",
            extra={"field_count": len(page_model.fields), "error_count": len(report.summary)},
        )
    return report


def is_page_valid(payload: Payload, page: PageLike, *, today: date | None = None) -> bool:
    """Return whether every field of the page is valid."""
    page_model = as_page(page)
    return all(
        is_valid_field(payload, field, field_key, today=today) for field_key, field in page_model.fields.items()
    )


def is_valid_page_wrapper(payload: Payload, *, today: date | None = None) -> Callable[[PageLike], bool]:
    """Bind a payload, returning a page predicate usable with `filter`/`all`."""

    def _is_valid(page: PageLike) -> bool:
        return is_page_valid(payload, page, today=today)

    return _is_valid


def validate_schema(
    payload: Payload,
    schema: Mapping[str, PageLike],
    *,
    today: date | None = None,
) -> dict[str, PageErrorReport]:
    """Validate every page of a multi-page schema.

    Args:
        payload (Payload): Submitted data for the whole flow.
        schema (Mapping[str, PageLike]): Pages keyed by page id, in flow order.
        today (date | None): Reference date for relative date checks.

    Returns:
        dict[str, PageErrorReport]: Reports of the pages that have errors.
    """
    reports: dict[str, PageErrorReport] = {}
    for page_id, page in schema.items():
        report = validate_page(payload, page, today=today)
        if report.has_errors:
            reports[page_id] = report
    return reports


def is_valid_schema(payload: Payload, schema: Mapping[str, PageLike], *, today: date | None = None) -> bool:
    """Return whether every page of the schema is valid."""
    return all(is_page_valid(payload, page, today=today) for page in schema.values())
