"""Evaluation of payload-dependent field attributes."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from formcheck.processing.coercion import coerce_reference_date, strip_currency
from formcheck.typing.enums import FieldType
from formcheck.typing.models.field import ComputedBound, FieldReference, LiteralBound

if TYPE_CHECKING:
    from formcheck.typing.models.field import Bound, FieldDefinition, Payload

_AMOUNT_FIELD_TYPES = frozenset({FieldType.NUMBER, FieldType.CURRENCY})


def is_included(payload: Payload, field: FieldDefinition) -> bool:
    """Return whether the field takes part in validation for this payload."""
    if field.include_if is None:
        return True
    return bool(field.include_if(payload))


def _normalize_resolved(value: Any, field_type: FieldType) -> Any:
    if isinstance(value, date) and field_type == FieldType.DATE:
        return value.isoformat()
    if isinstance(value, str) and field_type in _AMOUNT_FIELD_TYPES:
        value = strip_currency(value)
    if isinstance(value, str) and not value.strip():
        return None
    return value


def resolve_bound(bound: Bound | None, payload: Payload, field_type: FieldType) -> Any:
    """Evaluate one bound against the payload.

    Field references to dates go through date composition so either an ISO
    value or day/month/year parts can be referenced. Number and currency
    bounds given as strings lose their pound sign and thousands separators,
    whatever their source.

    Args:
        bound (Bound | None): Configured bound.
        payload (Payload): Submitted data (not modified).
        field_type (FieldType): Type of the field owning the bound.

    Returns:
        Any: Resolved bound, or None when it cannot be determined.
    """
    resolved: Any = None
    if isinstance(bound, LiteralBound):
        resolved = bound.value
    elif isinstance(bound, FieldReference) and field_type == FieldType.DATE:
        resolved = coerce_reference_date(payload, bound.key)
    elif isinstance(bound, FieldReference):
        resolved = payload.get(bound.key)
    elif isinstance(bound, ComputedBound):
        resolved = bound.function(payload)
    return _normalize_resolved(resolved, field_type)


def resolve_field(payload: Payload, field: FieldDefinition) -> FieldDefinition:
    """Return a copy of the field with ``eval_min_value``/``eval_max_value`` set.

    Legacy hooks (``after_date_field``, ``before_date_field``,
    ``get_max_currency_from_field``) take precedence over ``min``/``max``.
    The given definition is never modified.

    Args:
        payload (Payload): Submitted data.
        field (FieldDefinition): Field definition.

    Returns:
        FieldDefinition: Resolved copy.
    """
    if not field.has_range:
        return field

    eval_min = resolve_bound(field.min, payload, field.type)
    eval_max = resolve_bound(field.max, payload, field.type)

    if field.after_date_field is not None:
        eval_min = _normalize_resolved(field.after_date_field(payload), field.type)
    if field.before_date_field is not None:
        eval_max = _normalize_resolved(field.before_date_field(payload), field.type)
    if field.get_max_currency_from_field is not None:
        eval_max = _normalize_resolved(field.get_max_currency_from_field(payload), field.type)

    return field.model_copy(update={"eval_min_value": eval_min, "eval_max_value": eval_max})
