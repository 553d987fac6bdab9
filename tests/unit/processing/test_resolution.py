from __future__ import annotations

from datetime import date

from formcheck.processing.resolution import is_included, resolve_bound, resolve_field
from formcheck.typing.enums import FieldType
from formcheck.typing.models import ComputedBound, FieldDefinition, FieldReference, LiteralBound


def test_literal_bound_is_used_as_is() -> None:
    assert resolve_bound(LiteralBound(10), {}, FieldType.NUMBER) == 10


def test_field_reference_reads_amount_without_formatting() -> None:
    payload = {"owed": "£1,000"}

    assert resolve_bound(FieldReference("owed"), payload, FieldType.CURRENCY) == "1000"


def test_field_reference_to_missing_value_is_unresolved() -> None:
    assert resolve_bound(FieldReference("owed"), {}, FieldType.NUMBER) is None
    assert resolve_bound(FieldReference("owed"), {"owed": ""}, FieldType.NUMBER) is None


def test_field_reference_for_dates_composes_parts() -> None:
    payload = {"start-day": "2", "start-month": "2", "start-year": "2020"}

    assert resolve_bound(FieldReference("start"), payload, FieldType.DATE) == "2020-02-02"


def test_computed_bound_receives_payload() -> None:
    bound = ComputedBound(lambda data: float(data["owed"]) / 4)

    assert resolve_bound(bound, {"owed": "100"}, FieldType.CURRENCY) == 25


def test_computed_date_bound_is_converted_to_iso() -> None:
    bound = ComputedBound(lambda data: date(2001, 3, 4))

    assert resolve_bound(bound, {}, FieldType.DATE) == "2001-03-04"


def test_resolve_field_returns_copy_and_leaves_definition_untouched() -> None:
    field = FieldDefinition(type=FieldType.NUMBER, name="count", min="other", max=50)

    resolved = resolve_field({"other": "10"}, field)

    assert resolved.eval_min_value == "10"
    assert resolved.eval_max_value == 50
    assert field.eval_min_value is None
    assert field.eval_max_value is None


def test_resolve_field_skips_types_without_range() -> None:
    field = FieldDefinition(type=FieldType.NON_EMPTY_STRING, name="text", min=3)

    assert resolve_field({}, field) is field


def test_legacy_hooks_override_min_and_max() -> None:
    field = FieldDefinition(
        type=FieldType.DATE,
        name="end date",
        min="2000-01-01",
        after_date_field=lambda data: data["start"],
        before_date_field=lambda data: "2030-01-01",
    )

    resolved = resolve_field({"start": "2010-05-05"}, field)

    assert resolved.eval_min_value == "2010-05-05"
    assert resolved.eval_max_value == "2030-01-01"


def test_max_currency_hook() -> None:
    field = FieldDefinition(
        type=FieldType.CURRENCY,
        name="payment",
        get_max_currency_from_field=lambda data: data["owed"],
    )

    assert resolve_field({"owed": "300"}, field).eval_max_value == "300"


def test_is_included() -> None:
    field = FieldDefinition(name="reason", include_if=lambda data: data.get("needs_reason") == "yes")

    assert is_included({"needs_reason": "yes"}, field) is True
    assert is_included({"needs_reason": "no"}, field) is False
    assert is_included({}, FieldDefinition(name="always")) is True


def test_computed_amount_bound_is_stripped_of_formatting() -> None:
    bound = ComputedBound(lambda data: data["owed"])

    assert resolve_bound(bound, {"owed": "£1,000"}, FieldType.CURRENCY) == "1000"
    assert resolve_bound(bound, {"owed": "2,500"}, FieldType.NUMBER) == "2500"


def test_max_currency_hook_is_stripped_of_formatting() -> None:
    field = FieldDefinition(
        type=FieldType.CURRENCY,
        name="payment",
        get_max_currency_from_field=lambda data: data["owed"],
    )

    assert resolve_field({"owed": "£1,000"}, field).eval_max_value == "1000"
