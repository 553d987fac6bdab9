from __future__ import annotations

from datetime import date

import pytest

from formcheck.exceptions import UnknownErrorKeyError
from formcheck.pages import (
    field_error,
    is_page_valid,
    is_valid_field,
    is_valid_page_wrapper,
    is_valid_schema,
    validate_page,
    validate_schema,
)
from formcheck.typing.enums import ErrorKey, FieldType
from formcheck.typing.models import FieldDefinition, Page


@pytest.fixture
def applicant_page() -> Page:
    return Page(
        id="applicant",
        fields={
            "fullName": FieldDefinition(type=FieldType.NON_EMPTY_STRING, name="your full name"),
            "dob": FieldDefinition(type=FieldType.DATE, name="your date of birth", before_today=True),
            "colour": FieldDefinition(type=FieldType.ENUM, name="a colour", valid_values=["red", "blue"]),
            "income": FieldDefinition(type=FieldType.CURRENCY, name="your income", min=10, max=50),
        },
    )


def test_validate_page_reports_errors_in_field_order(applicant_page: Page, today: date) -> None:
    payload = {"fullName": "", "dob-day": "", "dob-month": "2", "dob-year": "2000", "colour": "green", "income": "53"}

    report = validate_page(payload, applicant_page, today=today)

    assert report.has_errors is True
    assert [descriptor.id for descriptor in report.summary] == ["fullName", "dob", "colour", "income"]
    assert [descriptor.key for descriptor in report.summary] == [
        ErrorKey.REQUIRED,
        ErrorKey.DAY_REQUIRED,
        ErrorKey.ENUM,
        ErrorKey.BETWEEN_CURRENCY_MIN_AND_MAX,
    ]
    assert report.inline["dob"].href == "#dob-day"
    assert report.inline["dob"].inputs == ["day"]
    assert report.inline["colour"].href == "#colour-red"
    assert report.inline["income"].href == "#income"
    assert report.text == {
        "fullName": "Enter your full name",
        "dob": "Your date of birth must include a day",
        "colour": "Select a colour",
        "income": "Your income must be between £10 and £50",
    }


def test_validate_page_accepts_valid_payload_and_writes_back(applicant_page: Page, today: date) -> None:
    payload = {
        "fullName": "Ada Lovelace",
        "dob-day": "10",
        "dob-month": "12",
        "dob-year": "1990",
        "colour": "blue",
        "income": "£20",
    }

    report = validate_page(payload, applicant_page, today=today)

    assert report.has_errors is False
    assert report.summary == []
    assert payload["dob"] == "1990-12-10"
    assert payload["income"] == "20"


def test_page_mapping_is_accepted(today: date) -> None:
    page = {"fields": {"age": {"type": "number", "name": "your age", "min": 18}}}

    report = validate_page({"age": "12"}, page, today=today)

    assert report.text == {"age": "Your age must be 18 or more"}


def test_field_error_builds_descriptor(today: date) -> None:
    field = {"type": "currency", "name": "test name", "min": 10, "max": 50}

    descriptor = field_error({"test": "53"}, field, "test", today=today)

    assert descriptor is not None
    assert descriptor.model_dump(by_alias=True) == {
        "id": "test",
        "key": ErrorKey.BETWEEN_CURRENCY_MIN_AND_MAX,
        "href": "#test",
        "text": "Test name must be between £10 and £50",
        "inputs": ["test"],
    }


def test_excluded_fields_are_not_validated() -> None:
    page = Page(
        fields={
            "hasPet": FieldDefinition(type=FieldType.ENUM, name="if you have a pet", valid_values=["yes", "no"]),
            "petName": FieldDefinition(
                name="your pet's name",
                include_if=lambda data: data.get("hasPet") == "yes",
            ),
        },
    )

    assert is_page_valid({"hasPet": "no"}, page)
    assert not is_page_valid({"hasPet": "yes"}, page)
    assert is_valid_field({"hasPet": "no"}, page.fields["petName"], "petName")


def test_custom_messages_reach_the_report() -> None:
    page = Page(
        fields={
            "email": FieldDefinition(
                name="email address",
                regex=r"@",
                errors={"pattern": "Enter an email address in the correct format"},
            ),
        },
    )

    report = validate_page({"email": "not-an-email"}, page)

    assert report.summary[0].key == ErrorKey.PATTERN
    assert report.text["email"] == "Enter an email address in the correct format"


def test_error_message_resolved_with_referenced_bound() -> None:
    page = Page(
        fields={
            "owed": FieldDefinition(type=FieldType.CURRENCY, name="the amount you owe"),
            "payment": FieldDefinition(
                type=FieldType.CURRENCY,
                name="your payment",
                max="owed",
                currency_max_field="the amount you owe",
            ),
        },
    )

    report = validate_page({"owed": "£1,000", "payment": "1,500"}, page)

    assert report.text == {
        "payment": "Your payment must not be more than the value of the amount you owe which is £1,000",
    }


def test_unknown_error_key_without_template_propagates(mocker) -> None:
    mocker.patch("formcheck.pages.check_field", return_value="alreadyRegistered")
    page = Page(fields={"email": FieldDefinition(type=FieldType.OPTIONAL_STRING, name="email")})

    with pytest.raises(UnknownErrorKeyError):
        validate_page({"email": "a@b.c"}, page)


def test_schema_helpers(applicant_page: Page, today: date) -> None:
    contact_page = Page(id="contact", fields={"phone": FieldDefinition(name="your phone number")})
    schema = {"applicant": applicant_page, "contact": contact_page}
    payload = {
        "fullName": "Ada Lovelace",
        "dob": "1990-12-10",
        "colour": "red",
        "income": "30",
    }

    reports = validate_schema(payload, schema, today=today)

    assert list(reports) == ["contact"]
    assert reports["contact"].text == {"phone": "Enter your phone number"}
    assert not is_valid_schema(payload, schema, today=today)

    payload["phone"] = "01234 567890"
    assert is_valid_schema(payload, schema, today=today)


def test_is_valid_page_wrapper_filters_pages() -> None:
    named = Page(id="named", fields={"name": FieldDefinition(name="your name")})
    aged = Page(id="aged", fields={"age": FieldDefinition(type=FieldType.NUMBER, name="your age")})

    valid_pages = list(filter(is_valid_page_wrapper({"name": "Ada"}), [named, aged]))

    assert valid_pages == [named]


def test_referenced_amount_later_on_page_is_compared_unformatted() -> None:
    page = Page(
        fields={
            "payment": FieldDefinition(
                type=FieldType.CURRENCY,
                name="your payment",
                max="owed",
                currency_max_field="the amount you owe",
            ),
            "owed": FieldDefinition(type=FieldType.CURRENCY, name="the amount you owe"),
        },
    )

    report = validate_page({"payment": "1,500", "owed": "£1,000"}, page)

    assert report.text == {
        "payment": "Your payment must not be more than the value of the amount you owe which is £1,000",
    }


def test_max_currency_hook_returning_formatted_amount() -> None:
    page = Page(
        fields={
            "payment": FieldDefinition(
                type=FieldType.CURRENCY,
                name="your payment",
                get_max_currency_from_field=lambda data: data["owed"],
                currency_max_field="the amount you owe",
            ),
            "owed": FieldDefinition(type=FieldType.CURRENCY, name="the amount you owe"),
        },
    )

    report = validate_page({"payment": "1,500", "owed": "£1,000"}, page)

    assert [descriptor.key for descriptor in report.summary] == [ErrorKey.CURRENCY_MAX]


def test_zero_currency_bound_in_report() -> None:
    field = FieldDefinition(type=FieldType.CURRENCY, name="amount", min=0, max=50)

    descriptor = field_error({"test": "60"}, field, "test")

    assert descriptor is not None
    assert descriptor.text == "Amount must be between £0 and £50"


def test_is_valid_page_wrapper_uses_given_today(today: date) -> None:
    page = Page(fields={"dob": FieldDefinition(type=FieldType.DATE, name="your date of birth", before_today=True)})
    payload = {"dob": "2024-06-20"}

    assert is_valid_page_wrapper(payload, today=date(2024, 7, 1))(page)
    assert not is_valid_page_wrapper(payload, today=today)(page)
