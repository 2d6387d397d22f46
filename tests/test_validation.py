import pytest

from form_mailer.services.validation import (
    CAREER_REQUIRED_FIELDS,
    CONTACT_REQUIRED_FIELDS,
    normalize_fields,
    validate_required,
)


def _complete(required):
    return {name: f"value-{name}" for name in required}


@pytest.mark.parametrize("required", [CAREER_REQUIRED_FIELDS, CONTACT_REQUIRED_FIELDS])
def test_all_present_is_valid(required):
    result = validate_required(required, _complete(required))

    assert result.is_valid
    assert result.missing == ()


@pytest.mark.parametrize("required", [CAREER_REQUIRED_FIELDS, CONTACT_REQUIRED_FIELDS])
def test_single_missing_field_is_reported_alone(required):
    for name in required:
        present = _complete(required)
        present[name] = ""

        result = validate_required(required, present)

        assert result.missing == (name,)


@pytest.mark.parametrize("required", [CAREER_REQUIRED_FIELDS, CONTACT_REQUIRED_FIELDS])
def test_nothing_submitted_lists_every_field_in_declaration_order(required):
    result = validate_required(required, {})

    assert result.missing == tuple(required)


def test_order_follows_declaration_not_input():
    present = {"message": "", "firstName": None, "lastName": "Ortiz"}

    result = validate_required(CONTACT_REQUIRED_FIELDS, present)

    assert result.missing == ("firstName", "email", "message")


def test_whitespace_only_counts_as_missing():
    present = _complete(CONTACT_REQUIRED_FIELDS)
    present["lastName"] = "   \t"

    result = validate_required(CONTACT_REQUIRED_FIELDS, present)

    assert result.missing == ("lastName",)


def test_normalize_strips_and_coerces_values():
    fields = normalize_fields(
        {"firstName": "  Lena ", "phone": 5550100, "service": "  ", "extra": "ignored"},
        ["firstName", "phone", "service", "message"],
    )

    assert fields == {
        "firstName": "Lena",
        "phone": "5550100",
        "service": None,
        "message": None,
    }


def test_normalize_treats_falsy_non_strings_as_absent():
    fields = normalize_fields(
        {"firstName": False, "lastName": 0, "email": [], "message": True},
        ["firstName", "lastName", "email", "message"],
    )

    assert fields == {"firstName": None, "lastName": None, "email": None, "message": "True"}
