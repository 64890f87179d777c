import pytest

from account_api.services.validation_service import (
    find_empty_profile_fields,
    parse_dob,
    validate_signup,
)

VALID = {
    "name": "Alice Doe",
    "mobile": "9876543210",
    "email": "a@b.com",
    "dob": "1990-01-01",
    "gender": "female",
    "address": "1 Main St",
    "password": "secret1",
}


def test_valid_fields_pass():
    assert validate_signup(VALID) == []


def test_short_name_is_rejected():
    errors = validate_signup({**VALID, "name": "Al"})
    assert errors == ["Name must be between 3 and 50 characters"]


def test_name_length_bounds():
    assert validate_signup({**VALID, "name": "Ali"}) == []
    assert validate_signup({**VALID, "name": "x" * 50}) == []
    assert validate_signup({**VALID, "name": "x" * 51}) == ["Name must be between 3 and 50 characters"]


def test_all_violations_are_collected_in_rule_order():
    assert validate_signup({}) == [
        "Name must be between 3 and 50 characters",
        "Mobile number must be 10 digits long",
        "Invalid email format",
        "Invalid date of birth format. Use YYYY-MM-DD",
        "Invalid gender",
        "Address is required",
        "Password must be at least 6 characters long",
    ]


@pytest.mark.parametrize("mobile", ["987654321", "98765432101", "98765abcde", "٠١٢٣٤٥٦٧٨٩"])
def test_mobile_must_be_ten_digits(mobile):
    assert validate_signup({**VALID, "mobile": mobile}) == ["Mobile number must be 10 digits long"]


@pytest.mark.parametrize("email", ["plainaddress", "a@b", "a@ b.com", "@."])
def test_bad_email_formats(email):
    assert "Invalid email format" in validate_signup({**VALID, "email": email})


@pytest.mark.parametrize("dob", ["01-01-1990", "1990/01/01", "1990-13-01", "1990-02-30", "١٩٩٠-٠١-٠١"])
def test_bad_dob(dob):
    assert validate_signup({**VALID, "dob": dob}) == ["Invalid date of birth format. Use YYYY-MM-DD"]


@pytest.mark.parametrize("gender", ["male", "Male", "FEMALE", "Other"])
def test_gender_is_case_insensitive(gender):
    assert validate_signup({**VALID, "gender": gender}) == []


def test_unknown_gender_is_rejected():
    assert validate_signup({**VALID, "gender": "robot"}) == ["Invalid gender"]


def test_empty_address_and_short_password():
    errors = validate_signup({**VALID, "address": "", "password": "12345"})
    assert errors == ["Address is required", "Password must be at least 6 characters long"]


def test_parse_dob_returns_date():
    parsed = parse_dob("2001-09-11")
    assert (parsed.year, parsed.month, parsed.day) == (2001, 9, 11)
    assert parse_dob(None) is None


def test_profile_presence_check_only_looks_at_supplied_fields():
    assert find_empty_profile_fields({"name": "Bob"}) == []
    assert find_empty_profile_fields({"name": "", "address": None, "gender": "male"}) == ["name", "address"]
    # email is not a profile field
    assert find_empty_profile_fields({"email": ""}) == []
