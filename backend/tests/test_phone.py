import pytest

from app.core.phone import (
    InvalidFormatError,
    NotAStringError,
    is_valid_phone_number,
    validate_phone_number,
)


@pytest.mark.parametrize(
    "number",
    [
        "+919876543210",
        "+12025550123",
        "+12345678",  # 8 digits
        "+123456789012345",  # 15 digits
    ],
)
def test_accepts_e164_numbers(number):
    assert validate_phone_number(number) == number


def test_trims_surrounding_whitespace_only():
    assert validate_phone_number("  +919876543210\n") == "+919876543210"


@pytest.mark.parametrize(
    "number",
    [
        "",
        "   ",
        "919876543210",
        "+0919876543210",
        "+1234567",  # 7 digits
        "+1234567890123456",  # 16 digits
        "+91 98765 43210",
        "+91-9876543210",
        "+91987654321a",
        "++919876543210",
        "not-a-number",
        "call +919876543210",
        "+919876543210 now",
    ],
)
def test_rejects_malformed_numbers(number):
    with pytest.raises(InvalidFormatError):
        validate_phone_number(number)
    assert not is_valid_phone_number(number)


@pytest.mark.parametrize("value", [None, 919876543210, ["+919876543210"], {"n": 1}])
def test_non_strings_are_a_distinct_error(value):
    with pytest.raises(NotAStringError) as exc_info:
        validate_phone_number(value)
    assert "must be a string" in str(exc_info.value)


def test_validation_is_idempotent():
    once = validate_phone_number(" +447911123456 ")
    assert validate_phone_number(once) == once


def test_format_error_names_expected_format():
    with pytest.raises(InvalidFormatError) as exc_info:
        validate_phone_number("12345")
    assert "E.164" in str(exc_info.value)
