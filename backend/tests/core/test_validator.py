"""Profile Validator — field rules, rule order, and record-level validation.

Tests cover:
    - Name: blank, length bounds, character class, consecutive spaces, trimming
    - Birthday: today allowed, strictly-future rejected
    - Picture URI: accepted schemes (case-insensitive), None/blank rejected
    - validate_profile_data: only supplied fields checked, name → birthday → picture order
"""

from datetime import date, timedelta

import pytest

from birthday.core.validator import (
    BIRTHDAY_IN_FUTURE, MAX_NAME_LENGTH, NAME_CONSECUTIVE_SPACES, NAME_EMPTY,
    NAME_INVALID_CHARACTERS, NAME_TOO_LONG, PICTURE_URI_INVALID, PICTURE_URI_MISSING,
    ValidationResult, validate_birthday, validate_name, validate_picture_uri,
    validate_profile_data,
)

TODAY = date(2026, 10, 18)


# ==============================================================================
# Name
# ==============================================================================

@pytest.mark.parametrize("name", ["Mia", "Mia Rose", "  Mia Rose  ", "Zoë", "A"])
def test_valid_names_pass(name):
    assert validate_name(name).is_success


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_is_empty(name):
    assert validate_name(name).error_message == NAME_EMPTY


def test_name_at_max_length_passes():
    assert validate_name("A" * MAX_NAME_LENGTH).is_success


def test_name_over_max_length_fails():
    assert validate_name("A" * (MAX_NAME_LENGTH + 1)).error_message == NAME_TOO_LONG
    assert NAME_TOO_LONG == "Baby name cannot exceed 50 characters"


def test_length_is_measured_after_trimming():
    assert validate_name("  " + "A" * MAX_NAME_LENGTH + "  ").is_success


@pytest.mark.parametrize("name", ["Mia2", "Mia-Rose", "Mia!", "O'Neil", "Mia\tRose"])
def test_non_letters_rejected(name):
    assert validate_name(name).error_message == NAME_INVALID_CHARACTERS


def test_consecutive_spaces_rejected():
    assert validate_name("Mia  Rose").error_message == NAME_CONSECUTIVE_SPACES


def test_length_checked_before_character_class():
    assert validate_name("1" * 60).error_message == NAME_TOO_LONG


# ==============================================================================
# Birthday
# ==============================================================================

def test_birthday_today_passes():
    assert validate_birthday(TODAY, TODAY).is_success


def test_birthday_in_past_passes():
    assert validate_birthday(date(2020, 2, 29), TODAY).is_success


def test_birthday_tomorrow_fails():
    result = validate_birthday(TODAY + timedelta(days=1), TODAY)
    assert result.error_message == BIRTHDAY_IN_FUTURE


def test_birthday_defaults_to_current_date():
    assert validate_birthday(date.today()).is_success
    assert validate_birthday(date.today() + timedelta(days=1)).is_failure


# ==============================================================================
# Picture URI
# ==============================================================================

@pytest.mark.parametrize("uri", [
    "content://media/external/images/1",
    "file:///data/user/0/app/files/baby.jpg",
    "http://example.com/baby.png",
    "https://example.com/baby.png",
    "android.resource://com.example/drawable/baby",
    "CONTENT://media/1",
    "Https://example.com/x",
])
def test_supported_picture_schemes_pass(uri):
    assert validate_picture_uri(uri).is_success


@pytest.mark.parametrize("uri", [None, "", "   "])
def test_missing_picture_uri_fails(uri):
    assert validate_picture_uri(uri).error_message == PICTURE_URI_MISSING


@pytest.mark.parametrize("uri", ["ftp://host/baby.jpg", "/sdcard/baby.jpg", "baby.jpg"])
def test_unsupported_picture_uri_fails(uri):
    assert validate_picture_uri(uri).error_message == PICTURE_URI_INVALID


# ==============================================================================
# Record-level
# ==============================================================================

def test_no_fields_supplied_passes():
    assert validate_profile_data(today=TODAY).is_success


def test_only_supplied_fields_are_checked():
    result = validate_profile_data(birthday=date(2025, 1, 15), today=TODAY)
    assert result.is_success


def test_name_failure_reported_before_birthday():
    result = validate_profile_data(
        name="Mia2", birthday=TODAY + timedelta(days=3), today=TODAY,
    )
    assert result.error_message == NAME_INVALID_CHARACTERS


def test_birthday_failure_reported_before_picture():
    result = validate_profile_data(
        birthday=TODAY + timedelta(days=3), picture_uri="ftp://x", today=TODAY,
    )
    assert result.error_message == BIRTHDAY_IN_FUTURE


def test_picture_checked_when_supplied():
    result = validate_profile_data(name="Mia", picture_uri="nope", today=TODAY)
    assert result.error_message == PICTURE_URI_INVALID


def test_validation_result_flags():
    assert ValidationResult.success().is_success
    failure = ValidationResult.failure("bad")
    assert failure.is_failure and not failure.is_success
    assert failure.error_message == "bad"
