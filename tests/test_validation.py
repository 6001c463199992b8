from __future__ import annotations

import pytest

from tracker.validation import (
    EMAIL_RE,
    ValidationResult,
    matches,
    max_chars,
    not_blank,
    permitted_value,
)


@pytest.mark.parametrize("value, expected", [
    ("Acme", True),
    ("  x  ", True),
    ("", False),
    ("   \t\n", False),
    (None, False),
])
def test_not_blank(value, expected):
    assert not_blank(value) is expected


def test_max_chars_counts_characters_not_bytes():
    assert max_chars("é" * 255, 255)
    assert not max_chars("a" * 256, 255)
    assert max_chars("", 0)


def test_permitted_value():
    assert permitted_value("On Hold", "Estimating", "On Hold")
    assert not permitted_value("Paused", "Estimating", "On Hold")


@pytest.mark.parametrize("email, ok", [
    ("jane.doe@example.com", True),
    ("a+b@sub.example.co", True),
    ("no-at-sign.example.com", False),
    ("missing@tld", False),
    ("", False),
])
def test_email_pattern(email, ok):
    assert matches(email, EMAIL_RE) is ok


def test_empty_result_is_valid():
    result = ValidationResult()
    assert result.valid
    assert result.field_errors == {}


def test_first_failure_per_field_wins():
    result = (
        ValidationResult()
        .check_field(False, "name", "Name is required")
        .check_field(False, "name", "Name must be shorter than 255 characters")
    )
    assert result.field_errors == {"name": "Name is required"}
    assert not result.valid


def test_passing_checks_record_nothing():
    result = ValidationResult().check_field(True, "name", "Name is required")
    assert result.valid


def test_check_field_does_not_mutate():
    before = ValidationResult()
    after = before.check_field(False, "email", "bad")
    assert before.valid
    assert after.field_errors == {"email": "bad"}


def test_errors_on_several_fields():
    result = (
        ValidationResult()
        .check_field(False, "name", "Name is required")
        .check_field(True, "email", "unused")
        .check_field(False, "hours_worked", "Hours worked cannot be negative")
    )
    assert set(result.field_errors) == {"name", "hours_worked"}
