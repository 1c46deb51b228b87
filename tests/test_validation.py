"""Tests for contact field validation."""

import pytest

from addressbook.domain import invalid_fields, is_email, validate


@pytest.mark.parametrize(
    "email",
    [
        "jane@example.com",
        "jane.doe@example.com",
        "j+tag@mail.example.co.uk",
        "a_b%c-d@x-y.org",
    ],
)
def test_valid_contact_passes(email):
    assert validate("Jane", "Doe", email) is True


def test_empty_names_fail_regardless_of_email():
    assert validate("", "Doe", "jane@example.com") is False
    assert validate("Jane", "", "jane@example.com") is False
    assert validate("", "", "jane@example.com") is False
    assert validate(None, "Doe", "jane@example.com") is False


@pytest.mark.parametrize(
    "email",
    ["not-an-email", "", "jane@", "@example.com", "jane@example", "jane doe@example.com", "jane@.com"],
)
def test_malformed_email_fails(email):
    assert validate("Jane", "Doe", email) is False
    assert is_email(email) is False


def test_whitespace_name_counts_as_non_empty():
    # Entry-time check is "not empty", not "not blank".
    assert validate(" ", "Doe", "jane@example.com") is True


def test_invalid_fields_lists_failures_in_form_order():
    assert invalid_fields("", "", "nope") == ["first_name", "last_name", "email"]
    assert invalid_fields("Jane", "Doe", "nope") == ["email"]
    assert invalid_fields("Jane", "Doe", "jane@example.com") == []


def test_is_email_none():
    assert is_email(None) is False


@pytest.mark.parametrize("email", [123, b"jane@example.com", ["jane@example.com"]])
def test_non_text_email_fails_without_raising(email):
    assert is_email(email) is False
    assert validate("Jane", "Doe", email) is False
