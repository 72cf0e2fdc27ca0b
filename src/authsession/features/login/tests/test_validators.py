"""Tests for login form validators."""

import pytest

from src.authsession.features.login.validators import (
    MISSING_CREDENTIALS_MESSAGE,
    validate_credentials,
)


@pytest.mark.parametrize(
    "email,password",
    [("", "secret1"), ("   ", "secret1"), ("a@b.com", ""), (None, None)],
)
def test_missing_credentials(email, password):
    """Test that blank email or password is rejected."""
    check = validate_credentials(email, password)

    assert check.valid is False
    assert check.message == MISSING_CREDENTIALS_MESSAGE


def test_email_is_trimmed():
    """Test that surrounding whitespace is removed from the email."""
    check = validate_credentials("  a@b.com \n", "pw")

    assert check.valid is True
    assert check.email == "a@b.com"


def test_short_password_allowed_for_login():
    """Test that the length rule only applies to registration."""
    assert validate_credentials("a@b.com", "123").valid is True


def test_short_password_rejected_for_registration():
    """Test that registration requires at least six characters."""
    check = validate_credentials("a@b.com", "12345", registering=True)

    assert check.valid is False
    assert check.message == "Password must be at least 6 characters."


def test_minimum_length_password_accepted_for_registration():
    """Test that exactly six characters is enough."""
    assert validate_credentials("a@b.com", "123456", registering=True).valid is True
