"""Shared fixtures for authentication tests."""

import pytest


@pytest.fixture
def test_email() -> str:
    """Provide a consistent test email."""
    return "test@example.com"


@pytest.fixture
def test_password() -> str:
    """Provide a password that satisfies the provider's length rule."""
    return "s3cret-pass"
