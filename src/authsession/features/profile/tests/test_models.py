"""Tests for profile models."""

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from src.authsession.features.profile.models import INT64_MAX, INT64_MIN, UserProfile


def test_create_stamps_current_utc_seconds():
    """Test that create() records the current unix time."""
    before = int(datetime.now(UTC).timestamp())
    profile = UserProfile.create("neo", "neo@example.com")
    after = int(datetime.now(UTC).timestamp())

    assert profile.nickname == "neo"
    assert profile.email == "neo@example.com"
    assert before <= profile.created_at <= after


def test_to_json_uses_flat_object_with_camel_case_timestamp():
    """Test that JSON output has exactly nickname, email and createdAt."""
    profile = UserProfile(nickname="trinity", email="t@example.com", created_at=1700000000)

    data = json.loads(profile.to_json())

    assert data == {"nickname": "trinity", "email": "t@example.com", "createdAt": 1700000000}


def test_from_json_reads_camel_case_timestamp():
    """Test parsing a stored profile document."""
    profile = UserProfile.from_json('{"nickname": "a", "email": "a@b.com", "createdAt": 42}')

    assert profile == UserProfile(nickname="a", email="a@b.com", created_at=42)


@pytest.mark.parametrize(
    "nickname,email,created_at",
    [
        ("", "", 0),
        ("名前 \"quoted\"", "weird+tag@例え.jp", INT64_MAX),
        ("line\nbreak", "\\back\\slash", INT64_MIN),
    ],
)
def test_round_trip_preserves_fields(nickname, email, created_at):
    """Test that from_json(to_json(p)) reproduces the profile."""
    profile = UserProfile(nickname=nickname, email=email, created_at=created_at)

    assert UserProfile.from_json(profile.to_json()) == profile


def test_default_profile_is_empty():
    """Test that a bare profile has empty fields and zero timestamp."""
    profile = UserProfile()

    assert profile.nickname == ""
    assert profile.email == ""
    assert profile.created_at == 0


def test_timestamp_outside_int64_is_rejected():
    """Test that timestamps beyond int64 fail validation."""
    with pytest.raises(ValidationError):
        UserProfile(nickname="x", email="x@y.z", created_at=INT64_MAX + 1)


def test_from_json_ignores_snake_case_timestamp_key():
    """Test that only the createdAt key populates the timestamp."""
    profile = UserProfile.from_json('{"nickname": "a", "email": "a@b.com", "created_at": 42}')

    assert profile.created_at == 0
