"""Unit tests for profile merge rules."""

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from src.api.middleware.error_handler import InvalidDateError, ValidationError
from src.schemas.profile import ProfileUpdate
from src.services.profile_merge import build_replacement, merge_profile, parse_date_of_birth


class TestProfileUpdateSchema:
    """Tests for legacy sentinel normalization on ProfileUpdate."""

    def test_empty_strings_are_unset(self) -> None:
        """Test that empty text fields are treated as omitted."""
        update = ProfileUpdate(username="", first_name="", last_name="", bio="", address="", date_of_birth="")

        assert update.model_dump(exclude_none=True) == {}

    def test_zero_contact_number_is_unset(self) -> None:
        """Test that the "0" contact number is treated as omitted."""
        assert ProfileUpdate(contact_number="0").contact_number is None

    def test_real_values_are_kept(self) -> None:
        """Test that supplied values pass through untouched."""
        update = ProfileUpdate(bio="hello", contact_number="0044")

        assert update.bio == "hello"
        assert update.contact_number == "0044"


class TestMergeProfile:
    """Tests for merge_profile."""

    def test_overwrites_supplied_fields_only(self) -> None:
        """Test the bio/contact number example from the update contract."""
        existing = {"username": "ana", "bio": "old", "contact_number": "555"}

        merged = merge_profile(existing, ProfileUpdate(bio="new", contact_number="0"))

        assert merged == {"username": "ana", "bio": "new", "contact_number": "555"}

    def test_empty_request_changes_nothing(self, full_profile_row: dict[str, Any]) -> None:
        """Test that a request with every field absent keeps every stored value."""
        merged = merge_profile(full_profile_row, ProfileUpdate())

        assert merged == full_profile_row

    def test_never_clears_fields(self, full_profile_row: dict[str, Any]) -> None:
        """Test that absent fields keep their stored value when others change."""
        merged = merge_profile(full_profile_row, ProfileUpdate(first_name="Ann"))

        for field, value in full_profile_row.items():
            if field != "first_name":
                assert merged[field] == value
        assert merged["first_name"] == "Ann"

    def test_is_idempotent(self, full_profile_row: dict[str, Any]) -> None:
        """Test that applying the same update twice equals applying it once."""
        update = ProfileUpdate(
            last_name="Souza",
            address="2 Side St",
            date_of_birth="1991-02-03T04:05:06Z",
        )

        once = merge_profile(full_profile_row, update)
        twice = merge_profile(once, update)

        assert once == twice

    def test_does_not_mutate_existing(self, full_profile_row: dict[str, Any]) -> None:
        """Test that the stored profile dict is left untouched."""
        snapshot = dict(full_profile_row)

        merge_profile(full_profile_row, ProfileUpdate(bio="changed"))

        assert full_profile_row == snapshot

    def test_parses_date_of_birth(self, full_profile_row: dict[str, Any]) -> None:
        """Test that a supplied date of birth is stored as a datetime."""
        merged = merge_profile(full_profile_row, ProfileUpdate(date_of_birth="1991-02-03T04:05:06Z"))

        assert merged["date_of_birth"] == datetime(1991, 2, 3, 4, 5, 6, tzinfo=timezone.utc)

    def test_rejects_malformed_date_of_birth(self, full_profile_row: dict[str, Any]) -> None:
        """Test that a malformed date raises instead of being dropped."""
        with pytest.raises(InvalidDateError) as exc_info:
            merge_profile(full_profile_row, ProfileUpdate(date_of_birth="03/02/1991"))

        assert exc_info.value.status_code == 422
        assert exc_info.value.error_type == "invalid_date"


class TestParseDateOfBirth:
    """Tests for parse_date_of_birth."""

    def test_accepts_numeric_offset(self) -> None:
        """Test that an explicit UTC offset is honored."""
        parsed = parse_date_of_birth("1990-04-01T12:00:00+05:30")

        assert parsed.utcoffset() == timedelta(hours=5, minutes=30)

    def test_rejects_date_without_time(self) -> None:
        """Test that a bare date does not match the date-time format."""
        with pytest.raises(InvalidDateError):
            parse_date_of_birth("1990-04-01")


class TestBuildReplacement:
    """Tests for build_replacement."""

    def test_unset_optionals_are_cleared(self) -> None:
        """Test that a full update writes absent optional fields as unset."""
        record = build_replacement(ProfileUpdate(first_name="Ana", last_name="Silva"))

        assert record == {
            "first_name": "Ana",
            "last_name": "Silva",
            "bio": None,
            "address": None,
            "contact_number": None,
            "date_of_birth": None,
        }

    def test_keeps_username_when_supplied(self) -> None:
        """Test that a rename is carried in a full update."""
        record = build_replacement(ProfileUpdate(username="ana2", first_name="Ana", last_name="Silva"))

        assert record["username"] == "ana2"

    def test_requires_names(self) -> None:
        """Test that first and last name are mandatory for a full update."""
        with pytest.raises(ValidationError) as exc_info:
            build_replacement(ProfileUpdate(first_name="Ana"))

        assert exc_info.value.details == [
            {"loc": ["body", "last_name"], "msg": "field required", "type": "missing"}
        ]
