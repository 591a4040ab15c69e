"""Unit tests for profile response schemas."""

from typing import Any

import pytest
from pydantic import ValidationError

from src.schemas.profile import FullProfileResponse


class TestFullProfileResponse:
    """Tests for FullProfileResponse."""

    def test_numeric_account_id_becomes_string(self, full_profile_row: dict[str, Any]) -> None:
        """Test that an integer account id column is rendered as a string."""
        profile = FullProfileResponse.model_validate({**full_profile_row, "account_id": 42})

        assert profile.account_id == "42"
        assert profile.model_dump(mode="json")["account_id"] == "42"

    def test_string_account_id_is_kept(self, full_profile_row: dict[str, Any]) -> None:
        """Test that textual account ids pass through untouched."""
        profile = FullProfileResponse.model_validate(full_profile_row)

        assert profile.account_id == "acc-7f3a"

    def test_missing_account_id_is_rejected(self, full_profile_row: dict[str, Any]) -> None:
        """Test that the full view requires an account id."""
        row = {k: v for k, v in full_profile_row.items() if k != "account_id"}

        with pytest.raises(ValidationError):
            FullProfileResponse.model_validate(row)
