"""Unit tests for store error classification."""

from src.api.middleware.error_handler import ConflictError, InternalError, NotFoundError
from src.core.store import DuplicateRecordError, RecordNotFoundError, StoreError
from src.services.error_mapping import to_api_error


class TestToApiError:
    """Tests for to_api_error."""

    def test_missing_record_is_not_found(self) -> None:
        """Test that a missing row names the user in a 404."""
        error = to_api_error(RecordNotFoundError("no rows"), "ana")

        assert isinstance(error, NotFoundError)
        assert error.status_code == 404
        assert error.message == "user ana doesn't exist"

    def test_missing_record_without_username(self) -> None:
        """Test the message when no username is involved."""
        error = to_api_error(RecordNotFoundError("no rows"), action="listing topics")

        assert error.message == "nothing found while listing topics"

    def test_duplicate_is_conflict(self) -> None:
        """Test that uniqueness violations map to 409."""
        error = to_api_error(DuplicateRecordError("duplicate key"), "ana")

        assert isinstance(error, ConflictError)
        assert error.status_code == 409

    def test_other_errors_are_internal(self) -> None:
        """Test that unclassified failures hide backend detail."""
        error = to_api_error(StoreError("password authentication failed"), "ana", "updating the profile")

        assert isinstance(error, InternalError)
        assert error.message == "error while updating the profile"
