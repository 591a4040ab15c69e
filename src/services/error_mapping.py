"""Translate store failures into API errors.

Read and write paths both go through to_api_error so callers see the same
error kinds regardless of the operation that failed.
"""

from src.api.middleware.error_handler import APIError, ConflictError, InternalError, NotFoundError
from src.core.store import DuplicateRecordError, RecordNotFoundError, StoreError


def to_api_error(error: StoreError, username: str | None = None, action: str = "accessing the profile") -> APIError:
    """Classify a store error.

    Args:
        error: Error raised by the store.
        username: Username the operation targeted, used in messages.
        action: Short description of what was being done.

    Returns:
        APIError: NotFoundError, ConflictError or InternalError.
    """
    if isinstance(error, RecordNotFoundError):
        if username is not None:
            return NotFoundError(f"user {username} doesn't exist")
        return NotFoundError(f"nothing found while {action}")
    if isinstance(error, DuplicateRecordError):
        return ConflictError(f"username is already taken: {error}")
    return InternalError(f"error while {action}")
