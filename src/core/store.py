"""Profile store backed by Supabase (PostgREST).

Every backend failure leaves this module as a StoreError subclass so the
service layer classifies errors in one place.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client

from src.core.config import get_settings
from src.core.supabase import get_supabase_client
from src.models.profile import (
    FULL_PROFILE_COLUMNS,
    PUBLIC_PROFILE_COLUMNS,
    WRITABLE_PROFILE_COLUMNS,
    Profile,
    ProfileWrite,
    PublicProfile,
)
from src.models.topic import Topic

logger = logging.getLogger(__name__)

# PostgREST: a single-row request matched zero rows
NO_ROWS_CODE = "PGRST116"
# PostgreSQL unique_violation
UNIQUE_VIOLATION_CODE = "23505"


class StoreError(Exception):
    """Storage backend failure."""


class RecordNotFoundError(StoreError):
    """The backend reported no rows for the request."""


class DuplicateRecordError(StoreError):
    """A write violated a uniqueness constraint."""


class ProfileStore(Protocol):
    """Storage operations the profile and reference data services rely on."""

    def check_username_exists(self, username: str) -> bool: ...

    def get_public_profile(self, username: str) -> PublicProfile: ...

    def get_full_profile(self, username: str) -> Profile: ...

    def update_profile(self, username: str, record: ProfileWrite) -> Profile: ...

    def delete_profile(self, username: str) -> None: ...

    def list_topics(self) -> list[Topic]: ...

    def list_categories(self) -> list[Topic]: ...


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise PostgREST and transport errors as StoreError subclasses."""
    try:
        yield
    except PostgrestAPIError as e:
        if e.code == NO_ROWS_CODE:
            raise RecordNotFoundError(f"{operation}: no rows returned") from e
        if e.code == UNIQUE_VIOLATION_CODE:
            raise DuplicateRecordError(f"{operation}: {e.message}") from e
        raise StoreError(f"{operation}: {e.message}") from e
    except httpx.HTTPError as e:
        raise StoreError(f"{operation}: {e}") from e


def _to_column_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class SupabaseProfileStore:
    """ProfileStore implementation over the Supabase client."""

    def __init__(self, client: Client | None = None) -> None:
        """Initialize the store.

        Args:
            client: Optional Supabase client for testing.
        """
        settings = get_settings()
        self.client = client or get_supabase_client()
        self.profiles_table = settings.profiles_table
        self.topics_table = settings.topics_table

    def check_username_exists(self, username: str) -> bool:
        """Check whether a profile row exists for the username."""
        with _translate_errors("check username"):
            response = (
                self.client.table(self.profiles_table)
                .select("username")
                .eq("username", username)
                .limit(1)
                .execute()
            )
        return bool(response.data)

    def get_public_profile(self, username: str) -> PublicProfile:
        """Fetch the public columns of a profile.

        Raises:
            RecordNotFoundError: If no row matches the username.
        """
        return self._get_single(username, PUBLIC_PROFILE_COLUMNS, "get public profile")

    def get_full_profile(self, username: str) -> Profile:
        """Fetch every column of a profile.

        Raises:
            RecordNotFoundError: If no row matches the username.
        """
        return self._get_single(username, FULL_PROFILE_COLUMNS, "get full profile")

    def update_profile(self, username: str, record: ProfileWrite) -> Profile:
        """Overwrite the writable columns of the row keyed by username.

        Args:
            username: Current username of the row.
            record: Column values to write. Columns outside
                WRITABLE_PROFILE_COLUMNS are ignored.

        Returns:
            Profile: The row as stored after the update.

        Raises:
            RecordNotFoundError: If the row disappeared before the write.
            DuplicateRecordError: If a rename clashes with another username.
        """
        payload = {
            column: _to_column_value(value)
            for column, value in record.items()
            if column in WRITABLE_PROFILE_COLUMNS
        }
        with _translate_errors("update profile"):
            response = (
                self.client.table(self.profiles_table)
                .update(payload)
                .eq("username", username)
                .execute()
            )
        if not response.data:
            raise RecordNotFoundError(f"update profile: no row for {username}")
        return response.data[0]

    def delete_profile(self, username: str) -> None:
        """Delete the row keyed by username.

        Raises:
            RecordNotFoundError: If no row was deleted.
        """
        with _translate_errors("delete profile"):
            response = (
                self.client.table(self.profiles_table)
                .delete()
                .eq("username", username)
                .execute()
            )
        if not response.data:
            raise RecordNotFoundError(f"delete profile: no row for {username}")

    def list_topics(self) -> list[Topic]:
        """List all topics ordered by category, then description."""
        with _translate_errors("list topics"):
            response = (
                self.client.table(self.topics_table)
                .select("description, category")
                .order("category")
                .order("description")
                .execute()
            )
        return response.data or []

    def list_categories(self) -> list[Topic]:
        """List topic rows for grouping into categories, ordered by category."""
        with _translate_errors("list categories"):
            response = (
                self.client.table(self.topics_table)
                .select("category, description")
                .order("category")
                .execute()
            )
        return response.data or []

    def _get_single(self, username: str, columns: tuple[str, ...], operation: str) -> dict[str, Any]:
        with _translate_errors(operation):
            response = (
                self.client.table(self.profiles_table)
                .select(", ".join(columns))
                .eq("username", username)
                .maybe_single()
                .execute()
            )
        # maybe_single() yields None (or empty data) when nothing matched
        if not response or not response.data:
            raise RecordNotFoundError(f"{operation}: no row for {username}")
        return response.data
