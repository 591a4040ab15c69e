"""Profile model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


# Columns exposed to any caller
PUBLIC_PROFILE_COLUMNS = ("username", "first_name", "last_name", "bio", "avatar_url")

# Columns exposed only to the profile owner
PRIVATE_PROFILE_COLUMNS = (
    "account_id",
    "date_of_birth",
    "address",
    "contact_number",
    "user_status",
)

FULL_PROFILE_COLUMNS = PUBLIC_PROFILE_COLUMNS + PRIVATE_PROFILE_COLUMNS

# Columns the update path is allowed to write
WRITABLE_PROFILE_COLUMNS = (
    "username",
    "first_name",
    "last_name",
    "bio",
    "date_of_birth",
    "address",
    "contact_number",
)


class PublicProfile(TypedDict):
    """Public subset of a user_account row."""

    username: str
    first_name: str
    last_name: str
    bio: str | None
    avatar_url: str | None


class Profile(PublicProfile):
    """Full user_account row representation.

    Maps directly to the database schema. Optional attributes are None
    when unset, which is distinct from an empty string.
    """

    account_id: str
    date_of_birth: datetime | str | None
    address: str | None
    contact_number: str | None
    user_status: str | None


class ProfileWrite(TypedDict, total=False):
    """Columns written by the update path."""

    username: str
    first_name: str
    last_name: str
    bio: str | None
    date_of_birth: str | None
    address: str | None
    contact_number: str | None
