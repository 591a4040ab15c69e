"""Profile Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Literal the legacy wire format sends for "contact number not supplied"
CONTACT_NUMBER_UNSET = "0"


class PublicProfileResponse(BaseModel):
    """Profile view returned to any caller."""

    model_config = ConfigDict(from_attributes=True)

    username: str = Field(description="Unique username")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    bio: str | None = Field(default=None, description="Short biography")
    avatar_url: str | None = Field(default=None, description="URL to user's avatar image")


class FullProfileResponse(PublicProfileResponse):
    """Profile view returned to the profile owner."""

    account_id: str = Field(description="Opaque account identifier")
    date_of_birth: datetime | None = Field(default=None, description="Date of birth")
    address: str | None = Field(default=None, description="Postal address")
    contact_number: str | None = Field(default=None, description="Contact phone number")
    user_status: str | None = Field(default=None, description="Account lifecycle status")

    @field_validator("account_id", mode="before")
    @classmethod
    def account_id_as_string(cls, value: Any) -> Any:
        """Accept numeric account identifiers and return them as strings."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ProfileUpdate(BaseModel):
    """Schema for updating a profile.

    Every field is optional and None means "leave unchanged". Older clients
    send an empty string (or "0" for contact_number) instead of omitting a
    field; those values are normalized to None on input.
    """

    model_config = ConfigDict(from_attributes=True)

    username: str | None = Field(default=None, max_length=255, description="New username")
    first_name: str | None = Field(default=None, max_length=255, description="New first name")
    last_name: str | None = Field(default=None, max_length=255, description="New last name")
    bio: str | None = Field(default=None, description="New biography")
    date_of_birth: str | None = Field(
        default=None,
        description="New date of birth, e.g. 1990-04-01T00:00:00Z",
    )
    address: str | None = Field(default=None, description="New postal address")
    contact_number: str | None = Field(default=None, max_length=32, description="New contact number")

    @field_validator("username", "first_name", "last_name", "bio", "date_of_birth", "address", mode="before")
    @classmethod
    def empty_string_is_unset(cls, value: Any) -> Any:
        """Treat an empty string as an omitted field."""
        return None if value == "" else value

    @field_validator("contact_number", mode="before")
    @classmethod
    def zero_contact_number_is_unset(cls, value: Any) -> Any:
        """Treat the legacy "0" contact number as an omitted field."""
        return None if value == CONTACT_NUMBER_UNSET else value


class UpdateProfileResponse(BaseModel):
    """Confirmation of a profile update."""

    username: str = Field(description="Username of the updated profile")


class DeleteProfileResponse(BaseModel):
    """Confirmation of a profile deletion."""

    success: str = Field(description="Human-readable confirmation")
    status: str = Field(description="Status code of the operation")


class UserActivityResponse(BaseModel):
    """Activity feed for a user."""

    email: str = Field(description="Email address the activities were requested for")
    activities: list[dict[str, Any]] = Field(default_factory=list, description="Activity entries")
