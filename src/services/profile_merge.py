"""Field-presence merge of a profile update into a stored profile."""

from datetime import datetime
from typing import Any

from src.api.middleware.error_handler import InvalidDateError, ValidationError
from src.schemas.profile import ProfileUpdate

# RFC 3339 without fractional seconds; %z accepts "Z" as well as "+05:30"
DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Text fields copied verbatim when supplied
TEXT_FIELDS = ("username", "first_name", "last_name", "bio", "address", "contact_number")

REQUIRED_FIELDS = ("first_name", "last_name")


def parse_date_of_birth(value: str) -> datetime:
    """Parse a date of birth sent by a client.

    Raises:
        InvalidDateError: If the value does not match DATE_TIME_FORMAT.
    """
    try:
        return datetime.strptime(value, DATE_TIME_FORMAT)
    except ValueError as e:
        raise InvalidDateError("date_of_birth", value, DATE_TIME_FORMAT) from e


def merge_profile(existing: dict[str, Any], request: ProfileUpdate) -> dict[str, Any]:
    """Overlay the supplied fields of a partial update onto a stored profile.

    A field left as None in the request keeps the stored value; nothing is
    ever cleared. The stored profile is not modified.

    Args:
        existing: Full profile row as read from the store.
        request: Partial update.

    Returns:
        dict: The merged full profile, ready to persist.

    Raises:
        InvalidDateError: If date_of_birth is supplied but malformed.
    """
    merged = dict(existing)

    for field in TEXT_FIELDS:
        value = getattr(request, field)
        if value is not None:
            merged[field] = value

    if request.date_of_birth is not None:
        merged["date_of_birth"] = parse_date_of_birth(request.date_of_birth)

    return merged


def build_replacement(request: ProfileUpdate) -> dict[str, Any]:
    """Build the full set of writable columns for a non-partial update.

    Optional fields absent from the request are written as unset.

    Raises:
        ValidationError: If first_name or last_name is missing.
        InvalidDateError: If date_of_birth is supplied but malformed.
    """
    missing = [field for field in REQUIRED_FIELDS if getattr(request, field) is None]
    if missing:
        raise ValidationError(
            message="a full profile update requires first_name and last_name",
            details=[
                {"loc": ["body", field], "msg": "field required", "type": "missing"}
                for field in missing
            ],
        )

    record: dict[str, Any] = {field: getattr(request, field) for field in TEXT_FIELDS}
    if record["username"] is None:
        del record["username"]
    record["date_of_birth"] = (
        parse_date_of_birth(request.date_of_birth) if request.date_of_birth is not None else None
    )
    return record
