"""Profile API routes."""

from fastapi import APIRouter, Query

from src.schemas.profile import (
    DeleteProfileResponse,
    FullProfileResponse,
    ProfileUpdate,
    PublicProfileResponse,
    UpdateProfileResponse,
)
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "/{username}",
    response_model=FullProfileResponse | PublicProfileResponse,
    summary="Get a user's profile",
    description="Returns the public profile, or the full profile when is_private is set.",
    responses={404: {"description": "User not found"}},
)
async def get_user_profile(
    username: str,
    is_private: bool = Query(default=False, description="Return the full profile view"),
) -> FullProfileResponse | PublicProfileResponse:
    """Get a user's profile.

    Args:
        username: Username to look up.
        is_private: Return the full view instead of the public one.

    Returns:
        FullProfileResponse | PublicProfileResponse: The requested view.
    """
    service = ProfileService()
    return await service.get_profile(username, is_private=is_private)


@router.put(
    "/{username}",
    response_model=UpdateProfileResponse,
    summary="Update a user's profile",
    description="Merges the supplied fields into the profile, or replaces it when partial is false.",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Username already taken"},
        422: {"description": "Invalid update"},
    },
)
async def update_user_profile(
    username: str,
    data: ProfileUpdate,
    partial: bool = Query(default=True, description="Merge into the stored profile"),
) -> UpdateProfileResponse:
    """Update a user's profile.

    Args:
        username: Username of the profile to update.
        data: Fields to write.
        partial: Merge instead of replace.

    Returns:
        UpdateProfileResponse: The username after the update.
    """
    service = ProfileService()
    return await service.update_profile(username, data, partial=partial)


@router.delete(
    "/{username}",
    response_model=DeleteProfileResponse,
    summary="Delete a user's profile",
    responses={404: {"description": "User not found"}},
)
async def delete_user_profile(username: str) -> DeleteProfileResponse:
    """Delete a user's profile.

    Args:
        username: Username of the profile to delete.

    Returns:
        DeleteProfileResponse: Confirmation message and status.
    """
    service = ProfileService()
    return await service.delete_profile(username)
