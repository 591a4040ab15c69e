"""User activity API routes."""

from fastapi import APIRouter, Query

from src.schemas.profile import UserActivityResponse
from src.services.profile_service import ProfileService

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get(
    "",
    response_model=UserActivityResponse,
    summary="Get a user's activities",
    description="Activity tracking is not implemented; the list is always empty.",
)
async def get_user_activities(
    email: str = Query(..., description="Email address of the user"),
) -> UserActivityResponse:
    """Get a user's activity feed."""
    service = ProfileService()
    return await service.get_user_activities(email)
