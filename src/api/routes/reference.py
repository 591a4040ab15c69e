"""Reference data API routes."""

from fastapi import APIRouter

from src.schemas.reference import CategoryResponse, TopicResponse
from src.services.reference_data_service import ReferenceDataService

router = APIRouter(tags=["reference"])


@router.get(
    "/topics",
    response_model=list[TopicResponse],
    summary="List topics",
)
async def get_all_topics() -> list[TopicResponse]:
    """Return every topic with its category."""
    service = ReferenceDataService()
    return await service.list_topics()


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def get_all_categories() -> list[CategoryResponse]:
    """Return every category with the topics filed under it."""
    service = ReferenceDataService()
    return await service.list_categories()
