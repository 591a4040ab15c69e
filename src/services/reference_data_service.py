"""Reference data (topics and categories) service."""

import logging

from src.api.middleware.error_handler import InternalError
from src.core.store import ProfileStore, RecordNotFoundError, StoreError, SupabaseProfileStore
from src.schemas.reference import CategoryResponse, TopicResponse

logger = logging.getLogger(__name__)


class ReferenceDataService:
    """Service for listing static lookup collections.

    Callers get one generic error for any failure; a missing-rows failure
    is only distinguished in the logs.
    """

    def __init__(self, store: ProfileStore | None = None) -> None:
        """Initialize reference data service.

        Args:
            store: Optional store for testing.
        """
        self.store = store or SupabaseProfileStore()

    async def list_topics(self) -> list[TopicResponse]:
        """List every topic.

        Raises:
            InternalError: If the topics cannot be read.
        """
        logger.info("getting all the topics")
        try:
            rows = self.store.list_topics()
        except RecordNotFoundError as e:
            logger.error("cannot find the topics in the database: %s", e)
            raise InternalError("error while querying the topics") from e
        except StoreError as e:
            logger.error("error while querying the topics: %s", e)
            raise InternalError("error while querying the topics") from e

        return [TopicResponse.model_validate(row) for row in rows]

    async def list_categories(self) -> list[CategoryResponse]:
        """List categories with the topics filed under each.

        Categories keep the order the store returns them in.

        Raises:
            InternalError: If the categories cannot be read.
        """
        logger.info("getting all the descriptions and categories")
        try:
            rows = self.store.list_categories()
        except RecordNotFoundError as e:
            logger.error("no categories and descriptions found in the database: %s", e)
            raise InternalError("error while querying the categories") from e
        except StoreError as e:
            logger.error("error while querying the categories: %s", e)
            raise InternalError("error while querying the categories") from e

        grouped: dict[str, list[str]] = {}
        for row in rows:
            grouped.setdefault(row["category"], []).append(row["description"])

        return [CategoryResponse(category=category, topics=topics) for category, topics in grouped.items()]
