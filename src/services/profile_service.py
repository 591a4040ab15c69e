"""Profile business logic service."""

import logging

from src.api.middleware.error_handler import InternalError, NotFoundError
from src.core.store import DuplicateRecordError, ProfileStore, StoreError, SupabaseProfileStore
from src.models.profile import Profile
from src.schemas.profile import (
    DeleteProfileResponse,
    FullProfileResponse,
    ProfileUpdate,
    PublicProfileResponse,
    UpdateProfileResponse,
    UserActivityResponse,
)
from src.services.error_mapping import to_api_error
from src.services.profile_merge import build_replacement, merge_profile

logger = logging.getLogger(__name__)

DELETE_SUCCESS_MESSAGE = "user has been deleted successfully"
DELETE_SUCCESS_STATUS = "200"


class ProfileService:
    """Service for reading and mutating user profiles.

    Mutations are check-then-write without a transaction; concurrent
    updates to the same username are last-writer-wins.
    """

    def __init__(self, store: ProfileStore | None = None) -> None:
        """Initialize profile service.

        Args:
            store: Optional profile store for testing.
        """
        self.store = store or SupabaseProfileStore()

    async def get_profile(
        self,
        username: str,
        is_private: bool = False,
    ) -> PublicProfileResponse | FullProfileResponse:
        """Get a profile view.

        The public view is read directly. The full view first checks that
        the username exists so that a missing user and a failed fetch are
        reported as different errors.

        Args:
            username: Username to look up.
            is_private: Return the full view instead of the public one.

        Returns:
            PublicProfileResponse | FullProfileResponse: The requested view.

        Raises:
            NotFoundError: If the username does not exist.
            InternalError: If the store fails.
        """
        logger.info(
            "user %s has requested %s profile info",
            username,
            "private" if is_private else "public",
        )

        if not is_private:
            try:
                row = self.store.get_public_profile(username)
            except StoreError as e:
                logger.error("could not fetch public profile of %s: %s", username, e)
                raise to_api_error(e, username, "fetching the profile") from e
            return PublicProfileResponse.model_validate(row)

        await self._ensure_exists(username)
        row = self._get_existing_profile(username)

        return FullProfileResponse.model_validate(row)

    async def update_profile(
        self,
        username: str,
        data: ProfileUpdate,
        partial: bool = True,
    ) -> UpdateProfileResponse:
        """Update a profile.

        A partial update merges the supplied fields into the stored profile.
        A full update replaces every writable column with the request.

        Args:
            username: Current username of the profile.
            data: The fields to write.
            partial: Merge into the stored profile instead of replacing it.

        Returns:
            UpdateProfileResponse: The username after the update.

        Raises:
            NotFoundError: If the username does not exist.
            ValidationError: If the request cannot be applied.
            ConflictError: If a rename clashes with another username.
            InternalError: If the store fails.
        """
        logger.info("user %s is updating the profile (partial=%s)", username, partial)

        await self._ensure_exists(username)

        if partial:
            existing = self._get_existing_profile(username)
            record = merge_profile(existing, data)
        else:
            record = build_replacement(data)

        try:
            stored = self.store.update_profile(username, record)
        except StoreError as e:
            logger.error("could not update the profile of %s: %s", username, e)
            raise to_api_error(e, username, "updating the profile") from e

        return UpdateProfileResponse(username=stored.get("username") or record.get("username", username))

    async def delete_profile(self, username: str) -> DeleteProfileResponse:
        """Delete a profile.

        Deleting a username that does not exist is an error, not a no-op.

        Raises:
            NotFoundError: If the username does not exist.
            InternalError: If the store fails.
        """
        logger.info("user %s has requested to delete the profile", username)

        await self._ensure_exists(username)

        try:
            self.store.delete_profile(username)
        except StoreError as e:
            logger.error("could not delete the user profile: %s", e)
            raise to_api_error(e, username, "deleting the profile") from e

        return DeleteProfileResponse(success=DELETE_SUCCESS_MESSAGE, status=DELETE_SUCCESS_STATUS)

    async def get_user_activities(self, email: str) -> UserActivityResponse:
        """Get the activity feed for a user.

        Activities are not recorded yet, so the feed is always empty.
        """
        logger.info("fetching user activities for %s", email)
        return UserActivityResponse(email=email)

    async def _ensure_exists(self, username: str) -> None:
        try:
            exists = self.store.check_username_exists(username)
        except StoreError as e:
            logger.error("could not check username %s: %s", username, e)
            raise to_api_error(e, username, "checking the username") from e

        if not exists:
            logger.warning("the user %s doesn't exist", username)
            raise NotFoundError(f"user {username} doesn't exist")

    def _get_existing_profile(self, username: str) -> Profile:
        """Fetch the full row of a username that passed the existence check.

        A missing row at this point is a fetch failure, not an unknown user.
        """
        try:
            return self.store.get_full_profile(username)
        except DuplicateRecordError as e:
            raise to_api_error(e, username, "finding the user profile") from e
        except StoreError as e:
            logger.error("error while finding the user profile: %s", e)
            raise InternalError("error while finding the user profile") from e
