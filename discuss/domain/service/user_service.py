"""User domain service."""

from datetime import datetime

import logfire

from discuss.domain.model import User
from discuss.domain.repository import UserRepository
from discuss.domain.value import OAuthProviderInfo, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if the user doesn't exist."""
        with logfire.span("user_service.find_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def save(self, user: User) -> User:
        """Save a user."""
        with logfire.span("user_service.save", user_id=str(user.id)):
            return await self.user_repository.save(user)

    async def refresh_profile(self, user: User, info: OAuthProviderInfo) -> User:
        """Copy the provider's current profile onto an existing user.

        Args:
            user: Existing user
            info: Profile returned by the provider on this sign-in

        Returns:
            Saved user
        """
        with logfire.span("user_service.refresh_profile", user_id=str(user.id)):
            updated = user.model_copy(
                update={
                    "name": info.display_name or info.login,
                    "email": info.email or user.email,
                    "image": info.avatar_url or user.image,
                    "updated_at": datetime.now(),
                }
            )
            return await self.user_repository.save(updated)
