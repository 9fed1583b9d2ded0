"""Session domain service.

Resolves the signed-in user from the session token.
"""

from uuid import UUID

import logfire

from discuss.domain.model import User
from discuss.domain.repository import UserRepository
from discuss.domain.value import UserId

from .base import Service
from .jwt_service import JWTService


class SessionService(Service):
    """Domain service for session lookups."""

    def __init__(self, jwt_service: JWTService, user_repository: UserRepository):
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def get_current_user(self, token: str | None) -> User | None:
        """Get the user the session token belongs to.

        Args:
            token: Session token, if any

        Returns:
            The user, or None when the token is missing, invalid, expired or
            names a user that no longer exists
        """
        user_id = self.jwt_service.get_user_id_from_token(token)
        if not user_id:
            return None

        try:
            parsed = UserId(UUID(user_id))
        except ValueError:
            logfire.warn("Malformed user ID in token", user_id=user_id)
            return None

        user = await self.user_repository.find_by_id(parsed)
        if not user:
            logfire.warn("Session user no longer exists", user_id=user_id)
        return user
