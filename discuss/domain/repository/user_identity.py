"""User identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.user_identity import UserIdentity
from discuss.domain.value import AuthProvider


class UserIdentityRepository(ABC):
    """Repository for provider identities linked to users."""

    @abstractmethod
    async def find_by_provider(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[UserIdentity]:
        """Find the identity for a provider account.

        Args:
            provider: Authentication provider
            provider_user_id: Provider-side account ID

        Returns:
            The identity if the account has signed in before, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, identity: UserIdentity) -> UserIdentity:
        """Save an identity (create or update)."""
        pass
