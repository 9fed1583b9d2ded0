"""In-memory user identity repository for testing."""

from typing import Optional

from discuss.domain.model.user_identity import UserIdentity
from discuss.domain.repository.user_identity import UserIdentityRepository
from discuss.domain.value import AuthProvider, UserIdentityId


class InMemoryUserIdentityRepository(UserIdentityRepository):
    """In-memory implementation of UserIdentityRepository for testing."""

    def __init__(self) -> None:
        self._identities: dict[UserIdentityId, UserIdentity] = {}

    async def find_by_provider(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[UserIdentity]:
        """Find identity by provider account."""
        for identity in self._identities.values():
            if (
                identity.provider == provider
                and identity.provider_user_id == provider_user_id
            ):
                return identity
        return None

    async def save(self, identity: UserIdentity) -> UserIdentity:
        """Save an identity."""
        self._identities[identity.id] = identity
        return identity
