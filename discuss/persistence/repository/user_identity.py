"""UserIdentity repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model.user_identity import UserIdentity
from discuss.domain.repository.user_identity import UserIdentityRepository
from discuss.domain.value import AuthProvider
from discuss.persistence.database import execute_write
from discuss.persistence.mappers import row_to_user_identity, user_identity_to_dict
from discuss.persistence.tables import user_identities_table


class PostgresUserIdentityRepository(UserIdentityRepository):
    """PostgreSQL implementation of UserIdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, identity: UserIdentity) -> UserIdentity:
        """Save user identity to database.

        Args:
            identity: UserIdentity to save

        Returns:
            Saved UserIdentity
        """
        identity_dict = user_identity_to_dict(identity)

        stmt = select(user_identities_table.c.id).where(
            user_identities_table.c.id == identity.id
        )
        exists = (await self.session.execute(stmt)).first() is not None

        if exists:
            write = (
                user_identities_table.update()
                .where(user_identities_table.c.id == identity.id)
                .values(**identity_dict)
            )
        else:
            write = user_identities_table.insert().values(**identity_dict)

        await execute_write(self.session, write)
        return identity

    async def find_by_provider(
        self, provider: AuthProvider, provider_user_id: str
    ) -> Optional[UserIdentity]:
        """Get user identity by provider and provider user ID.

        Args:
            provider: Authentication provider
            provider_user_id: Provider-specific user ID

        Returns:
            UserIdentity if found, None otherwise
        """
        stmt = select(user_identities_table).where(
            user_identities_table.c.provider == provider.value,
            user_identities_table.c.provider_user_id == provider_user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_user_identity(dict(row))
