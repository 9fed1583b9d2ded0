"""User identity entity linking a user to an OAuth provider account."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import AuthProvider, UserId, UserIdentityId


class UserIdentity(DomainModel):
    """Link between a user and a provider account."""

    id: UserIdentityId
    user_id: UserId
    provider: AuthProvider
    provider_user_id: str
    provider_login: str
    created_at: datetime = Field(default_factory=datetime.now)
    last_login_at: Optional[datetime] = None
