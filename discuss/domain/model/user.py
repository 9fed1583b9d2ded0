"""User aggregate root.

Users sign in through an OAuth provider. The profile fields mirror
what the provider hands back.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None  # Avatar URL
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
