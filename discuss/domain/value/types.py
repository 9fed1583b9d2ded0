"""Domain value objects for Discuss."""

import re
from enum import Enum
from typing import Optional

from pydantic import ValidationError, field_validator

from discuss.domain.value.common import RootValueObject, ValueObject

TOPIC_SLUG_PATTERN = re.compile(r"^[a-z-]+$")


class TopicSlug(RootValueObject[str]):
    """URL slug identifying a topic.

    Lowercase letters and hyphens only, at least 3 characters.
    Examples: 'javascript', 'machine-learning'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 3:
            raise ValueError("Topic slug must be at least 3 characters")
        if not TOPIC_SLUG_PATTERN.match(v):
            raise ValueError("Topic slug must contain only lowercase letters and hyphens")
        return v

    @classmethod
    def parse(cls, raw: str) -> Optional["TopicSlug"]:
        """Parse a slug taken from a URL, or None if it can't name a topic."""
        try:
            return cls(raw)
        except ValidationError:
            return None


class AuthProvider(str, Enum):
    """Supported authentication providers."""

    GITHUB = "github"


class OAuthProviderInfo(ValueObject):
    """User info returned by an OAuth provider."""

    provider: AuthProvider
    provider_user_id: str  # Permanent provider-side ID
    login: str
    email: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
