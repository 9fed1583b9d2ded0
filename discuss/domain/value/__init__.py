"""Domain value objects for Discuss."""

from discuss.domain.value.identifiers import (
    CommentId,
    PostId,
    TopicId,
    UserId,
    UserIdentityId,
)
from discuss.domain.value.types import AuthProvider, OAuthProviderInfo, TopicSlug

__all__ = [
    # Identifiers
    "UserId",
    "UserIdentityId",
    "TopicId",
    "PostId",
    "CommentId",
    # Types
    "TopicSlug",
    "AuthProvider",
    "OAuthProviderInfo",
]
