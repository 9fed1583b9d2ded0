"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.post import PostgresPostRepository
from discuss.persistence.repository.topic import PostgresTopicRepository
from discuss.persistence.repository.user import PostgresUserRepository
from discuss.persistence.repository.user_identity import (
    PostgresUserIdentityRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresUserIdentityRepository",
    "PostgresTopicRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
