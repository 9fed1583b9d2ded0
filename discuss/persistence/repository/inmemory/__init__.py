"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .topic import InMemoryTopicRepository
from .user import InMemoryUserRepository
from .user_identity import InMemoryUserIdentityRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryTopicRepository",
    "InMemoryUserRepository",
    "InMemoryUserIdentityRepository",
]
