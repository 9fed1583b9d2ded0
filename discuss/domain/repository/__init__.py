"""Repository interfaces for the Discuss domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.post import PostRepository
from discuss.domain.repository.topic import TopicRepository
from discuss.domain.repository.user import UserRepository
from discuss.domain.repository.user_identity import UserIdentityRepository

__all__ = [
    "UserRepository",
    "UserIdentityRepository",
    "TopicRepository",
    "PostRepository",
    "CommentRepository",
]
