"""Domain model entities for Discuss."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.post import Post, PostSummary
from discuss.domain.model.topic import Topic
from discuss.domain.model.user import User
from discuss.domain.model.user_identity import UserIdentity

__all__ = [
    "User",
    "UserIdentity",
    "Topic",
    "Post",
    "PostSummary",
    "Comment",
]
