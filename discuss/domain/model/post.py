"""Post aggregate root.

A post is a discussion thread inside exactly one topic. Only its author
may edit or delete it; deleting a post removes all of its comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import PostId, TopicId, TopicSlug, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    topic_id: TopicId
    author_id: UserId
    author_name: Optional[str] = None  # Denormalized from users
    title: str = Field(min_length=3)
    content: str = Field(min_length=10)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def is_authored_by(self, user_id: UserId) -> bool:
        """Whether the given user wrote this post."""
        return self.author_id == user_id


class PostSummary(DomainModel):
    """Post with the data listings show next to it."""

    post: Post
    topic_slug: TopicSlug
    comment_count: int = Field(default=0, ge=0)
