"""Comment entity.

Comments are replies on a post. A comment either sits at the top level
(``parent_id`` is None) or answers another comment of the same post, so
all comments of one post form a forest.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Comments are never edited or deleted on their own; they disappear
    only when their post is deleted.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_name: Optional[str] = None  # Denormalized from users
    author_image: Optional[str] = None  # Denormalized from users
    content: str = Field(min_length=3)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None
