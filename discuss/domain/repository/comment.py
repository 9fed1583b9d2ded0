"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post, newest first.

        The result is flat; threading is rebuilt from parent_id by the
        comment tree functions.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Raises:
            StorageError: If the store rejects the insert
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments removed
        """
        pass
