"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.post import Post, PostSummary
from discuss.domain.value import PostId, TopicId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_summary(self, post_id: PostId) -> Optional[PostSummary]:
        """Find a post together with its topic slug and comment count."""
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[PostSummary]:
        """Find the posts of a topic, newest first.

        Args:
            topic_id: Topic ID

        Returns:
            Post summaries ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[PostSummary]:
        """Find the posts a user wrote, newest first.

        Args:
            author_id: Author's user ID

        Returns:
            Post summaries ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_top(self, limit: int = 5) -> List[PostSummary]:
        """Find the most commented posts.

        Ties on comment count are broken by newest first.

        Args:
            limit: Maximum number of posts to return

        Returns:
            Post summaries ordered by comment count, then created_at, descending
        """
        pass

    @abstractmethod
    async def search(self, term: str) -> List[PostSummary]:
        """Find posts whose title or content contains the term, newest first.

        Args:
            term: Substring to look for

        Returns:
            Matching post summaries
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Raises:
            StorageError: If the store rejects the insert
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, title: str, content: str
    ) -> Optional[Post]:
        """Replace the title and content of a post.

        Args:
            post_id: ID of the post to update
            title: New title
            content: New content

        Returns:
            Updated post, or None if the post doesn't exist

        Raises:
            StorageError: If the store rejects the update
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Raises:
            StorageError: If the store rejects the delete
        """
        pass
