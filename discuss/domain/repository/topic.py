"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.topic import Topic
from discuss.domain.value import TopicSlug


class TopicRepository(ABC):
    """Repository for Topic entity.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find a topic by its unique slug.

        Args:
            slug: Topic slug

        Returns:
            The topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Topic]:
        """Find all topics, oldest first."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic.

        Raises:
            StorageError: If the slug is already taken or the store fails
        """
        pass
