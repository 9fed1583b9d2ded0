"""In-memory topic repository for testing."""

from typing import Optional

from discuss.domain.error import StorageError
from discuss.domain.model.topic import Topic
from discuss.domain.repository.topic import TopicRepository
from discuss.domain.value import TopicId, TopicSlug


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self) -> None:
        self._topics: dict[TopicId, Topic] = {}

    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find a topic by slug."""
        for topic in self._topics.values():
            if topic.slug == slug:
                return topic
        return None

    async def find_all(self) -> list[Topic]:
        """Find all topics, oldest first."""
        return sorted(self._topics.values(), key=lambda t: t.created_at)

    async def save(self, topic: Topic) -> Topic:
        """Insert a topic, enforcing unique slugs."""
        if await self.find_by_slug(topic.slug):
            raise StorageError(f"Topic slug already exists: {topic.slug.root}")
        self._topics[topic.id] = topic
        return topic
