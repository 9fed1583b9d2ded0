"""Topic domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from discuss.domain.model.topic import Topic
from discuss.domain.repository import TopicRepository
from discuss.domain.value import TopicId, TopicSlug

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def create_topic(self, slug: TopicSlug, description: str) -> Topic:
        """Create a new topic.

        Args:
            slug: Unique topic slug
            description: Topic description

        Returns:
            Created topic

        Raises:
            StorageError: If the slug is taken or the store fails
        """
        with logfire.span("topic_service.create_topic", slug=slug.root):
            topic = Topic(
                id=TopicId(uuid4()),
                slug=slug,
                description=description,
                created_at=datetime.now(),
            )
            saved = await self.topic_repository.save(topic)
            logfire.info("Topic created", topic_id=str(saved.id), slug=slug.root)
            return saved

    async def get_topic_by_slug(self, slug: TopicSlug) -> Topic | None:
        """Get a topic by slug.

        Args:
            slug: Topic slug

        Returns:
            Topic if found, None otherwise
        """
        with logfire.span("topic_service.get_topic_by_slug", slug=slug.root):
            topic = await self.topic_repository.find_by_slug(slug)
            if topic:
                logfire.info("Topic found", slug=slug.root, topic_id=str(topic.id))
            else:
                logfire.warn("Topic not found", slug=slug.root)
            return topic

    async def list_topics(self) -> list[Topic]:
        """List all topics."""
        with logfire.span("topic_service.list_topics"):
            topics = await self.topic_repository.find_all()
            logfire.info("Topics listed", count=len(topics))
            return topics
